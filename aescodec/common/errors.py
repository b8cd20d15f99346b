"""Error hierarchy: every failure is tagged with the stage it came from."""

from enum import Enum


class Stage(str, Enum):
    """Pipeline stage an error originated in."""
    CONFIG = "config"
    PADDING = "padding"
    MODE = "mode"
    ENCODING = "encoding"


class CipherError(Exception):
    """Base class for all aescodec failures."""

    stage: Stage = Stage.CONFIG

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"[{self.stage.value}] {self.message}"


class ConfigError(CipherError):
    """Raised when a configuration cannot be assembled (e.g. missing key)."""
    stage = Stage.CONFIG


class InvalidKeyLength(CipherError):
    """Raised when the AES key is not 16, 24 or 32 bytes."""
    stage = Stage.MODE


class InvalidIVLength(CipherError):
    """Raised when a chaining mode gets an IV that is not one block long."""
    stage = Stage.MODE


class UnsupportedMode(CipherError):
    stage = Stage.MODE


class MisalignedInput(CipherError):
    """Raised when block-mode input is not a multiple of the block size."""
    stage = Stage.MODE


class UnsupportedPadding(CipherError):
    stage = Stage.PADDING


class PaddingError(CipherError):
    """Raised when the padding trailer is missing or corrupt."""
    stage = Stage.PADDING


class UnsupportedEncoding(CipherError):
    stage = Stage.ENCODING


class EncodingError(CipherError):
    """Raised when ciphertext text is not valid for its encoding."""
    stage = Stage.ENCODING
