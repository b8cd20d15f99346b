"""Pydantic cipher configuration + .env loading."""

import os
from enum import Enum
from typing import Optional, Type

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import (
    CipherError,
    ConfigError,
    UnsupportedEncoding,
    UnsupportedMode,
    UnsupportedPadding,
)
from .utils import b64d, hex_decode


class Mode(str, Enum):
    """Block-cipher chaining modes."""
    ECB = "ecb"
    CBC = "cbc"
    CFB = "cfb"
    OFB = "ofb"


class Padding(str, Enum):
    """Padding schemes. PKCS5 is an alias of PKCS7 for 16-byte blocks."""
    PKCS5 = "pkcs5"
    PKCS7 = "pkcs7"
    ZERO = "zero"
    ISO10126 = "iso10126"
    ANSIX923 = "ansix923"


class Encoding(str, Enum):
    """Text encodings for ciphertext."""
    BASE64 = "base64"
    HEX = "hex"


def _coerce(enum_cls: Type[Enum], value, error_cls: Type[CipherError]):
    """Map an enum member or its (case-insensitive) string value to the member."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            pass
    raise error_cls(f"Unsupported {enum_cls.__name__.lower()}: {value!r}")


def parse_mode(value) -> Mode:
    return _coerce(Mode, value, UnsupportedMode)


def parse_padding(value) -> Padding:
    return _coerce(Padding, value, UnsupportedPadding)


def parse_encoding(value) -> Encoding:
    return _coerce(Encoding, value, UnsupportedEncoding)


class CipherConfig(BaseModel):
    """Everything one encrypt/decrypt call needs. Immutable once built."""
    model_config = ConfigDict(frozen=True)

    mode: Mode = Field(default=Mode.CBC)
    padding: Padding = Field(default=Padding.PKCS7)
    encoding: Encoding = Field(default=Encoding.BASE64)
    key: bytes  # AES-128/192/256 key; str values are UTF-8 encoded
    iv: bytes = Field(default=b"")  # one block for CBC/CFB/OFB, ignored by ECB

    @field_validator("mode", mode="before")
    @classmethod
    def check_mode(cls, v):
        return parse_mode(v)

    @field_validator("padding", mode="before")
    @classmethod
    def check_padding(cls, v):
        return parse_padding(v)

    @field_validator("encoding", mode="before")
    @classmethod
    def check_encoding(cls, v):
        return parse_encoding(v)

    def __repr__(self) -> str:
        # Keep key material out of logs and tracebacks
        return (
            f"CipherConfig(mode={self.mode.value}, padding={self.padding.value}, "
            f"encoding={self.encoding.value}, key=<{len(self.key)} bytes>, "
            f"iv=<{len(self.iv)} bytes>)"
        )

    __str__ = __repr__


def decode_secret(value: str) -> bytes:
    """
    Turn a key/IV string from the environment or command line into bytes.

    Plain text is UTF-8 encoded. A ``hex:`` or ``base64:`` prefix selects
    that codec instead, for keys that are not printable.

    Raises:
        ConfigError if the prefixed value does not decode
    """
    if value.startswith("hex:"):
        try:
            return hex_decode(value[4:])
        except CipherError as e:
            raise ConfigError(f"Bad hex secret: {e.message}") from e
    if value.startswith("base64:"):
        try:
            return b64d(value[7:])
        except CipherError as e:
            raise ConfigError(f"Bad base64 secret: {e.message}") from e
    return value.encode('utf-8')


def config_from_env(dotenv_path: Optional[str] = None, **overrides) -> CipherConfig:
    """
    Build a CipherConfig from AES_* environment variables.

    A .env file is loaded first (without overriding variables that are
    already set). Keyword overrides whose value is not None win over the
    environment.

    Args:
        dotenv_path: explicit .env file; default searches upward from the cwd
        **overrides: mode, padding, encoding, key, iv

    Returns:
        CipherConfig

    Raises:
        ConfigError if no key is configured
    """
    load_dotenv(dotenv_path or find_dotenv(usecwd=True))

    settings = {
        "mode": os.getenv("AES_MODE", Mode.CBC.value),
        "padding": os.getenv("AES_PADDING", Padding.PKCS7.value),
        "encoding": os.getenv("AES_ENCODING", Encoding.BASE64.value),
        "key": os.getenv("AES_KEY"),
        "iv": os.getenv("AES_IV", ""),
    }
    settings.update({k: v for k, v in overrides.items() if v is not None})

    if not settings["key"]:
        raise ConfigError("No AES key configured (set AES_KEY or pass --key)")

    for name in ("key", "iv"):
        if isinstance(settings[name], str):
            settings[name] = decode_secret(settings[name])

    return CipherConfig(**settings)
