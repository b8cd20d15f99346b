"""AES convenience layer: padding, block modes and text encodings in one call."""

from .common import (
    CipherConfig,
    Mode,
    Padding,
    Encoding,
    Stage,
    CipherError,
    ConfigError,
    InvalidKeyLength,
    InvalidIVLength,
    UnsupportedMode,
    UnsupportedPadding,
    UnsupportedEncoding,
    MisalignedInput,
    EncodingError,
    PaddingError,
    config_from_env,
    render,
    parse,
)
from .crypto import pad, unpad, encrypt_blocks, decrypt_blocks
from .pipeline import encrypt, decrypt, decrypt_text, encrypt_bytes, decrypt_bytes

__version__ = "1.0.0"

__all__ = [
    "CipherConfig",
    "Mode",
    "Padding",
    "Encoding",
    "Stage",
    "CipherError",
    "ConfigError",
    "InvalidKeyLength",
    "InvalidIVLength",
    "UnsupportedMode",
    "UnsupportedPadding",
    "UnsupportedEncoding",
    "MisalignedInput",
    "EncodingError",
    "PaddingError",
    "config_from_env",
    "render",
    "parse",
    "pad",
    "unpad",
    "encrypt_blocks",
    "decrypt_blocks",
    "encrypt",
    "decrypt",
    "decrypt_text",
    "encrypt_bytes",
    "decrypt_bytes",
]
