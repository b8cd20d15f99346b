"""Common utilities, configuration and error definitions."""

from .utils import (
    b64e,
    b64d,
    hex_encode,
    hex_decode,
    to_bytes,
)
from .errors import (
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
)
from .config import (
    Mode,
    Padding,
    Encoding,
    CipherConfig,
    config_from_env,
    decode_secret,
)
from .encoding import render, parse

__all__ = [
    "b64e",
    "b64d",
    "hex_encode",
    "hex_decode",
    "to_bytes",
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
    "Mode",
    "Padding",
    "Encoding",
    "CipherConfig",
    "config_from_env",
    "decode_secret",
    "render",
    "parse",
]
