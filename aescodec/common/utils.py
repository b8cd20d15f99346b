"""Helper signatures: b64e, b64d, hex_encode, hex_decode, to_bytes."""

import base64
import binascii
from typing import Union

from .errors import EncodingError


def to_bytes(data: Union[bytes, bytearray, str]) -> bytes:
    """Return data as bytes, UTF-8 encoding it if it is a string."""
    if isinstance(data, str):
        return data.encode('utf-8')
    return bytes(data)


def b64e(b: bytes) -> str:
    """Encode bytes to a standard (RFC 4648 §4) base64 string with padding."""
    return base64.b64encode(b).decode('ascii')


def b64d(s: Union[str, bytes]) -> bytes:
    """
    Decode a standard base64 string to bytes.

    Decoding is strict: characters outside the alphabet or broken '='
    padding are rejected instead of silently discarded.

    Raises:
        EncodingError if s is not valid base64
    """
    try:
        return base64.b64decode(s, validate=True)
    except ValueError as e:
        # binascii.Error for bad data, plain ValueError for non-ASCII str
        raise EncodingError(f"Invalid base64 input: {e}") from e


def hex_encode(b: bytes) -> str:
    """Encode bytes to lowercase hex, two characters per byte."""
    return binascii.hexlify(b).decode('ascii')


def hex_decode(s: Union[str, bytes]) -> bytes:
    """
    Decode a hex string (either case) to bytes.

    Raises:
        EncodingError on odd length or non-hex characters
    """
    try:
        return binascii.unhexlify(s)
    except ValueError as e:
        raise EncodingError(f"Invalid hex input: {e}") from e
