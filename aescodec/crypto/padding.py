"""
Padding stage: PKCS#5/PKCS#7, zero, ISO 10126 and ANSI X9.23 padding.

Every scheme appends n = block_size - (len(data) % block_size) bytes, so
already aligned input (including empty input) gets a whole extra block.

Zero padding caveat: unpadding strips *all* trailing zero bytes, so a
plaintext that itself ends in 0x00 bytes loses them on the way back. That is
inherent to the scheme; use PKCS#7 for binary data.
"""

import logging
import os
from typing import Union

from cryptography.hazmat.primitives import padding as sym_padding

from aescodec.common.config import Padding, parse_padding
from aescodec.common.errors import PaddingError
from aescodec.common.utils import to_bytes
from aescodec.crypto.aes import AES_BLOCK_SIZE_BYTES

logger = logging.getLogger(__name__)


def _pad_length(data: bytes, block_size: int) -> int:
    return block_size - len(data) % block_size


def _pkcs7_pad(data: bytes, block_size: int) -> bytes:
    padder = sym_padding.PKCS7(block_size * 8).padder()
    return padder.update(data) + padder.finalize()


def _ansix923_pad(data: bytes, block_size: int) -> bytes:
    padder = sym_padding.ANSIX923(block_size * 8).padder()
    return padder.update(data) + padder.finalize()


def _zero_pad(data: bytes, block_size: int) -> bytes:
    return data + b"\x00" * _pad_length(data, block_size)


def _iso10126_pad(data: bytes, block_size: int) -> bytes:
    n = _pad_length(data, block_size)
    # os.urandom raises if the OS has no secure source; never fall back
    return data + os.urandom(n - 1) + bytes([n])


def _pkcs7_unpad(data: bytes, block_size: int) -> bytes:
    unpadder = sym_padding.PKCS7(block_size * 8).unpadder()
    try:
        return unpadder.update(data) + unpadder.finalize()
    except ValueError as e:
        raise PaddingError(f"Invalid PKCS#7 padding: {e}") from e


def _ansix923_unpad(data: bytes, block_size: int) -> bytes:
    unpadder = sym_padding.ANSIX923(block_size * 8).unpadder()
    try:
        return unpadder.update(data) + unpadder.finalize()
    except ValueError as e:
        raise PaddingError(f"Invalid ANSI X9.23 padding: {e}") from e


def _zero_unpad(data: bytes, block_size: int) -> bytes:
    return data.rstrip(b"\x00")


def _iso10126_unpad(data: bytes, block_size: int) -> bytes:
    # Filler bytes are random, only the trailing count is checked
    n = data[-1]
    if n < 1 or n > block_size:
        raise PaddingError(f"Invalid ISO 10126 padding count: {n}")
    return data[:-n]


_PADDERS = {
    Padding.PKCS5: _pkcs7_pad,
    Padding.PKCS7: _pkcs7_pad,
    Padding.ZERO: _zero_pad,
    Padding.ISO10126: _iso10126_pad,
    Padding.ANSIX923: _ansix923_pad,
}

_UNPADDERS = {
    Padding.PKCS5: _pkcs7_unpad,
    Padding.PKCS7: _pkcs7_unpad,
    Padding.ZERO: _zero_unpad,
    Padding.ISO10126: _iso10126_unpad,
    Padding.ANSIX923: _ansix923_unpad,
}


def _check_block_size(block_size: int):
    if not 1 <= block_size <= 255:
        raise PaddingError(f"Block size must be between 1 and 255 bytes, got {block_size}")


def pad(data: Union[bytes, str], block_size: int = AES_BLOCK_SIZE_BYTES,
        scheme: Union[Padding, str] = Padding.PKCS7) -> bytes:
    """
    Pad data to a positive multiple of block_size.

    Args:
        data: plaintext (str is UTF-8 encoded)
        block_size: cipher block size in bytes
        scheme: padding scheme

    Returns:
        padded data, always strictly longer than the input

    Raises:
        UnsupportedPadding for an unknown scheme
        PaddingError for a block size outside 1..255
    """
    scheme = parse_padding(scheme)
    _check_block_size(block_size)
    data = to_bytes(data)

    padded = _PADDERS[scheme](data, block_size)
    logger.debug(f"Padded {len(data)} -> {len(padded)} bytes ({scheme.value})")
    return padded


def unpad(data: bytes, scheme: Union[Padding, str] = Padding.PKCS7,
          block_size: int = AES_BLOCK_SIZE_BYTES) -> bytes:
    """
    Strip padding added by pad().

    Args:
        data: decrypted, still padded data
        scheme: padding scheme used when encrypting
        block_size: cipher block size in bytes

    Returns:
        original data

    Raises:
        UnsupportedPadding for an unknown scheme
        PaddingError if data is empty, misaligned or has a corrupt trailer,
            or block_size is outside 1..255
    """
    scheme = parse_padding(scheme)
    _check_block_size(block_size)
    data = bytes(data)

    if not data:
        raise PaddingError("Cannot unpad empty input: at least one padded block is required")
    if len(data) % block_size:
        raise PaddingError(
            f"Padded length {len(data)} is not a multiple of block size {block_size}"
        )

    stripped = _UNPADDERS[scheme](data, block_size)
    logger.debug(f"Unpadded {len(data)} -> {len(stripped)} bytes ({scheme.value})")
    return stripped
