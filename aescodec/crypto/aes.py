"""AES-128/192/256 in ECB/CBC/CFB/OFB over block-aligned data (cryptography library)."""

import logging
from typing import Union

from cryptography.hazmat.decrepit.ciphers import modes as decrepit_modes
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.backends import default_backend

from aescodec.common.config import Mode, parse_mode
from aescodec.common.errors import InvalidIVLength, InvalidKeyLength, MisalignedInput

logger = logging.getLogger(__name__)

AES_BLOCK_SIZE_BYTES = algorithms.AES.block_size // 8
AES_KEY_SIZES = (16, 24, 32)

# Mode -> factory taking the IV. CFB here is full-block (128-bit segment) CFB;
# cryptography keeps CFB and OFB in its decrepit namespace.
_MODE_FACTORIES = {
    Mode.ECB: lambda iv: modes.ECB(),
    Mode.CBC: modes.CBC,
    Mode.CFB: decrepit_modes.CFB,
    Mode.OFB: decrepit_modes.OFB,
}

IV_MODES = frozenset({Mode.CBC, Mode.CFB, Mode.OFB})


def new_cipher(key: bytes, iv: bytes = b"", mode: Union[Mode, str] = Mode.CBC) -> Cipher:
    """
    Build an AES Cipher for the given mode after validating key and IV.

    Args:
        key: 16, 24 or 32-byte AES key
        iv: one block for CBC/CFB/OFB, ignored for ECB
        mode: chaining mode

    Returns:
        cryptography Cipher object

    Raises:
        UnsupportedMode, InvalidKeyLength, InvalidIVLength
    """
    mode = parse_mode(mode)

    if len(key) not in AES_KEY_SIZES:
        raise InvalidKeyLength(
            f"AES key must be 16, 24 or 32 bytes, got {len(key)}"
        )

    if mode in IV_MODES and len(iv) != AES_BLOCK_SIZE_BYTES:
        raise InvalidIVLength(
            f"{mode.value.upper()} needs a {AES_BLOCK_SIZE_BYTES}-byte IV, got {len(iv)}"
        )

    return Cipher(algorithms.AES(key), _MODE_FACTORIES[mode](iv), backend=default_backend())


def _check_aligned(data: bytes):
    if len(data) % AES_BLOCK_SIZE_BYTES:
        raise MisalignedInput(
            f"Input length {len(data)} is not a multiple of the "
            f"{AES_BLOCK_SIZE_BYTES}-byte block size"
        )


def encrypt_blocks(data: bytes, key: bytes, iv: bytes = b"",
                   mode: Union[Mode, str] = Mode.CBC) -> bytes:
    """
    Encrypt block-aligned (already padded) plaintext.

    Key, IV and alignment are all checked before any block is touched, so a
    failure never yields partial ciphertext.

    Returns:
        ciphertext, same length as data

    Raises:
        UnsupportedMode, InvalidKeyLength, InvalidIVLength, MisalignedInput
    """
    cipher = new_cipher(key, iv, mode)
    _check_aligned(data)

    encryptor = cipher.encryptor()
    ciphertext = encryptor.update(data) + encryptor.finalize()
    logger.debug(f"Encrypted {len(data)} bytes with AES-{len(key) * 8}-{cipher.mode.name}")
    return ciphertext


def decrypt_blocks(data: bytes, key: bytes, iv: bytes = b"",
                   mode: Union[Mode, str] = Mode.CBC) -> bytes:
    """
    Decrypt block-aligned ciphertext. Padding is left in place.

    Returns:
        padded plaintext, same length as data

    Raises:
        UnsupportedMode, InvalidKeyLength, InvalidIVLength, MisalignedInput
    """
    cipher = new_cipher(key, iv, mode)
    _check_aligned(data)

    decryptor = cipher.decryptor()
    plaintext = decryptor.update(data) + decryptor.finalize()
    logger.debug(f"Decrypted {len(data)} bytes with AES-{len(key) * 8}-{cipher.mode.name}")
    return plaintext
