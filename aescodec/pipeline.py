"""
Cipher pipeline: pad -> AES mode -> text encoding, and the exact mirror.

Every function takes the CipherConfig per call and keeps nothing between
calls, so they are safe to use from several threads at once.
"""

import logging
from typing import Union

from aescodec.common.config import CipherConfig
from aescodec.common.encoding import parse, render
from aescodec.common.errors import EncodingError
from aescodec.common.utils import to_bytes
from aescodec.crypto.aes import AES_BLOCK_SIZE_BYTES, decrypt_blocks, encrypt_blocks
from aescodec.crypto.padding import pad, unpad

logger = logging.getLogger(__name__)


def encrypt_bytes(plaintext: Union[bytes, str], config: CipherConfig) -> bytes:
    """
    Pad and encrypt plaintext, returning raw ciphertext bytes.

    Args:
        plaintext: data to encrypt (str is UTF-8 encoded)
        config: cipher configuration

    Returns:
        ciphertext (length is a positive multiple of 16)
    """
    padded = pad(to_bytes(plaintext), AES_BLOCK_SIZE_BYTES, config.padding)
    return encrypt_blocks(padded, config.key, config.iv, config.mode)


def decrypt_bytes(ciphertext: bytes, config: CipherConfig) -> bytes:
    """
    Decrypt raw ciphertext bytes and strip the padding.

    Args:
        ciphertext: output of encrypt_bytes()
        config: the configuration used to encrypt

    Returns:
        original plaintext bytes
    """
    padded = decrypt_blocks(bytes(ciphertext), config.key, config.iv, config.mode)
    return unpad(padded, config.padding, AES_BLOCK_SIZE_BYTES)


def encrypt(plaintext: Union[bytes, str], config: CipherConfig) -> str:
    """
    Encrypt plaintext and render the ciphertext as base64 or hex text.

    Example:
        >>> cfg = CipherConfig(mode="cbc", padding="pkcs7", encoding="base64",
        ...                    key="pwFHCqoQZGmho4w6", iv="EkRm7iFT261dpevs")
        >>> encrypt("hello world", cfg)
        'ajjTrSSO/Z11GxiPAphb7Q=='

    Raises:
        CipherError subclass tagged with the failing stage
    """
    text = render(encrypt_bytes(plaintext, config), config.encoding)
    logger.debug(f"Encrypted with {config!r}")
    return text


def decrypt(text: Union[str, bytes], config: CipherConfig) -> bytes:
    """
    Parse ciphertext text, decrypt it and strip the padding.

    Raises:
        CipherError subclass tagged with the failing stage
    """
    plaintext = decrypt_bytes(parse(text, config.encoding), config)
    logger.debug(f"Decrypted with {config!r}")
    return plaintext


def decrypt_text(text: Union[str, bytes], config: CipherConfig) -> str:
    """Like decrypt(), but decode the plaintext as UTF-8."""
    plaintext = decrypt(text, config)
    try:
        return plaintext.decode('utf-8')
    except UnicodeDecodeError as e:
        raise EncodingError(f"Decrypted data is not valid UTF-8: {e}") from e
