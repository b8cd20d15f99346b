"""Padding and AES block-mode stages."""

from .aes import new_cipher, encrypt_blocks, decrypt_blocks, AES_BLOCK_SIZE_BYTES
from .padding import pad, unpad

__all__ = [
    "new_cipher",
    "encrypt_blocks",
    "decrypt_blocks",
    "AES_BLOCK_SIZE_BYTES",
    "pad",
    "unpad",
]
