#!/usr/bin/env python3
"""
Mode stage tests.

Test Cases:
1. NIST SP 800-38A AES-128 vectors for ECB, CBC, CFB128 and OFB
2. decrypt_blocks reverses encrypt_blocks
3. Key, IV and alignment are validated before any block is processed
4. Unknown modes are rejected
5. CFB/OFB come from a location that does not warn on import
"""

import importlib
import sys
import warnings

import pytest
from cryptography.utils import CryptographyDeprecationWarning

from harness import run_suite

from aescodec import (
    InvalidIVLength,
    InvalidKeyLength,
    MisalignedInput,
    Mode,
    Stage,
    UnsupportedMode,
)
from aescodec.crypto import aes, padding
from aescodec.crypto.aes import decrypt_blocks, encrypt_blocks, new_cipher

NIST_KEY = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")
NIST_IV = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
NIST_PLAINTEXT = bytes.fromhex(
    "6bc1bee22e409f96e93d7e117393172a"
    "ae2d8a571e03ac9c9eb76fac45af8e51"
)
NIST_CIPHERTEXT = {
    Mode.ECB: "3ad77bb40d7a3660a89ecaf32466ef97f5d3d58503b9699de785895a96fdbaaf",
    Mode.CBC: "7649abac8119b246cee98e9b12e9197d5086cb9b507219ee95db113a917678b2",
    Mode.CFB: "3b3fd92eb72dad20333449f8e83cfb4ac8a64537a0b3a93fcde3cdad9f1ce58b",
    Mode.OFB: "3b3fd92eb72dad20333449f8e83cfb4a7789508d16918f03f53c52dac54ed825",
}


def test_nist_vectors_encrypt():
    for mode, expected in NIST_CIPHERTEXT.items():
        ct = encrypt_blocks(NIST_PLAINTEXT, NIST_KEY, NIST_IV, mode)
        assert ct.hex() == expected, mode


def test_nist_vectors_decrypt():
    for mode, expected in NIST_CIPHERTEXT.items():
        pt = decrypt_blocks(bytes.fromhex(expected), NIST_KEY, NIST_IV, mode)
        assert pt == NIST_PLAINTEXT, mode


def test_ciphertext_length_matches_input():
    data = b"B" * 64
    for mode in Mode:
        assert len(encrypt_blocks(data, NIST_KEY, NIST_IV, mode)) == 64


def test_empty_input_is_aligned():
    for mode in Mode:
        assert encrypt_blocks(b"", NIST_KEY, NIST_IV, mode) == b""


def test_ecb_blocks_are_independent():
    ct = encrypt_blocks(b"Z" * 32, NIST_KEY, mode=Mode.ECB)
    assert ct[:16] == ct[16:]


def test_chaining_modes_hide_repeated_blocks():
    for mode in (Mode.CBC, Mode.CFB, Mode.OFB):
        ct = encrypt_blocks(b"Z" * 32, NIST_KEY, NIST_IV, mode)
        assert ct[:16] != ct[16:], mode


def test_ecb_ignores_iv():
    assert encrypt_blocks(NIST_PLAINTEXT, NIST_KEY, b"", Mode.ECB) == \
        encrypt_blocks(NIST_PLAINTEXT, NIST_KEY, b"whatever", Mode.ECB)


def test_aes192_and_aes256_keys():
    for key_len in (24, 32):
        key = bytes(range(key_len))
        for mode in Mode:
            ct = encrypt_blocks(NIST_PLAINTEXT, key, NIST_IV, mode)
            assert decrypt_blocks(ct, key, NIST_IV, mode) == NIST_PLAINTEXT


def test_invalid_key_length():
    for key_len in (0, 8, 15, 17, 31, 33):
        with pytest.raises(InvalidKeyLength) as exc_info:
            encrypt_blocks(NIST_PLAINTEXT, b"k" * key_len, NIST_IV, Mode.CBC)
        assert exc_info.value.stage == Stage.MODE


def test_invalid_iv_length():
    for mode in (Mode.CBC, Mode.CFB, Mode.OFB):
        for iv in (b"", b"12345678", b"x" * 17):
            with pytest.raises(InvalidIVLength):
                encrypt_blocks(NIST_PLAINTEXT, NIST_KEY, iv, mode)
            with pytest.raises(InvalidIVLength):
                decrypt_blocks(NIST_PLAINTEXT, NIST_KEY, iv, mode)


def test_misaligned_input_rejected_for_every_mode():
    for mode in Mode:
        with pytest.raises(MisalignedInput):
            encrypt_blocks(b"x" * 17, NIST_KEY, NIST_IV, mode)
        with pytest.raises(MisalignedInput):
            decrypt_blocks(b"x" * 31, NIST_KEY, NIST_IV, mode)


def test_key_checked_before_alignment():
    with pytest.raises(InvalidKeyLength):
        decrypt_blocks(b"x" * 5, b"short", NIST_IV, Mode.CBC)


def test_unsupported_mode():
    with pytest.raises(UnsupportedMode) as exc_info:
        encrypt_blocks(NIST_PLAINTEXT, NIST_KEY, NIST_IV, "ctr")
    assert exc_info.value.stage == Stage.MODE

    with pytest.raises(UnsupportedMode):
        new_cipher(NIST_KEY, NIST_IV, "gcm")


def test_mode_names_accepted():
    assert encrypt_blocks(NIST_PLAINTEXT, NIST_KEY, NIST_IV, "CBC").hex() == NIST_CIPHERTEXT[Mode.CBC]


def test_import_emits_no_deprecation_warnings():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        importlib.reload(aes)
    deprecations = [w for w in caught if issubclass(w.category, CryptographyDeprecationWarning)]
    assert deprecations == [], [str(w.message) for w in deprecations]

    for mode in (Mode.CFB, Mode.OFB):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            ct = aes.encrypt_blocks(NIST_PLAINTEXT, NIST_KEY, NIST_IV, mode)
        assert ct.hex() == NIST_CIPHERTEXT[mode]
        assert not [w for w in caught if issubclass(w.category, CryptographyDeprecationWarning)]


def test_block_size_shared_with_padding():
    assert padding.AES_BLOCK_SIZE_BYTES == aes.AES_BLOCK_SIZE_BYTES == 16


def main():
    return run_suite("Mode Stage", [
        test_nist_vectors_encrypt,
        test_nist_vectors_decrypt,
        test_ciphertext_length_matches_input,
        test_empty_input_is_aligned,
        test_ecb_blocks_are_independent,
        test_chaining_modes_hide_repeated_blocks,
        test_ecb_ignores_iv,
        test_aes192_and_aes256_keys,
        test_invalid_key_length,
        test_invalid_iv_length,
        test_misaligned_input_rejected_for_every_mode,
        test_key_checked_before_alignment,
        test_unsupported_mode,
        test_mode_names_accepted,
        test_import_emits_no_deprecation_warnings,
        test_block_size_shared_with_padding,
    ])


if __name__ == '__main__':
    sys.exit(0 if main() else 1)
