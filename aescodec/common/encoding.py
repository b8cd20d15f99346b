"""Encoding stage: ciphertext bytes <-> printable text."""

import logging
from typing import Union

from .config import Encoding, parse_encoding
from .utils import b64d, b64e, hex_decode, hex_encode

logger = logging.getLogger(__name__)

_RENDERERS = {
    Encoding.BASE64: b64e,
    Encoding.HEX: hex_encode,
}

_PARSERS = {
    Encoding.BASE64: b64d,
    Encoding.HEX: hex_decode,
}


def render(data: bytes, encoding: Union[Encoding, str]) -> str:
    """
    Render raw ciphertext as text.

    Raises:
        UnsupportedEncoding for an unknown encoding
    """
    encoding = parse_encoding(encoding)
    text = _RENDERERS[encoding](data)
    logger.debug(f"Rendered {len(data)} bytes as {encoding.value} ({len(text)} chars)")
    return text


def parse(text: Union[str, bytes], encoding: Union[Encoding, str]) -> bytes:
    """
    Parse ciphertext text back to raw bytes.

    Raises:
        UnsupportedEncoding for an unknown encoding
        EncodingError if text is malformed for that encoding
    """
    encoding = parse_encoding(encoding)
    data = _PARSERS[encoding](text)
    logger.debug(f"Parsed {len(text)} chars of {encoding.value} into {len(data)} bytes")
    return data
