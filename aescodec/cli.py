"""
aescodec command-line tool.

Usage:
    aescodec encrypt "hello world" --mode cbc --padding pkcs7 \\
        --key pwFHCqoQZGmho4w6 --iv EkRm7iFT261dpevs
    echo ajjTrSSO/Z11GxiPAphb7Q== | aescodec decrypt --key ... --iv ...

Options not given on the command line come from AES_* environment
variables (or a .env file), see aescodec.common.config.config_from_env.
"""

import argparse
import logging
import sys
from typing import List, Optional

from aescodec.common.config import Encoding, Mode, Padding, config_from_env
from aescodec.common.errors import CipherError
from aescodec.pipeline import decrypt, encrypt

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aescodec",
        description="AES encrypt/decrypt with selectable mode, padding and text encoding"
    )
    parser.add_argument(
        "action",
        choices=["encrypt", "decrypt"],
        help="Operation to perform"
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Plaintext (encrypt) or ciphertext text (decrypt); read from stdin if omitted"
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in Mode],
        help="Block cipher mode (default: $AES_MODE or cbc)"
    )
    parser.add_argument(
        "--padding",
        choices=[p.value for p in Padding],
        help="Padding scheme (default: $AES_PADDING or pkcs7)"
    )
    parser.add_argument(
        "--encoding",
        choices=[e.value for e in Encoding],
        help="Ciphertext text encoding (default: $AES_ENCODING or base64)"
    )
    parser.add_argument(
        "--key",
        help="AES key; UTF-8 text, or prefixed with hex: / base64: (default: $AES_KEY)"
    )
    parser.add_argument(
        "--iv",
        help="IV, same format as --key; unused for ECB (default: $AES_IV)"
    )
    parser.add_argument(
        "--env-file",
        help="Load AES_* settings from this .env file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log stage details to stderr"
    )
    return parser


def _read_input(args) -> bytes:
    if args.text is not None:
        return args.text.encode('utf-8')
    return sys.stdin.buffer.read()


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        stream=sys.stderr,
    )

    try:
        config = config_from_env(
            args.env_file,
            mode=args.mode,
            padding=args.padding,
            encoding=args.encoding,
            key=args.key,
            iv=args.iv,
        )
        data = _read_input(args)

        if args.action == "encrypt":
            print(encrypt(data, config))
        else:
            # Ciphertext piped from another command usually ends in a newline
            plaintext = decrypt(data.strip(), config)
            try:
                print(plaintext.decode('utf-8'))
            except UnicodeDecodeError:
                sys.stdout.buffer.write(plaintext)
                sys.stdout.flush()
    except CipherError as e:
        logger.error(f"{args.action} failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
