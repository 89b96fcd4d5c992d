"""
PRVHASH42 — Command Line

    python -m prvhash "Hello"
    python -m prvhash --file data.bin --hash-len 32 --seed 0x1234
"""

import argparse
import logging
import sys
from pathlib import Path

from .prvhash42 import DEFAULT_HASH_LEN, prvhash42_hex


def _parse_hash_len(value: str) -> int:
    try:
        hash_len = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"hash length must be an integer, got {value!r}") from exc
    if hash_len < 4 or hash_len % 4:
        raise argparse.ArgumentTypeError(f"hash length must be >= 4 and a multiple of 4, got {hash_len}")
    return hash_len


def _parse_seed(value: str) -> int:
    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"seed must be decimal or 0x-prefixed hex, got {value!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='prvhash', description="Print the PRVHASH42 digest of a message.")
    parser.add_argument('message', nargs='?', default=None, help="message text (UTF-8), empty if omitted")
    parser.add_argument('--file', type=Path, help="hash the contents of this file")
    parser.add_argument('--hash-len', type=_parse_hash_len, default=DEFAULT_HASH_LEN,
                        help=f"digest length in bytes (default: {DEFAULT_HASH_LEN})")
    parser.add_argument('--seed', type=_parse_seed, default=0, help="seed XOR value (default: 0)")
    parser.add_argument('-v', '--verbose', action='store_true', help="enable debug logging")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.file is not None and args.message is not None:
        parser.error("give either a message or --file, not both")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.file is not None:
        data = args.file.read_bytes()
    else:
        data = (args.message or '').encode('utf-8')

    print(prvhash42_hex(data, args.hash_len, args.seed))
    return 0


if __name__ == '__main__':
    sys.exit(main())
