#!/usr/bin/env python3
"""
Blue Prince numeric core calculator - command line.

Usage:
    numeric-core encode L > words.txt
    numeric-core encode L --workers 1 --stats
    numeric-core decode "CLAM tell FIND"
    numeric-core decode "156 21 9 7"
"""

import sys
import argparse

from .core.codec import number_to_letter
from .encrypt import SearchConfig, encrypt_letter_with_stats
from .parsing import decode_text
from .errors import CipherError


def encode(letter: str, config: SearchConfig, show_stats: bool = False) -> int:
    """Print every 4-letter word for `letter`, one per line."""
    words, stats = encrypt_letter_with_stats(letter, config)
    for word in words:
        print(word)

    if show_stats:
        print("=" * 70, file=sys.stderr)
        print(f"Target: {letter.upper()}  Words: {stats['unique']}  "
              f"Candidates: {stats['candidates']}  Skipped: {stats['skipped']}", file=sys.stderr)
        print(f"Workers: {stats['workers']}  Vectorized: {stats['vectorized']}  "
              f"Time: {stats['timing_ms']['total']} ms", file=sys.stderr)
        print("=" * 70, file=sys.stderr)
    return 0


def decode(text: str) -> int:
    """Print the core of 4 numbers, or '<letter> - <core>' for each word."""
    result = decode_text(text)
    if result.kind != 'words':
        if not result.ok:
            print(f"Error: {result.errors[0]}", file=sys.stderr)
            return 1
        print(result.cores[0])
        return 0

    errors = iter(result.errors)
    for core in result.cores:
        if core is None:
            print(next(errors))
        else:
            print(f"{number_to_letter(core) or '?'} - {core}")

    failed = result.failed
    if failed:
        print(f"failed to decode {len(failed)} values. {', '.join(failed)}", file=sys.stderr)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numeric-core",
        description="Blue Prince numeric core calculator"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_encode = sub.add_parser("encode", help="Compute every 4-letter word for a given letter")
    p_encode.add_argument("letter", metavar="LETTER", help="Alphabetic letter in [A-Z] or [a-z]")
    p_encode.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker processes (default: CPU count, 1 runs inline)"
    )
    p_encode.add_argument(
        "--scalar",
        action="store_true",
        help="Solve candidates one by one instead of with numpy batches"
    )
    p_encode.add_argument(
        "--stats",
        action="store_true",
        help="Print search statistics to stderr"
    )

    p_decode = sub.add_parser("decode", help="Compute numeric cores from a given cyphertext")
    p_decode.add_argument(
        "text",
        metavar="WORDS or 4-NUMBERS",
        help="One or more 4-letter words, or 4 numbers, separated by spaces"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        if args.command == "encode":
            config = SearchConfig(workers=args.workers, vectorized=not args.scalar)
            code = encode(args.letter, config, show_stats=args.stats)
        else:
            code = decode(args.text)
    except (CipherError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        code = 1

    sys.exit(code)


if __name__ == "__main__":
    main()
