#!/usr/bin/env python3
"""
Split a word list into root words, compound remainders and residue.

Usage:
  python3 -m wordsplit words.txt roots.txt candidates.txt residue.txt
  python3 -m wordsplit words.txt roots.txt candidates.txt residue.txt --workers 4 --top 50
"""

from __future__ import annotations
import argparse
import sys

from .pipeline import decompose
from .progress import PROGRESS_INTERVAL
from .report import TOP_WORDS, display_results
from .runner import MAX_WORKERS
from .wordio import load_tokens, write_words


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Decompose a word list into dictionary words, "
                                                 "compound candidates and undecomposable residue")
    parser.add_argument('input', help='Word list, one word per line')
    parser.add_argument('words_out', help='Output file for dictionary words')
    parser.add_argument('candidates_out', help='Output file for candidates found while peeling')
    parser.add_argument('residue_out', help='Output file for words that could not be decomposed')
    parser.add_argument('--workers', type=int, default=MAX_WORKERS,
                        help=f'Concurrent workers per pass (default: {MAX_WORKERS})')
    parser.add_argument('--interval', type=float, default=PROGRESS_INTERVAL,
                        help=f'Seconds between progress lines (default: {PROGRESS_INTERVAL})')
    parser.add_argument('--top', type=int, default=TOP_WORDS,
                        help=f'Dictionary words to rank by frequency in the summary, 0 to skip (default: {TOP_WORDS})')
    parser.add_argument('--quiet', action='store_true',
                        help='Only print errors')
    args = parser.parse_args(argv)
    if args.workers < 1:
        parser.error(f"--workers must be at least 1, got {args.workers}")
    if args.interval <= 0:
        parser.error(f"--interval must be positive, got {args.interval}")
    return args


def main(argv=None):
    args = parse_args(argv)

    try:
        tokens = load_tokens(args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"ERROR: cannot read {args.input}: {e}", file=sys.stderr)
        sys.exit(1)

    result = decompose(tokens, max_workers=args.workers, interval=args.interval,
                       verbose=not args.quiet)

    outputs = (
        (args.words_out, result.dictionary),
        (args.candidates_out, result.candidates),
        (args.residue_out, result.residue),
    )
    for path, words in outputs:
        try:
            write_words(path, words)
        except OSError as e:
            print(f"ERROR: cannot write {path}: {e}", file=sys.stderr)
            sys.exit(1)
        if not args.quiet:
            print(f"Written {len(words):,} words to {path}")

    if not args.quiet:
        display_results(result, top_n=args.top)


if __name__ == "__main__":
    main()
