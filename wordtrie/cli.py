"""Command line front end: load a word list, then answer prefix queries."""

from __future__ import annotations

import argparse
import logging
import time

from wordtrie.constants import DEFAULT_SOURCE_URL, DEFAULT_TIMEOUT
from wordtrie.errors import InvalidCharacter
from wordtrie.loader import WordLoader
from wordtrie.trie import Trie

log = logging.getLogger("wordtrie")


def print_matches(trie: Trie, prefix: str, limit: int | None = None) -> None:
    """Print every word starting with *prefix*, one per line."""
    try:
        words = trie.words_by_prefix(prefix, limit=limit)
    except InvalidCharacter as exc:
        print(f"  Invalid prefix: {exc}")
        return

    if not words:
        print(f"  {prefix}: (no match)")
        return
    print(f"  {prefix}: {len(words)} word(s)")
    for word in words:
        print(f"    {word}")


def run_prompt(trie: Trie, limit: int | None = None, uppercase: bool = True) -> None:
    """Interactive prefix lookup until 'quit', EOF or Ctrl-C."""
    print()
    print("Type a prefix to list matching words, 'quit' to exit.")
    while True:
        try:
            inp = input("  prefix> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp:
            continue
        if inp.lower() in ("quit", "exit"):
            break
        print_matches(trie, inp.upper() if uppercase else inp, limit)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordtrie",
        description="Load a word list into a prefix trie and list words by prefix",
    )
    parser.add_argument("prefixes", nargs="*", metavar="PREFIX",
                        help="Prefixes to look up (interactive prompt if omitted)")
    parser.add_argument("--source", "-s", type=str, default=DEFAULT_SOURCE_URL,
                        help="URL or path of the word list, one word per line")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT,
                        help="Network timeout in seconds")
    parser.add_argument("--limit", "-n", type=int, default=None,
                        help="Show at most N words per prefix")
    parser.add_argument("--keep-case", action="store_true",
                        help="Do not upper-case words and prefixes")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.limit is not None and args.limit < 0:
        parser.error("--limit must be non-negative")

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    uppercase = not args.keep_case
    trie = Trie()
    loader = WordLoader(args.source, timeout=args.timeout, uppercase=uppercase)

    t0 = time.time()
    report = loader.load(trie)
    elapsed = time.time() - t0

    if not report.ok:
        print(f"Could not load word list: {report.error}")
        print(f"Lines processed before the failure: {report.lines}")
        return 1

    print(f"Loaded {report.inserted:,} words ({report.rejected} rejected) in {elapsed:.2f}s.")

    if not args.prefixes:
        run_prompt(trie, args.limit, uppercase)
        return 0

    for prefix in args.prefixes:
        print_matches(trie, prefix.upper() if uppercase else prefix, args.limit)
    return 0
