#!/usr/bin/env python3
"""
Trie Lookup

Loads a word list into a prefix trie and answers completion queries,
either once from the command line (--prefix) or in an interactive shell.
"""

from __future__ import annotations

import argparse
import logging

from seqtrie.cli import format_matches, run_cli
from seqtrie.wordlist import WordList

log = logging.getLogger("seqtrie")


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    parser = argparse.ArgumentParser(
        description="Trie Lookup -- prefix completion over a word list",
    )
    parser.add_argument("--words", type=str, default=None,
                        help="Path to word list file (one word per line)")
    parser.add_argument("--prefix", type=str, default=None,
                        help="Print the words starting with PREFIX and exit")
    parser.add_argument("--limit", type=int, default=None,
                        help="Maximum number of matches to print")
    parser.add_argument("--case-sensitive", action="store_true",
                        help="Keep words as written instead of lower-casing them")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.limit is not None and args.limit < 0:
        parser.error("--limit must not be negative")

    wordlist = WordList(args.words, lowercase=not args.case_sensitive)
    log.debug("Trie holds %d words in %d nodes", len(wordlist), wordlist.trie.node_count)

    if args.prefix is not None:
        print(format_matches(args.prefix, wordlist.complete(args.prefix, args.limit)))
        return

    run_cli(wordlist)


if __name__ == "__main__":
    main()
