"""Word list loaded into a trie for completion lookups."""

from __future__ import annotations

import itertools
import logging
import os

from seqtrie.constants import DEFAULT_WORDLIST_PATHS, MAX_WORD_LENGTH, MIN_WORD_LENGTH, SAMPLE_WORDS
from seqtrie.trie import Trie

log = logging.getLogger("seqtrie.wordlist")


class WordList:
    """Words from a text file (one per line) with trie-backed completion."""

    def __init__(
        self,
        path: str | None = None,
        lowercase: bool = True,
        search_paths: list[str] | None = None,
    ):
        self.lowercase = lowercase
        self.trie = Trie()
        self.source: str | None = None
        self._load(path, DEFAULT_WORDLIST_PATHS if search_paths is None else search_paths)

    def _load(self, path: str | None, defaults: list[str]) -> None:
        search_paths: list[str] = []
        if path:
            search_paths.append(path)
        search_paths.extend(defaults)

        for candidate in search_paths:
            if os.path.exists(candidate):
                with open(candidate, "r", encoding="utf-8") as f:
                    for line in f:
                        word = self._normalize(line.strip())
                        if self._accepts(word):
                            self.trie.insert(word)
                if self.trie:
                    self.source = candidate
                    log.info("Loaded %s words from %s", f"{len(self.trie):,}", candidate)
                    return
                log.debug("No usable words in %s", candidate)

        log.warning("No word list found -- using built-in sample words.")
        log.warning("Pass --words PATH or save a list as words.txt.")
        self.trie.update(SAMPLE_WORDS)

    def _normalize(self, word: str) -> str:
        return word.lower() if self.lowercase else word

    @staticmethod
    def _accepts(word: str) -> bool:
        if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
            return False
        return not any(ch.isspace() for ch in word)

    def complete(self, prefix: str, limit: int | None = None) -> list[str]:
        """Words starting with ``prefix``, at most ``limit`` of them."""
        matches = self.trie.iter_collections_starting_with(self._normalize(prefix))
        return list(itertools.islice(matches, limit))

    def add(self, word: str) -> bool:
        """Insert ``word``; False if it is rejected by the length/whitespace filter."""
        word = self._normalize(word)
        if not self._accepts(word):
            return False
        self.trie.insert(word)
        return True

    def discard(self, word: str) -> None:
        self.trie.remove(self._normalize(word))

    def __contains__(self, word: str) -> bool:
        return self._normalize(word) in self.trie

    def __len__(self) -> int:
        return len(self.trie)
