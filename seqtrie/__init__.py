"""seqtrie -- prefix trie over sequences of hashable elements."""

from seqtrie.constants import DEFAULT_WORDLIST_PATHS, MAX_WORD_LENGTH, MIN_WORD_LENGTH, SAMPLE_WORDS
from seqtrie.trie import Trie, TrieNode, TrieResult
from seqtrie.wordlist import WordList

__all__ = [
    "DEFAULT_WORDLIST_PATHS",
    "MAX_WORD_LENGTH",
    "MIN_WORD_LENGTH",
    "SAMPLE_WORDS",
    "Trie",
    "TrieNode",
    "TrieResult",
    "WordList",
]
