"""Defaults for word-list loading."""

from __future__ import annotations

import os

MIN_WORD_LENGTH = 1
MAX_WORD_LENGTH = 64

# Tried in order when no explicit path is given
DEFAULT_WORDLIST_PATHS: list[str] = [
    "words.txt",
    "wordlist.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]

SAMPLE_WORDS: tuple[str, ...] = (
    "car", "card", "care", "cared", "cars", "carbs", "carapace", "cargo",
)
