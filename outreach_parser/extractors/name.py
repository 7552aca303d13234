"""Capitalisation based name recovery."""
from __future__ import annotations

import re
from typing import List, Optional

from ..config import DEFAULT_SETTINGS, ParserSettings

# Words that label a field rather than belonging to its value.
LABEL_WORDS = frozenset(
    {
        "room", "rm", "apt", "apartment", "flat", "unit", "block", "blk", "bldg", "building",
        "no", "number", "num", "phone", "tel", "cell", "mobile", "name", "contact", "contacts",
    }
)

_SEGMENT_SEPARATORS = re.compile(r"[|,;:\-]")
_NAME_TOKEN = re.compile(r"^[A-Z][a-zA-Z'\-]*$")
_DIGIT = re.compile(r"\d", re.ASCII)


def looks_like_name(word: str, min_length: int = DEFAULT_SETTINGS.min_name_token_length) -> bool:
    """Return True for capitalised Latin words such as ``Jane`` or ``O'Neil``."""
    return len(word) >= min_length and bool(_NAME_TOKEN.match(word))


def _candidate_words(text: str) -> List[str]:
    return [
        word
        for word in text.split()
        if word.lower() not in LABEL_WORDS and not _DIGIT.search(word)
    ]


class NameExtractor:
    def __init__(self, settings: ParserSettings = DEFAULT_SETTINGS) -> None:
        self.settings = settings

    def _qualifies(self, word: str) -> bool:
        return looks_like_name(word, self.settings.min_name_token_length)

    def extract(self, text: str) -> Optional[str]:
        segments = [segment.strip() for segment in _SEGMENT_SEPARATORS.split(text) if segment.strip()]
        words = _candidate_words(segments[0] if segments else text.strip())

        if len(words) >= 2 and self._qualifies(words[0]) and self._qualifies(words[1]):
            return f"{words[0]} {words[1]}"
        if words and self._qualifies(words[0]):
            return words[0]

        # The name may follow a fragment that survived normalisation.
        everything = _candidate_words(text)
        for first, second in zip(everything, everything[1:]):
            if self._qualifies(first) and self._qualifies(second):
                return f"{first} {second}"
        return None
