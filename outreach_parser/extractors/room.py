"""Room / unit identifier detection."""
from __future__ import annotations

import logging
import re
from functools import lru_cache
from re import Pattern
from typing import Optional, Sequence, Tuple

from ..config import DEFAULT_SETTINGS, ParserSettings

LOGGER = logging.getLogger(__name__)

ROOM_KEYWORDS = (
    "room", "rm", "apt", "apartment", "flat", "unit", "block", "blk", "bldg", "building",
    "no", "number", "#",
)

_DIGITS = re.compile(r"\d", re.ASCII)


@lru_cache(maxsize=None)
def _room_patterns(max_digits: int) -> Tuple[Pattern[str], Pattern[str]]:
    token = rf"[A-Za-z]?\d{{1,{max_digits}}}[A-Za-z]?"
    keywords = "|".join(re.escape(word) for word in ROOM_KEYWORDS)
    keyword_pattern = re.compile(
        rf"\b({keywords})\b\s*[:.#\-]?\s*({token})",
        re.IGNORECASE | re.ASCII,
    )
    candidate_pattern = re.compile(rf"\b(#?{token})\b", re.ASCII)
    return keyword_pattern, candidate_pattern


class RoomExtractor:
    """Two-tier room lookup: an explicit label first, then a shape scan."""

    def __init__(self, settings: ParserSettings = DEFAULT_SETTINGS) -> None:
        self.settings = settings
        self._keyword_pattern, self._candidate_pattern = _room_patterns(settings.max_room_digits)

    def extract(self, text: str, phone_matches: Sequence[str] = ()) -> Optional[str]:
        labelled = self._keyword_pattern.search(text)
        if labelled:
            return labelled.group(2)

        phone_fragments = " ".join(phone_matches)
        for match in self._candidate_pattern.finditer(text):
            candidate = match.group(1)
            digits = _DIGITS.findall(candidate)
            if len(digits) >= self.settings.room_phone_digit_threshold:
                continue
            if candidate in phone_fragments:
                LOGGER.debug("Room candidate %r skipped as part of a phone number", candidate)
                continue
            if 1 <= len(digits) <= self.settings.max_room_digits:
                return candidate.lstrip("#")
        return None
