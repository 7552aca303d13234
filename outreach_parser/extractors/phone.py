"""Shape-based phone number detection and E.164 normalisation."""
from __future__ import annotations

import logging
import re
from functools import lru_cache
from re import Match, Pattern
from typing import List, Optional, Tuple

import phonenumbers
from phonenumbers.phonenumberutil import NumberParseException

from ..config import DEFAULT_SETTINGS, ParserSettings

LOGGER = logging.getLogger(__name__)

_NON_DIALABLE = re.compile(r"[^\d+]", re.ASCII)

# Longest generic digit run, separators included, still treated as one number.
FALLBACK_MAX_LENGTH = 17


@lru_cache(maxsize=None)
def build_phone_patterns(country_code: str, trunk_prefix: str) -> Tuple[Pattern[str], ...]:
    """Return the ordered shape patterns, most specific first.

    Only the order matters to callers: a country-code match anywhere in the
    line beats a bare digit run that appears earlier. The last pattern is the
    generic fallback whose matches are capped at ``FALLBACK_MAX_LENGTH``.
    """

    cc = re.escape(country_code)
    trunk = re.escape(trunk_prefix)
    return tuple(
        re.compile(pattern, re.ASCII)
        for pattern in (
            rf"\+{cc}\s?\d{{2}}\s?\d{{3}}\s?\d{{4}}",
            rf"\+{cc}\s?\d{{9}}",
            rf"{trunk}\d{{2}}\s?\d{{3}}\s?\d{{4}}",
            r"\d{10}",
            r"\d{9}",
            r"\(\d{3}\)\s?\d{3}[-\s]?\d{4}",
            r"\d{3}[-\s]?\d{3}[-\s]?\d{4}",
            r"\+?\d(?:[\s\-().]{0,3}\d){8,12}",
        )
    )


PHONE_PATTERNS = build_phone_patterns(DEFAULT_SETTINGS.country_code, DEFAULT_SETTINGS.trunk_prefix)


def _to_e164(number: str, region: Optional[str]) -> Optional[str]:
    try:
        parsed = phonenumbers.parse(number, region)
    except NumberParseException:
        LOGGER.debug("phonenumbers.parse failed for %s", number)
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)


def normalize_phone_number(phone: str, settings: ParserSettings = DEFAULT_SETTINGS) -> str:
    """Format a matched phone string as E.164 when its shape is recognised.

    Recognised shapes are an international ``+<country code>`` prefix, the
    country code without ``+``, a trunk prefix followed by a national number,
    or a bare national number. Anything else is returned unchanged.
    """

    cleaned = _NON_DIALABLE.sub("", phone)
    country_code = settings.country_code
    national_length = settings.national_number_length

    if cleaned.startswith(f"+{country_code}"):
        candidate, region = cleaned, None
    elif cleaned.startswith(country_code) and len(cleaned) == len(country_code) + national_length:
        candidate, region = f"+{cleaned}", None
    elif cleaned.startswith(settings.trunk_prefix) and len(cleaned) == len(settings.trunk_prefix) + national_length:
        candidate, region = cleaned, settings.region
    elif len(cleaned) == national_length and cleaned.isdigit():
        candidate, region = cleaned, settings.region
    else:
        return phone

    return _to_e164(candidate, region) or phone


class PhoneExtractor:
    """Find phone-like substrings in a normalised line."""

    def __init__(self, settings: ParserSettings = DEFAULT_SETTINGS) -> None:
        self.settings = settings
        self._patterns = build_phone_patterns(settings.country_code, settings.trunk_prefix)

    @property
    def patterns(self) -> Tuple[Pattern[str], ...]:
        return self._patterns

    def find_matches(self, text: str) -> List[Match[str]]:
        """Return every match of every pattern, grouped by pattern order."""

        matches: List[Match[str]] = []
        fallback = self._patterns[-1]
        for pattern in self._patterns:
            for match in pattern.finditer(text):
                if pattern is fallback and len(match.group(0)) > FALLBACK_MAX_LENGTH:
                    continue
                matches.append(match)
        return matches

    def find_all(self, text: str) -> List[str]:
        return [match.group(0) for match in self.find_matches(text)]

    def extract(self, text: str) -> Tuple[Optional[str], List[str]]:
        """Return ``(normalised phone, raw matches)`` for ``text``.

        The first raw match is the one the caller removes from the working
        text. Other matches overlapping it are dropped: they are the same
        digits glued to a neighbouring field, such as a room number.
        """

        matches = self.find_matches(text)
        if not matches:
            return None, []
        chosen = matches[0]
        start, end = chosen.span()
        raw = [chosen.group(0)]
        raw.extend(match.group(0) for match in matches[1:] if match.end() <= start or match.start() >= end)
        LOGGER.debug("Phone candidate %r selected from %d matches", raw[0], len(matches))
        return normalize_phone_number(raw[0], self.settings), raw
