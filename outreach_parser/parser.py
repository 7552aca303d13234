"""Single line parsing: normalise, then peel off phone, room and name."""
from __future__ import annotations

import logging
import re
from typing import Optional

from .config import DEFAULT_SETTINGS, ParserSettings
from .extractors import NameExtractor, PhoneExtractor, RoomExtractor
from .models import CandidateLine, ParsedContact
from .normalize import normalize_line

LOGGER = logging.getLogger(__name__)

NO_NAME = "No name detected"
NO_PHONE = "No phone number detected"
NO_ROOM = "No room number detected"

_ROOM_LABEL_RESIDUE = re.compile(r"\b(room|rm|apt|flat|unit)\b\s*[:#\-]?\s*", re.IGNORECASE | re.ASCII)


def calculate_confidence(
    has_name: bool,
    has_phone: bool,
    has_room: bool,
    settings: ParserSettings = DEFAULT_SETTINGS,
) -> float:
    """Weighted completeness score, capped at 1.0."""

    score = 0.0
    if has_name:
        score += settings.name_weight
    if has_phone:
        score += settings.phone_weight
    if has_room:
        score += settings.room_weight
    return min(1.0, score)


class LineParser:
    """Turns one raw line into a :class:`ParsedContact`."""

    def __init__(self, settings: ParserSettings = DEFAULT_SETTINGS) -> None:
        self.settings = settings
        self.phone_extractor = PhoneExtractor(settings)
        self.room_extractor = RoomExtractor(settings)
        self.name_extractor = NameExtractor(settings)

    def analyse(self, line: str, line_number: int = 0) -> ParsedContact:
        """Run every extractor and return the record, even when no name was found."""

        candidate = CandidateLine(line_number=line_number, raw_text=line, working_text=normalize_line(line))

        phone, phone_matches = self.phone_extractor.extract(candidate.working_text)
        if phone_matches:
            candidate.consume(phone_matches[0])

        room = self.room_extractor.extract(candidate.working_text, phone_matches)
        candidate.consume(room)
        candidate.working_text = _ROOM_LABEL_RESIDUE.sub("", candidate.working_text, count=1).strip()

        name = self.name_extractor.extract(candidate.working_text)

        issues = []
        if not name:
            issues.append(NO_NAME)
        if not phone:
            issues.append(NO_PHONE)
        if not room:
            issues.append(NO_ROOM)

        return ParsedContact(
            name=name or "",
            raw_text=line,
            phone_number=phone,
            room_identifier=room,
            confidence=calculate_confidence(bool(name), bool(phone), bool(room), self.settings),
            issues=issues,
        )

    def parse_line(self, line: str, line_number: int = 0) -> Optional[ParsedContact]:
        """Return the contact for ``line`` or ``None`` when it carries no usable name."""

        if not line or len(line.strip()) < self.settings.min_line_length:
            return None
        contact = self.analyse(line, line_number)
        if not contact.has_name:
            LOGGER.debug("Dropping line %s without a recognisable name: %r", line_number, line)
            return None
        return contact
