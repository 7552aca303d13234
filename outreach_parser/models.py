"""Data models shared by the outreach line parser, orchestrator, and review helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# --- Input Models ---

@dataclass(slots=True)
class CandidateLine:
    """One non-blank line of a pasted blob.

    ``raw_text`` is never modified so diagnostics can quote the user's input,
    while ``working_text`` is progressively stripped as fields are extracted.
    """

    line_number: int
    raw_text: str
    working_text: str = ""

    def consume(self, fragment: Optional[str]) -> str:
        """Remove the first occurrence of ``fragment`` from the working text."""

        if fragment:
            self.working_text = self.working_text.replace(fragment, "", 1).strip()
        return self.working_text


# --- Parser Output ---

@dataclass(slots=True)
class ParsedContact:
    """Structured candidate record recovered from a single line."""

    name: str
    raw_text: str
    phone_number: Optional[str] = None
    room_identifier: Optional[str] = None
    confidence: float = 0.0
    issues: List[str] = field(default_factory=list)

    @property
    def has_name(self) -> bool:
        return bool(self.name)

    def as_row(self) -> Dict[str, Any]:
        """Return a serialisable representation of the contact."""
        return {
            "name": self.name,
            "phone_number": self.phone_number or "",
            "room_identifier": self.room_identifier or "",
            "confidence": self.confidence,
            "issues": list(self.issues),
            "raw_text": self.raw_text,
        }


@dataclass(slots=True)
class LineError:
    """An unexpected failure raised while parsing one line."""

    line_number: int
    message: str
    raw_text: str = ""

    def __str__(self) -> str:
        return f"Line {self.line_number}: {self.message or 'Unknown error'}"


@dataclass(slots=True)
class BatchParseResult:
    """Aggregate outcome of parsing a full blob."""

    contacts: List[ParsedContact] = field(default_factory=list)
    total_lines: int = 0
    errors: List[LineError] = field(default_factory=list)
    skipped_lines: List[int] = field(default_factory=list)

    @property
    def successfully_parsed(self) -> int:
        return len(self.contacts)

    @property
    def error_messages(self) -> List[str]:
        return [str(error) for error in self.errors]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "contacts": [contact.as_row() for contact in self.contacts],
            "total_lines": self.total_lines,
            "successfully_parsed": self.successfully_parsed,
            "errors": self.error_messages,
            "skipped_lines": list(self.skipped_lines),
        }


# --- Collaborator Payload ---

@dataclass(slots=True)
class OutreachMemberDraft:
    """Payload handed to the external contact-creation handler.

    Identifiers and timestamps are assigned by the handler, never here.
    """

    name: str
    group_id: str
    outreach_date: str
    phone_numbers: List[str] = field(default_factory=list)
    room_identifier: Optional[str] = None
    coming_status: bool = False
