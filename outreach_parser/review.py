"""Helpers for the review step between parsing and contact creation."""
from __future__ import annotations

import re
from dataclasses import replace
from typing import Dict, Optional

from .models import OutreachMemberDraft, ParsedContact

HIGH_CONFIDENCE = 0.8
MEDIUM_CONFIDENCE = 0.6
MAX_ROOM_LENGTH = 10

_EDITED_PHONE = re.compile(r"^\+?\d{8,15}$", re.ASCII)
_PHONE_PUNCTUATION = re.compile(r"[\s-]")


def confidence_band(confidence: float) -> str:
    """Bucket a confidence score into ``high``, ``medium`` or ``low``."""
    if confidence >= HIGH_CONFIDENCE:
        return "high"
    if confidence >= MEDIUM_CONFIDENCE:
        return "medium"
    return "low"


def validate_contact_edit(
    name: str,
    phone_number: Optional[str] = None,
    room_identifier: Optional[str] = None,
) -> Dict[str, str]:
    """Return field errors for a hand-corrected contact; empty when valid."""

    errors: Dict[str, str] = {}
    if not (name or "").strip():
        errors["name"] = "Name required"
    phone = _PHONE_PUNCTUATION.sub("", phone_number or "")
    if phone and not _EDITED_PHONE.match(phone):
        errors["phone_number"] = "Invalid phone"
    if room_identifier and len(room_identifier) > MAX_ROOM_LENGTH:
        errors["room_identifier"] = "Too long"
    return errors


def apply_contact_edit(
    contact: ParsedContact,
    *,
    name: Optional[str] = None,
    phone_number: Optional[str] = None,
    room_identifier: Optional[str] = None,
) -> ParsedContact:
    """Return a copy of ``contact`` with the edited fields replaced.

    Empty strings clear the optional fields. Confidence and issues describe
    what the parser found and are left untouched.
    """

    changes: Dict[str, object] = {}
    if name is not None:
        changes["name"] = name.strip()
    if phone_number is not None:
        changes["phone_number"] = phone_number.strip() or None
    if room_identifier is not None:
        changes["room_identifier"] = room_identifier.strip() or None
    return replace(contact, issues=list(contact.issues), **changes)


def to_outreach_member(contact: ParsedContact, group_id: str, outreach_date: str) -> OutreachMemberDraft:
    """Build the payload the contact-creation handler expects."""
    return OutreachMemberDraft(
        name=contact.name or "Unknown",
        group_id=group_id,
        outreach_date=outreach_date,
        phone_numbers=[contact.phone_number] if contact.phone_number else [],
        room_identifier=contact.room_identifier,
        coming_status=False,
    )
