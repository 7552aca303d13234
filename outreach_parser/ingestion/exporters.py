"""Tabular views of parse results for the review step."""
from __future__ import annotations

from typing import List, MutableMapping

import pandas as pd

from ..models import BatchParseResult, ParsedContact
from ..review import confidence_band

REVIEW_COLUMNS = [
    "name",
    "phone_number",
    "room_identifier",
    "confidence",
    "confidence_band",
    "issues",
    "raw_text",
]


def results_to_dataframe(result: BatchParseResult, *, include_raw_text: bool = True) -> pd.DataFrame:
    """Convert the emitted contacts into a :class:`pandas.DataFrame`, one row each."""

    rows: List[MutableMapping[str, object]] = [_contact_to_row(contact) for contact in result.contacts]
    columns = [column for column in REVIEW_COLUMNS if include_raw_text or column != "raw_text"]
    frame = pd.DataFrame(rows, columns=REVIEW_COLUMNS)
    return frame[columns]


def _contact_to_row(contact: ParsedContact) -> MutableMapping[str, object]:
    row: MutableMapping[str, object] = dict(contact.as_row())
    row["confidence_band"] = confidence_band(contact.confidence)
    row["issues"] = "; ".join(contact.issues)
    return row


__all__ = ["results_to_dataframe", "REVIEW_COLUMNS"]
