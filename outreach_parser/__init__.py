"""Top-level package for the bulk outreach contact line parser."""

from . import models  # noqa: F401
from .config import DEFAULT_SETTINGS, ConfigurationError, ParserSettings, load_settings  # noqa: F401
from .models import (
    BatchParseResult,
    CandidateLine,
    LineError,
    OutreachMemberDraft,
    ParsedContact,
)
from .normalize import normalize_line, split_lines  # noqa: F401
from .orchestrator import BatchOrchestrator, parse_text  # noqa: F401
from .parser import LineParser, calculate_confidence  # noqa: F401

__all__ = [
    "BatchParseResult",
    "CandidateLine",
    "LineError",
    "OutreachMemberDraft",
    "ParsedContact",
    "ParserSettings",
    "DEFAULT_SETTINGS",
    "ConfigurationError",
    "load_settings",
    "normalize_line",
    "split_lines",
    "LineParser",
    "calculate_confidence",
    "BatchOrchestrator",
    "parse_text",
    "extractors",
    "ingestion",
    "orchestrator",
    "review",
]
