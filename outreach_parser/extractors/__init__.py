"""Field extractors applied to a normalised line: phone, then room, then name."""

from .name import LABEL_WORDS, NameExtractor, looks_like_name  # noqa: F401
from .phone import PHONE_PATTERNS, PhoneExtractor, build_phone_patterns, normalize_phone_number  # noqa: F401
from .room import ROOM_KEYWORDS, RoomExtractor  # noqa: F401

__all__ = [
    "LABEL_WORDS",
    "NameExtractor",
    "looks_like_name",
    "PHONE_PATTERNS",
    "PhoneExtractor",
    "build_phone_patterns",
    "normalize_phone_number",
    "ROOM_KEYWORDS",
    "RoomExtractor",
]
