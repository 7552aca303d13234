import phonenumbers
import pytest

from outreach_parser.config import ParserSettings
from outreach_parser.extractors.phone import PHONE_PATTERNS, PhoneExtractor, normalize_phone_number


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0821234567", "+27821234567"),
        ("082 555 1234", "+27825551234"),
        ("+27 82 123 4567", "+27821234567"),
        ("27821234567", "+27821234567"),
        ("821234567", "+27821234567"),
    ],
)
def test_normalize_phone_number_rewrites_known_shapes(raw: str, expected: str) -> None:
    assert normalize_phone_number(raw) == expected


def test_normalize_phone_number_returns_unknown_shapes_unchanged() -> None:
    assert normalize_phone_number("(555) 123-4567") == "(555) 123-4567"


def test_normalize_phone_number_uses_configured_region() -> None:
    settings = ParserSettings(region="GB", country_code="44", trunk_prefix="0", national_number_length=10)

    assert normalize_phone_number("07911 123456", settings) == "+447911123456"


def test_specific_pattern_beats_earlier_digit_run() -> None:
    extractor = PhoneExtractor()

    phone, matches = extractor.extract("0821234567 - +27731234567")

    assert matches[0] == "+27731234567"
    assert phone == "+27731234567"


def test_extract_returns_first_match_and_all_raw_matches() -> None:
    phone, matches = PhoneExtractor().extract("Room 814 - Jane Doe - 082 123 4567")

    assert phone == "+27821234567"
    assert matches[0] == "082 123 4567"
    assert all("814" not in match for match in matches)


def test_fallback_pattern_accepts_spaced_separators() -> None:
    phone, matches = PhoneExtractor().extract("Jane - 082 - 555 - 1234")

    assert matches == ["082 - 555 - 1234"]
    assert phone == "+27825551234"


def test_extract_without_phone() -> None:
    assert PhoneExtractor().extract("Room 814 - Jane Doe") == (None, [])


def test_pattern_table_is_ordered_most_specific_first() -> None:
    assert PHONE_PATTERNS[0].pattern.startswith(r"\+27")
    assert len(PHONE_PATTERNS) == 8


def test_matches_glued_to_a_neighbouring_field_are_dropped() -> None:
    extractor = PhoneExtractor()

    phone, matches = extractor.extract("Jane Doe - 814 - 0821234567")

    assert "814 - 0821234567" in extractor.find_all("Jane Doe - 814 - 0821234567")
    assert phone == "+27821234567"
    assert matches[0] == "0821234567"
    assert all("814" not in match for match in matches)


def test_separate_second_number_is_kept() -> None:
    _, matches = PhoneExtractor().extract("0821234567 - Jane - 0735551111")

    assert matches[0] == "0821234567"
    assert "0735551111" in matches


def test_overlong_digit_run_is_rejected() -> None:
    assert PhoneExtractor().extract("Jane - 1 2 3 4 5 6 7 8 9 0") == (None, [])


def test_fallback_run_at_length_limit_is_accepted() -> None:
    phone, matches = PhoneExtractor().extract("Jane - 082 - 555 - 12345")

    assert matches == ["082 - 555 - 12345"]
    assert phone == "082 - 555 - 12345"


def test_unparseable_number_is_returned_unchanged(monkeypatch) -> None:
    def refuse(number, region):
        raise phonenumbers.NumberParseException(phonenumbers.NumberParseException.NOT_A_NUMBER, "no")

    monkeypatch.setattr(phonenumbers, "parse", refuse)

    assert normalize_phone_number("082 555 1234") == "082 555 1234"
