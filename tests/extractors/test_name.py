import pytest

from outreach_parser.extractors.name import NameExtractor, looks_like_name


@pytest.mark.parametrize("word", ["Jane", "O'Neil", "Mary-Ann", "McDonald", "ANNA"])
def test_looks_like_name_accepts_capitalised_words(word: str) -> None:
    assert looks_like_name(word)


@pytest.mark.parametrize("word", ["jane", "J", "Jane5", "Émile", "-Jane"])
def test_looks_like_name_rejects_other_tokens(word: str) -> None:
    assert not looks_like_name(word)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Jane Doe", "Jane Doe"),
        ("John -", "John"),
        ("Jane smith", "Jane"),
        ("Room Jane Doe", "Jane Doe"),
        ("Jane 5 Doe", "Jane Doe"),
        ("Jane Doe Smith - Rifuwe", "Jane Doe"),
    ],
)
def test_first_segment_names(text: str, expected: str) -> None:
    assert NameExtractor().extract(text) == expected


def test_full_text_fallback_finds_adjacent_pair() -> None:
    assert NameExtractor().extract("x - Mary Smith") == "Mary Smith"


def test_fallback_requires_a_pair() -> None:
    assert NameExtractor().extract("x - Mary") is None


@pytest.mark.parametrize("text", ["", "jane doe", "J Doe", "- 814 -", "phone contact"])
def test_no_name(text: str) -> None:
    assert NameExtractor().extract(text) is None
