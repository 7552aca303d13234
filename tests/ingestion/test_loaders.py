import pandas as pd
import pytest

from outreach_parser.ingestion.loaders import UnsupportedFileTypeError, load_blob
from outreach_parser.orchestrator import parse_text


@pytest.fixture()
def sample_dataframe():
    return pd.DataFrame(
        [
            ["Jane Doe", "0821234567", "814"],
            ["", "", ""],
            ["John", "0825551234", None],
        ]
    )


def test_load_blob_from_text_file(tmp_path):
    path = tmp_path / "pasted.txt"
    path.write_text("1. Room 814 - Jane Doe - 0821234567\n\nJohn - 082 555 1234\n", encoding="utf-8")

    blob = load_blob(path)

    assert parse_text(blob).successfully_parsed == 2


def test_load_blob_from_csv_joins_cells(sample_dataframe, tmp_path):
    csv_path = tmp_path / "contacts.csv"
    sample_dataframe.to_csv(csv_path, index=False, header=False)

    blob = load_blob(csv_path)

    assert blob.splitlines() == ["Jane Doe - 0821234567 - 814", "John - 0825551234"]


def test_load_blob_from_excel(sample_dataframe, tmp_path):
    excel_path = tmp_path / "contacts.xlsx"
    sample_dataframe.to_excel(excel_path, index=False, header=False)

    result = parse_text(load_blob(excel_path))

    assert [contact.name for contact in result.contacts] == ["Jane Doe", "John"]
    assert result.contacts[0].phone_number == "+27821234567"
    assert result.contacts[0].room_identifier == "814"


def test_unsupported_file_extension(tmp_path):
    bad_path = tmp_path / "contacts.json"
    bad_path.write_text("{}", encoding="utf-8")

    with pytest.raises(UnsupportedFileTypeError):
        load_blob(bad_path)
