"""Utilities for loading a pasted blob from text files or spreadsheets."""
from __future__ import annotations

from pathlib import Path
from typing import Any, List, MutableMapping, Optional, Union

import pandas as pd

from ..normalize import SEPARATOR

PathLike = Union[str, Path]

_TEXT_SUFFIXES = {".txt", ".text", ""}
_DELIMITED_SUFFIXES = {".csv", ".tsv"}
_EXCEL_SUFFIXES = {".xls", ".xlsx", ".xlsm", ".xlsb"}


class UnsupportedFileTypeError(ValueError):
    """Raised when an unsupported file format is passed to the loader."""


def load_blob(
    path: PathLike,
    *,
    sheet_name: Union[str, int] = 0,
    encoding: str = "utf-8",
    loader_kwargs: Optional[MutableMapping[str, Any]] = None,
) -> str:
    """Read ``path`` into a newline-delimited blob.

    Plain text files are returned as-is. For spreadsheets each non-empty row
    becomes one line, its cells joined with ``" - "`` so the parser treats them
    as separate fields.

    Parameters
    ----------
    path:
        Path to a ``.txt``, CSV/TSV or Excel file.
    sheet_name:
        Sheet selector passed to :func:`pandas.read_excel`. Ignored otherwise.
    encoding:
        Encoding used for text and delimited files.
    loader_kwargs:
        Extra keyword arguments forwarded to :func:`pandas.read_csv` or
        :func:`pandas.read_excel`.
    """

    path_obj = Path(path)
    suffix = path_obj.suffix.lower()

    if suffix in _TEXT_SUFFIXES:
        return path_obj.read_text(encoding=encoding)

    dataframe = _read_dataframe(path_obj, sheet_name=sheet_name, encoding=encoding, loader_kwargs=loader_kwargs)
    lines: List[str] = []
    for _, row in dataframe.iterrows():
        cells = [text for text in (_clean_text(value) for value in row.values) if text]
        if cells:
            lines.append(SEPARATOR.join(cells))
    return "\n".join(lines)


def _read_dataframe(
    path: Path,
    *,
    sheet_name: Union[str, int] = 0,
    encoding: str = "utf-8",
    loader_kwargs: Optional[MutableMapping[str, Any]] = None,
) -> pd.DataFrame:
    loader_kwargs = dict(loader_kwargs or {})
    suffix = path.suffix.lower()
    # Phone numbers lose their leading zero when read as integers.
    loader_kwargs.setdefault("dtype", str)
    loader_kwargs.setdefault("header", None)

    if suffix in _DELIMITED_SUFFIXES:
        if suffix == ".tsv":
            loader_kwargs.setdefault("sep", "\t")
        loader_kwargs.setdefault("encoding", encoding)
        return pd.read_csv(path, **loader_kwargs)

    if suffix in _EXCEL_SUFFIXES:
        return pd.read_excel(path, sheet_name=sheet_name, engine=loader_kwargs.pop("engine", None) or "openpyxl", **loader_kwargs)

    raise UnsupportedFileTypeError(f"Unsupported file extension: {path.suffix}")


def _clean_text(value: Any) -> Optional[str]:
    if pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


__all__ = ["load_blob", "UnsupportedFileTypeError"]
