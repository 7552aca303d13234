"""Utilities for reading pasted blobs from files and tabulating parse results."""

from .exporters import results_to_dataframe
from .loaders import UnsupportedFileTypeError, load_blob

__all__ = ["load_blob", "results_to_dataframe", "UnsupportedFileTypeError"]
