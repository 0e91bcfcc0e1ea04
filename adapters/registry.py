# adapters/registry.py
from __future__ import annotations

from pathlib import PurePath
from typing import Callable, Dict, Optional

from adapters.base import BaseAdapter
from adapters.delimited import DelimitedAdapter
from adapters.spreadsheet import SpreadsheetAdapter
from adapters.unsupported import UnsupportedAdapter


class UnsupportedFormatError(ValueError):
    """No adapter is registered for the requested format tag."""


# format tag -> adapter factory (takes the delimiter for text formats)
FORMATS: Dict[str, Callable[[str], BaseAdapter]] = {
    "csv": lambda delimiter: DelimitedAdapter(delimiter),
    "txt": lambda delimiter: DelimitedAdapter(delimiter),
    "tsv": lambda _: DelimitedAdapter("\t"),
    "xlsx": lambda _: SpreadsheetAdapter(),
    "xls": lambda _: SpreadsheetAdapter(),
    "pdf": lambda _: UnsupportedAdapter("pdf"),
}


def infer_format(filename: str | None) -> Optional[str]:
    """Format tag from a file name's extension, e.g. 'Statement.CSV' -> 'csv'."""
    if not filename:
        return None
    suffix = PurePath(filename).suffix.lower().lstrip(".")
    return suffix or None


def get_adapter(fmt: str | None, *, delimiter: str = ",") -> BaseAdapter:
    tag = str(fmt or "").strip().lower().lstrip(".")
    try:
        factory = FORMATS[tag]
    except KeyError:
        raise UnsupportedFormatError(f"Unsupported file type: {fmt!r}") from None
    return factory(delimiter)
