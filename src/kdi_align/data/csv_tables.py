"""Header-indexed CSV reading shared by the GTFS and fare loaders."""

import csv
import io
from collections.abc import Iterator
from typing import IO


def open_text(binary: IO[bytes]) -> io.TextIOWrapper:
    """Wrap a binary file (e.g. a ZIP member) in text mode, dropping any BOM."""
    return io.TextIOWrapper(binary, encoding="utf-8-sig", newline="")


def convert_value(value: str | None) -> str | None:
    """Convert a CSV cell, mapping blanks to None."""
    if value is None or value.strip() == "":
        return None
    return value.strip()


def build_header_index(
    reader: Iterator[list[str]], columns: list[str], required: list[str], filename: str
) -> dict[str, int]:
    """Build a column -> position mapping from the header row.

    Header names are whitespace-trimmed. Columns that are not listed are
    ignored; listed columns absent from the header are only an error when
    they are required.

    Raises:
        ValueError: If the file is empty or a required column is missing.
    """
    header = next(reader, None)
    if header is None:
        raise ValueError(f"{filename} is empty")
    expected = set(columns)
    header_index: dict[str, int] = {}
    for idx, name in enumerate(header):
        cleaned = name.strip()
        if cleaned in expected and cleaned not in header_index:
            header_index[cleaned] = idx
    missing = [col for col in required if col not in header_index]
    if missing:
        raise ValueError(f"{filename} missing columns: {', '.join(missing)}")
    return header_index


def row_from_index(row: list[str], header_index: dict[str, int]) -> dict[str, str | None]:
    """Map a CSV row list to a dict by header index."""
    return {
        col: convert_value(row[idx] if idx < len(row) else None)
        for col, idx in header_index.items()
    }


def read_rows(
    text_file: IO[str], filename: str, columns: list[str], required: list[str]
) -> Iterator[dict[str, str | None]]:
    """Yield each non-blank data row of a CSV file as a column -> value dict."""
    reader = csv.reader(text_file)
    header_index = build_header_index(reader, columns, required, filename)
    for row in reader:
        if not any(cell.strip() for cell in row):
            continue
        yield row_from_index(row, header_index)
