"""
Upload decoding and CSV parsing.

Responsibilities:
- decode uploaded bytes (UTF-8, BOM tolerated, detection as a fallback)
- read header + data rows with standard CSV quoting
- enforce that every data row has the header's width
"""

from __future__ import annotations

import csv
import io
from typing import Dict, List, Optional

from charset_normalizer import from_bytes

from .errors import CsvParseError, UploadDecodeError
from .logging_setup import get_logger

logger = get_logger(__name__)

UTF8_BOM = b"\xef\xbb\xbf"


def decode_upload(raw: bytes) -> str:
    """
    Decode uploaded file bytes to text.

    Rules:
    - Valid UTF-8 is decoded as such; a leading BOM is dropped.
    - Otherwise the best guess from charset-normalizer is used.
    - If nothing fits, raise UploadDecodeError.
    """
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        match = from_bytes(raw).best()
        if match is None:
            raise UploadDecodeError(f"Could not decode upload: {exc.reason}") from exc
        logger.warning(f"Upload is not valid UTF-8, decoded as {match.encoding}")
        return str(match)


def parse_csv(text: str) -> List[Dict[str, str]]:
    """
    Parse CSV text into one dict per data row, keyed by the header row.

    Blank lines are skipped. A row whose width differs from the header's,
    or any quoting error, raises CsvParseError.
    """
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=",", strict=True)

    header: Optional[List[str]] = None
    rows: List[Dict[str, str]] = []

    try:
        for record in reader:
            if not record:
                continue

            if header is None:
                header = record
                continue

            if len(record) != len(header):
                raise CsvParseError(
                    f"expected {len(header)} columns, found {len(record)}",
                    line=reader.line_num,
                )

            rows.append(dict(zip(header, record)))
    except csv.Error as exc:
        raise CsvParseError(str(exc), line=reader.line_num) from exc

    logger.debug(f"Parsed {len(rows)} CSV rows")
    return rows
