"""
CSV rows to display notes.

A notable row's note text is split after its first full stop; any other row
is split at its first comma. The text before the split is the headline, the
rest is the body, and ``headline + body`` always gives back the original.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, List, Optional

from .errors import MissingFieldError, NoFileUploaded
from .logging_setup import get_logger
from .models import Note, ResultPage
from .parser import decode_upload, parse_csv
from .rules import (
    CHECKED_MARKER,
    ERROR_PREFIX,
    NOTABLE_FIELD,
    NOTABLE_MARKERS,
    NOTABLE_SEPARATOR,
    NOTE_FIELD,
    PAYWALL_FIELD,
    PLAIN_SEPARATOR,
    URL_FIELD,
)
from .shortener import shorten_link

logger = get_logger(__name__)

LINK_PREFIX_RE = re.compile(r"^(?:https?://)?(?:www\.)?", re.IGNORECASE)


def _substring(text: str, start: int, end: Optional[int] = None) -> str:
    """Slice with out-of-range bounds clamped, so -1 behaves like 0."""
    size = len(text)
    start = min(max(start, 0), size)
    end = size if end is None else min(max(end, 0), size)
    if start > end:
        start, end = end, start
    return text[start:end]


def _required(row: Mapping, field: str) -> str:
    value = row.get(field)
    if value is None:
        raise MissingFieldError(field)
    return value


def split_index(note: str, notable: bool) -> int:
    if notable:
        return note.find(NOTABLE_SEPARATOR) + 1
    # -1 without a comma: empty headline, whole text as body
    return note.find(PLAIN_SEPARATOR)


def strip_link_prefix(url: str) -> str:
    return LINK_PREFIX_RE.sub("", url, count=1)


def to_note(row: Mapping) -> Note:
    text = _required(row, NOTE_FIELD)
    url = _required(row, URL_FIELD)

    notable = row.get(NOTABLE_FIELD) in NOTABLE_MARKERS
    split = split_index(text, notable)

    return Note(
        notable=notable,
        headline=_substring(text, 0, split),
        body=_substring(text, split),
        link=url,
        link_text=strip_link_prefix(url),
        short_link_text=shorten_link(url),
        paywall=row.get(PAYWALL_FIELD) == CHECKED_MARKER,
    )


def map_rows(rows: Any) -> List[Note]:
    """Map every parsed row to a Note, keeping order. Anything but a sequence of rows gives []."""
    if not isinstance(rows, Sequence) or isinstance(rows, (str, bytes)):
        logger.error(f"Invalid input: rows should be a list, got {type(rows).__name__}")
        return []
    if not all(isinstance(row, Mapping) for row in rows):
        logger.error("Invalid input: every row should be a mapping of column name to value")
        return []

    return [to_note(row) for row in rows]


def transform_csv(text: str) -> List[Note]:
    try:
        return map_rows(parse_csv(text))
    except Exception as e:
        logger.error(f"Error in transform_csv: {e}")
        raise


def build_result(raw: Optional[bytes]) -> ResultPage:
    """Run an uploaded file through the pipeline and wrap the outcome for the result page."""
    try:
        if raw is None:
            raise NoFileUploaded()
        notes = transform_csv(decode_upload(raw))
    except Exception as e:
        logger.exception(ERROR_PREFIX)
        return ResultPage(error=f"{ERROR_PREFIX} {e}")

    logger.info(f"Processed {len(notes)} notes")
    return ResultPage(processed_data=notes)
