# csv_helper/csv_line_splitter.py
"""
CSV Logical Record Splitting

Splits decoded CSV text into logical records (one per table row) while
keeping line breaks that occur inside quoted fields.

Quote tracking is a plain parity toggle: every '"' flips the state, so an
escaped '""' flips it twice and leaves it unchanged. The splitter never
needs to tell an opening quote from a closing one.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import List

from dataset_ingest.core.processor.csv_helper.csv_constants import (
    BOM_CHAR,
    LINE_BREAK_CHARS,
    QUOTE_CHAR,
)

logger = logging.getLogger("dataset-ingest")

# Unicode whitespace plus a stray byte order mark at either end
_TRIM_PATTERN = re.compile(rf"^[\s{BOM_CHAR}]+|[\s{BOM_CHAR}]+$")


@dataclass
class LineSplitResult:
    """
    Result of splitting raw text into logical records.

    Attributes:
        records: Non-blank logical records in input order
        unterminated_quote: True if input ended while still inside quotes,
            in which case the last record absorbed the rest of the text
    """
    records: List[str] = field(default_factory=list)
    unterminated_quote: bool = False

    def __len__(self) -> int:
        return len(self.records)


def split_csv_lines(text: str) -> LineSplitResult:
    """
    Split text into logical records.

    Outside quotes, '\\r\\n', '\\n' and '\\r' each end a record. Inside
    quotes they are kept as record content. Records that are blank after
    stripping are discarded, including a trailing partial record.

    Args:
        text: Full decoded file contents

    Returns:
        LineSplitResult with the records and the final quote state
    """
    records: List[str] = []
    current: List[str] = []
    in_quote = False

    i = 0
    length = len(text)
    while i < length:
        ch = text[i]

        if ch == QUOTE_CHAR:
            in_quote = not in_quote
            current.append(ch)
        elif ch in LINE_BREAK_CHARS and not in_quote:
            if ch == '\r' and i + 1 < length and text[i + 1] == '\n':
                i += 1
            _flush(current, records)
            current = []
        else:
            current.append(ch)

        i += 1

    _flush(current, records)

    if in_quote:
        logger.debug(f"Input ended inside a quoted field after {len(records)} records")

    return LineSplitResult(records=records, unterminated_quote=in_quote)


def trim_field(value: str) -> str:
    """Strip surrounding whitespace, including a leading or trailing BOM."""
    return _TRIM_PATTERN.sub("", value)


def _flush(current: List[str], records: List[str]) -> None:
    record = "".join(current)
    if trim_field(record):
        records.append(record)
