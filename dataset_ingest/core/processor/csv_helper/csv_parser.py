# csv_helper/csv_parser.py
"""
CSV Parsing

Delimiter detection, row tokenizing and table assembly for delimited text.
"""
import logging
from collections import Counter
from typing import Dict, List, Optional, Sequence

from dataset_ingest.core.processor.csv_helper.csv_constants import (
    COMMA,
    DEFAULT_DELIMITER,
    DELIMITER_CANDIDATES,
    DELIMITER_NAMES,
    EXTRA_FIELD_POLICY,
    MISSING_FIELD_POLICY,
    MISSING_FIELD_VALUE,
    QUOTE_CHAR,
    SEMICOLON,
    TAB,
    DuplicateColumnPolicy,
    ExtraFieldPolicy,
    MissingFieldPolicy,
)
from dataset_ingest.core.processor.csv_helper.csv_line_splitter import (
    split_csv_lines,
    trim_field,
)
from dataset_ingest.core.processor.csv_helper.csv_table import EMPTY_TABLE, ParsedTable

logger = logging.getLogger("dataset-ingest")

UNTERMINATED_QUOTE_WARNING = (
    "Input ended inside a quoted field; the last record may have absorbed "
    "the rest of the file"
)


class DuplicateColumnError(ValueError):
    """Raised when the header repeats a column name and duplicates are rejected."""

    def __init__(self, duplicates: Sequence[str]):
        self.duplicates = list(duplicates)
        names = ", ".join(repr(name) for name in self.duplicates)
        super().__init__(f"Duplicate column names in header: {names}")


def detect_delimiter(header: str) -> str:
    """
    Choose the field delimiter from the header record.

    Detection order:
    1. Any tab character selects tab
    2. More semicolons than commas outside quotes selects semicolon
    3. Otherwise comma

    Quote state is a parity toggle scoped to the header, so delimiters
    inside a quoted column name are not counted.

    Args:
        header: First logical record

    Returns:
        One of tab, comma, semicolon
    """
    if TAB in header:
        return TAB

    commas = 0
    semicolons = 0
    in_quote = False

    for ch in header:
        if ch == QUOTE_CHAR:
            in_quote = not in_quote
        if not in_quote:
            if ch == COMMA:
                commas += 1
            elif ch == SEMICOLON:
                semicolons += 1

    if semicolons > commas:
        return SEMICOLON
    return DEFAULT_DELIMITER


def parse_row(record: str, delimiter: str) -> List[str]:
    """
    Split one logical record into fields.

    Two states: unquoted and quoted. Unquoted, the delimiter ends a field
    and '"' enters quoted mode. Quoted, '""' yields a literal '"' and a lone
    '"' returns to unquoted mode; everything else (delimiters and line
    breaks included) is field content. Quote characters are never kept.

    The last field is always emitted, so a trailing delimiter produces a
    trailing empty field. Fields are not trimmed.

    Args:
        record: One logical record
        delimiter: Field delimiter

    Returns:
        List of field strings
    """
    fields: List[str] = []
    current: List[str] = []
    in_quote = False

    i = 0
    length = len(record)
    while i < length:
        ch = record[i]

        if in_quote:
            if ch == QUOTE_CHAR:
                if i + 1 < length and record[i + 1] == QUOTE_CHAR:
                    current.append(QUOTE_CHAR)
                    i += 1
                else:
                    in_quote = False
            else:
                current.append(ch)
        elif ch == QUOTE_CHAR:
            in_quote = True
        elif ch == delimiter:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)

        i += 1

    fields.append("".join(current))
    return fields


def resolve_columns(
    header_fields: Sequence[str],
    policy: DuplicateColumnPolicy = DuplicateColumnPolicy.OVERWRITE,
) -> List[str]:
    """
    Turn raw header fields into column names.

    Names are trimmed (whitespace and a stray BOM); empty names are allowed. Repeated names are handled
    according to the duplicate column policy.

    Args:
        header_fields: Tokenized header record
        policy: Duplicate column policy

    Returns:
        Column names in header order

    Raises:
        DuplicateColumnError: If policy is REJECT and a name repeats
    """
    columns = [trim_field(name) for name in header_fields]

    counts = Counter(columns)
    duplicates = [name for name, count in counts.items() if count > 1]
    if not duplicates:
        return columns

    if policy is DuplicateColumnPolicy.REJECT:
        raise DuplicateColumnError(duplicates)

    if policy is DuplicateColumnPolicy.RENAME:
        return _rename_duplicates(columns)

    logger.debug(f"Duplicate column names kept, later values win: {duplicates}")
    return columns


def _rename_duplicates(columns: Sequence[str]) -> List[str]:
    taken = set(columns)
    seen: Dict[str, int] = {}
    renamed: List[str] = []

    for name in columns:
        if name not in seen:
            seen[name] = 0
            renamed.append(name)
            continue

        suffix = seen[name]
        while True:
            suffix += 1
            candidate = f"{name}_{suffix}"
            if candidate not in taken:
                break
        seen[name] = suffix
        taken.add(candidate)
        renamed.append(candidate)

    return renamed


def build_row(columns: Sequence[str], values: Sequence[str]) -> Dict[str, str]:
    """
    Map tokenized fields onto column names.

    Missing trailing fields are padded with MISSING_FIELD_VALUE and fields
    beyond the column count are dropped. With duplicate names the later
    column wins.

    Args:
        columns: Column names
        values: Tokenized fields of one record

    Returns:
        Row record keyed by column name
    """
    if EXTRA_FIELD_POLICY is ExtraFieldPolicy.DROP:
        values = values[:len(columns)]

    row: Dict[str, str] = {}
    for idx, col in enumerate(columns):
        if idx < len(values):
            row[col] = trim_field(values[idx])
        elif MISSING_FIELD_POLICY is MissingFieldPolicy.PAD:
            row[col] = MISSING_FIELD_VALUE
    return row


def parse_csv_content(
    content: str,
    delimiter: Optional[str] = None,
    duplicate_column_policy: DuplicateColumnPolicy = DuplicateColumnPolicy.OVERWRITE,
) -> ParsedTable:
    """
    Parse delimited text into a table.

    The first logical record is the header. Every other record becomes one
    row; ragged rows are padded or truncated, never rejected. Empty or
    blank input gives an empty table.

    Args:
        content: Decoded file contents
        delimiter: Delimiter to use (None to detect from the header)
        duplicate_column_policy: Duplicate header name handling

    Returns:
        ParsedTable

    Raises:
        TypeError: If content is not a str
        ValueError: If delimiter is not a supported delimiter
        DuplicateColumnError: If duplicates are rejected and present
    """
    if not isinstance(content, str):
        raise TypeError(f"CSV content must be str, got {type(content).__name__}")

    if delimiter is not None and delimiter not in DELIMITER_CANDIDATES:
        raise ValueError(f"Unsupported delimiter: {delimiter!r}")

    split = split_csv_lines(content)
    if not split.records:
        return EMPTY_TABLE

    header = split.records[0]
    if delimiter is None:
        delimiter = detect_delimiter(header)
    logger.debug(f"Using delimiter {DELIMITER_NAMES.get(delimiter, repr(delimiter))}")

    columns = resolve_columns(parse_row(header, delimiter), duplicate_column_policy)

    rows = [
        build_row(columns, parse_row(record, delimiter))
        for record in split.records[1:]
    ]

    warnings: List[str] = []
    if split.unterminated_quote:
        logger.warning(UNTERMINATED_QUOTE_WARNING)
        warnings.append(UNTERMINATED_QUOTE_WARNING)

    return ParsedTable.build(
        columns=columns,
        rows=rows,
        delimiter=delimiter,
        unterminated_quote=split.unterminated_quote,
        warnings=warnings,
    )


def parse(text: str) -> ParsedTable:
    """Parse CSV/TSV text with delimiter detection and default policies."""
    return parse_csv_content(text)
