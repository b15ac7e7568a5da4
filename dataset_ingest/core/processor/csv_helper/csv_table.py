# csv_helper/csv_table.py
"""
Parsed CSV Table

The in-memory table produced by parsing, plus Markdown rendering used for
dataset previews.
"""
import logging
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from dataset_ingest.core.processor.csv_helper.csv_constants import DEFAULT_DELIMITER

logger = logging.getLogger("dataset-ingest")


@dataclass(frozen=True)
class ParsedTable:
    """
    Parsed delimited-text table.

    Column names keep header order. Each row is a read-only mapping whose
    keys are exactly the column names; all values are strings.

    Attributes:
        columns: Trimmed header names
        rows: Row records in source order
        delimiter: Delimiter used for every record
        unterminated_quote: Input ended inside a quoted field
        warnings: Human-readable notes about suspicious input
    """
    columns: Tuple[str, ...] = ()
    rows: Tuple[Mapping[str, str], ...] = ()
    delimiter: str = DEFAULT_DELIMITER
    unterminated_quote: bool = False
    warnings: Tuple[str, ...] = ()

    @classmethod
    def build(
        cls,
        columns: Sequence[str],
        rows: Sequence[Dict[str, str]],
        delimiter: str = DEFAULT_DELIMITER,
        unterminated_quote: bool = False,
        warnings: Sequence[str] = (),
    ) -> "ParsedTable":
        """Freeze plain lists/dicts into a ParsedTable."""
        return cls(
            columns=tuple(columns),
            rows=tuple(MappingProxyType(dict(row)) for row in rows),
            delimiter=delimiter,
            unterminated_quote=unterminated_quote,
            warnings=tuple(warnings),
        )

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def col_count(self) -> int:
        return len(self.columns)

    @property
    def is_empty(self) -> bool:
        return not self.columns and not self.rows

    def head(self, n: int) -> "ParsedTable":
        """Return a copy holding only the first n rows."""
        return replace(self, rows=self.rows[:max(n, 0)])

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to plain Python structures.

        Returns:
            {"columns": [...], "rows": [{column: value}, ...]}
        """
        return {
            "columns": list(self.columns),
            "rows": [dict(row) for row in self.rows],
        }

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)


EMPTY_TABLE = ParsedTable()


def convert_table_to_markdown(table: ParsedTable, max_rows: Optional[int] = None) -> str:
    """
    Render a parsed table as a Markdown table.

    Args:
        table: Parsed table
        max_rows: Maximum data rows to render (None for all)

    Returns:
        Markdown table string, or "" for a table without columns
    """
    if not table.columns:
        return ""

    rows = table.rows if max_rows is None else table.rows[:max_rows]

    md_parts: List[str] = []
    header = [_escape_markdown_cell(col) for col in table.columns]
    md_parts.append("| " + " | ".join(header) + " |")
    md_parts.append("| " + " | ".join(["---"] * len(header)) + " |")

    for row in rows:
        cells = [_escape_markdown_cell(row.get(col, "")) for col in table.columns]
        md_parts.append("| " + " | ".join(cells) + " |")

    if max_rows is not None and table.row_count > max_rows:
        logger.debug(f"Markdown preview truncated to {max_rows} of {table.row_count} rows")

    return "\n".join(md_parts)


def _escape_markdown_cell(value: str) -> str:
    # Markdown tables need escaped pipes and cannot hold line breaks
    value = value.replace("|", "\\|")
    value = value.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")
    return value
