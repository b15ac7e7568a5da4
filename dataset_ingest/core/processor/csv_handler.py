# dataset_ingest/core/processor/csv_handler.py
"""
CSV Handler - CSV/TSV Dataset Parser

Class-based handler for CSV/TSV uploads inheriting from BaseHandler.
"""
import os
from typing import Optional, TYPE_CHECKING

from dataset_ingest.core.processor.base_handler import BaseHandler
from dataset_ingest.core.processor.csv_helper import (
    DELIMITER_NAMES,
    TAB,
    CSVFileConverter,
    ParsedTable,
    parse_csv_content,
)

if TYPE_CHECKING:
    from dataset_ingest.core.dataset_processor import CurrentFile


class CSVHandler(BaseHandler):
    """CSV/TSV Dataset Parsing Handler Class"""

    def _create_file_converter(self) -> CSVFileConverter:
        return CSVFileConverter(encodings=self._config.encoding_candidates)

    def parse_text(self, text: str, delimiter: Optional[str] = None) -> ParsedTable:
        """
        Parse decoded CSV/TSV text.

        Args:
            text: Decoded file contents
            delimiter: Delimiter override (None to detect from the header)

        Returns:
            ParsedTable
        """
        table = parse_csv_content(
            text,
            delimiter=delimiter,
            duplicate_column_policy=self._config.duplicate_column_policy,
        )

        if table.unterminated_quote:
            self.logger.info(
                f"CSV input has an unterminated quote; {table.row_count} rows parsed"
            )
        return table

    def parse_file_data(
        self,
        current_file: "CurrentFile",
        encoding: Optional[str] = None,
        delimiter: Optional[str] = None,
        **kwargs
    ) -> ParsedTable:
        """
        Decode and parse an uploaded CSV/TSV file.

        Args:
            current_file: CurrentFile dict containing file info and bytes
            encoding: Encoding (None for auto-detect)
            delimiter: Delimiter (None for auto-detect; .tsv forces tab)
            **kwargs: Additional options

        Returns:
            ParsedTable
        """
        file_path = current_file.get("file_path", "unknown")
        ext = current_file.get("file_extension") or os.path.splitext(file_path)[1]
        ext = ext.lower().lstrip('.')
        self.logger.info(f"CSV processing: {file_path}, ext: {ext}")

        if ext == 'tsv' and delimiter is None:
            delimiter = TAB

        file_data = current_file.get("file_data", b"")
        content, detected_encoding = self.file_converter.convert(file_data, encoding=encoding)

        table = self.parse_text(content, delimiter=delimiter)

        self.logger.info(
            f"CSV processing completed: encoding={detected_encoding}, "
            f"delimiter={DELIMITER_NAMES.get(table.delimiter, repr(table.delimiter))}, "
            f"{table.col_count} columns, {table.row_count} rows"
        )
        return table
