# dataset_ingest/core/dataset_processor.py
"""DatasetProcessor - Dataset Ingestion Class

Main entry point of the dataset_ingest library. Validates uploads against
the extension allow-list and size ceiling, decodes them, and parses
delimited text (CSV/TSV) into a ParsedTable.

Usage Example:
    from dataset_ingest.core.dataset_processor import DatasetProcessor

    processor = DatasetProcessor()

    # Parse already decoded text
    table = processor.parse_text("name,age\\nAda,36\\n")

    # Parse an uploaded payload
    table = processor.parse_bytes(payload, file_name="survey.csv")

    # Parse a file on disk
    table = processor.parse_file("data/survey.tsv")
    print(table.columns, table.row_count)
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union, TypedDict

from dataset_ingest.core.processor.csv_handler import CSVHandler
from dataset_ingest.core.processor.csv_helper.csv_constants import ParserConfig
from dataset_ingest.core.processor.csv_helper.csv_table import (
    ParsedTable,
    convert_table_to_markdown,
)


class UnsupportedFileTypeError(ValueError):
    """Raised when an upload's extension is not in the allow-list."""


class DatasetTooLargeError(ValueError):
    """Raised when an upload exceeds the configured size ceiling."""


class CurrentFile(TypedDict, total=False):
    """
    TypedDict containing uploaded file information.

    Attributes:
        file_path: Absolute path of the original file (if read from disk)
        file_name: File name (including extension)
        file_extension: File extension (lowercase, without dot)
        file_data: Raw bytes of the file
        file_size: File size in bytes
    """
    file_path: str
    file_name: str
    file_extension: str
    file_data: bytes
    file_size: int


class DatasetProcessor:
    """
    dataset_ingest Main Dataset Parsing Class

    Attributes:
        config: ParserConfig in effect
        supported_extensions: Accepted upload extensions

    Example:
        >>> processor = DatasetProcessor(duplicate_column_policy="rename")
        >>> table = processor.parse_text("a,a\\n1,2\\n")
        >>> table.columns
        ('a', 'a_1')
    """

    def __init__(
        self,
        config: Optional[Union[ParserConfig, Dict[str, Any]]] = None,
        **kwargs
    ):
        """
        Initialize DatasetProcessor.

        Args:
            config: ParserConfig instance or dict of its fields
                   - None: Use default settings
            **kwargs: ParserConfig field overrides
                   (duplicate_column_policy, max_dataset_size_mb,
                   allowed_extensions, preview_rows, encoding_candidates)
        """
        if isinstance(config, ParserConfig):
            values = {name: getattr(config, name) for name in ParserConfig.__dataclass_fields__}
        else:
            values = dict(config or {})
        values.update(kwargs)

        self._config = ParserConfig.from_dict(values)
        self._logger = logging.getLogger("dataset-ingest.processor")
        self._csv_handler: Optional[CSVHandler] = None

    # =========================================================================
    # Public Properties
    # =========================================================================

    @property
    def config(self) -> ParserConfig:
        """Current configuration."""
        return self._config

    @property
    def supported_extensions(self) -> list:
        """Accepted upload extensions."""
        return list(self._config.allowed_extensions)

    @property
    def csv_handler(self) -> CSVHandler:
        if self._csv_handler is None:
            self._csv_handler = CSVHandler(config=self._config)
        return self._csv_handler

    # =========================================================================
    # Public Methods - Validation
    # =========================================================================

    def is_supported(self, extension: str) -> bool:
        """Check whether an extension (with or without dot) is accepted."""
        return extension.lower().lstrip('.') in self._config.allowed_extensions

    def validate_upload(self, file_name: str, file_size: int) -> str:
        """
        Validate an upload before parsing.

        Args:
            file_name: Uploaded file name
            file_size: Upload size in bytes

        Returns:
            Normalized extension (lowercase, without dot)

        Raises:
            UnsupportedFileTypeError: If the extension is not allowed
            DatasetTooLargeError: If the size exceeds max_dataset_size_mb
        """
        ext = os.path.splitext(file_name)[1].lower().lstrip('.')
        if not self.is_supported(ext):
            allowed = ", ".join(f".{e}" for e in self._config.allowed_extensions)
            raise UnsupportedFileTypeError(f"Only {allowed} files are supported: {file_name}")

        if file_size > self._config.max_dataset_size_bytes:
            raise DatasetTooLargeError(
                f"File exceeds {self._config.max_dataset_size_mb}MB limit: {file_name}"
            )

        return ext

    # =========================================================================
    # Public Methods - Parsing
    # =========================================================================

    def parse_text(self, text: str, delimiter: Optional[str] = None) -> ParsedTable:
        """
        Parse decoded CSV/TSV text.

        Args:
            text: Decoded file contents
            delimiter: Delimiter override (None to detect)

        Returns:
            ParsedTable
        """
        return self.csv_handler.parse_text(text, delimiter=delimiter)

    def parse_bytes(
        self,
        data: bytes,
        file_name: Optional[str] = None,
        *,
        encoding: Optional[str] = None,
        delimiter: Optional[str] = None,
    ) -> ParsedTable:
        """
        Validate, decode and parse an uploaded payload.

        Args:
            data: Uploaded bytes
            file_name: Original file name; enables upload validation
            encoding: Encoding (None for auto-detect)
            delimiter: Delimiter override (None to detect)

        Returns:
            ParsedTable

        Raises:
            UnsupportedFileTypeError: If file_name has a disallowed extension
            DatasetTooLargeError: If data exceeds the size ceiling
        """
        ext = ""
        if file_name is not None:
            ext = self.validate_upload(file_name, len(data))
        elif len(data) > self._config.max_dataset_size_bytes:
            raise DatasetTooLargeError(
                f"Payload exceeds {self._config.max_dataset_size_mb}MB limit"
            )

        current_file: CurrentFile = {
            "file_path": file_name or "<upload>",
            "file_name": file_name or "",
            "file_extension": ext,
            "file_data": bytes(data),
            "file_size": len(data),
        }
        return self.csv_handler.parse_file_data(
            current_file, encoding=encoding, delimiter=delimiter
        )

    def parse_file(
        self,
        file_path: Union[str, Path],
        *,
        encoding: Optional[str] = None,
        delimiter: Optional[str] = None,
    ) -> ParsedTable:
        """
        Parse a CSV/TSV file from disk.

        Args:
            file_path: File path
            encoding: Encoding (None for auto-detect)
            delimiter: Delimiter override (None to detect)

        Returns:
            ParsedTable

        Raises:
            FileNotFoundError: If file cannot be found
            UnsupportedFileTypeError: If the extension is not allowed
            DatasetTooLargeError: If the file exceeds the size ceiling
        """
        file_path_str = str(file_path)

        if not os.path.exists(file_path_str):
            raise FileNotFoundError(f"File not found: {file_path_str}")

        self._logger.info(f"Parsing dataset: {file_path_str}")

        current_file = self._create_current_file(file_path_str)
        return self.csv_handler.parse_file_data(
            current_file, encoding=encoding, delimiter=delimiter
        )

    # =========================================================================
    # Public Methods - Preview
    # =========================================================================

    def preview(self, table: ParsedTable, n: Optional[int] = None) -> ParsedTable:
        """Return the first n rows (default: config.preview_rows)."""
        return table.head(self._config.preview_rows if n is None else n)

    def preview_markdown(self, table: ParsedTable, n: Optional[int] = None) -> str:
        """Render the preview rows of a table as Markdown."""
        return convert_table_to_markdown(self.preview(table, n))

    # =========================================================================
    # Private Methods
    # =========================================================================

    def _create_current_file(self, file_path: str) -> CurrentFile:
        """
        Create a CurrentFile dict from a file path.

        The size check runs before the file is read.
        """
        file_path = os.path.abspath(file_path)
        file_name = os.path.basename(file_path)
        ext = self.validate_upload(file_name, os.path.getsize(file_path))

        with open(file_path, 'rb') as f:
            file_data = f.read()

        return {
            "file_path": file_path,
            "file_name": file_name,
            "file_extension": ext,
            "file_data": file_data,
            "file_size": len(file_data),
        }

    def __repr__(self) -> str:
        return f"DatasetProcessor(supported_extensions={self.supported_extensions})"


# === Module-level Convenience Functions ===

def create_processor(
    config: Optional[Union[ParserConfig, Dict[str, Any]]] = None,
    **kwargs
) -> DatasetProcessor:
    """
    Create a DatasetProcessor instance.

    Example:
        >>> processor = create_processor(max_dataset_size_mb=10)
    """
    return DatasetProcessor(config=config, **kwargs)


__all__ = [
    "DatasetProcessor",
    "CurrentFile",
    "UnsupportedFileTypeError",
    "DatasetTooLargeError",
    "create_processor",
]
