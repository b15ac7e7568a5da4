# csv_helper/__init__.py
"""
CSV Helper Module

Building blocks used by csv_handler.py.

Module Components:
- csv_constants: Constants, policies and ParserConfig
- csv_encoding: Encoding detection for uploaded bytes
- csv_file_converter: CSVFileConverter
- csv_line_splitter: Quote-aware logical record splitting
- csv_parser: Delimiter detection, row tokenizing, table assembly
- csv_table: ParsedTable and Markdown preview rendering
"""

# Constants
from dataset_ingest.core.processor.csv_helper.csv_constants import (
    TAB,
    COMMA,
    SEMICOLON,
    DELIMITER_CANDIDATES,
    DELIMITER_NAMES,
    ENCODING_CANDIDATES,
    MAX_DATASET_SIZE_MB,
    MAX_ROWS_PREVIEW,
    ALLOWED_EXTENSIONS,
    MISSING_FIELD_POLICY,
    MISSING_FIELD_VALUE,
    EXTRA_FIELD_POLICY,
    MissingFieldPolicy,
    ExtraFieldPolicy,
    DuplicateColumnPolicy,
    ParserConfig,
)

# Encoding
from dataset_ingest.core.processor.csv_helper.csv_encoding import (
    detect_bom,
    decode_csv_bytes,
)

# File converter
from dataset_ingest.core.processor.csv_helper.csv_file_converter import (
    CSVFileConverter,
)

# Line splitting
from dataset_ingest.core.processor.csv_helper.csv_line_splitter import (
    LineSplitResult,
    split_csv_lines,
)

# Table
from dataset_ingest.core.processor.csv_helper.csv_table import (
    ParsedTable,
    convert_table_to_markdown,
)

# Parser
from dataset_ingest.core.processor.csv_helper.csv_parser import (
    DuplicateColumnError,
    detect_delimiter,
    parse_row,
    resolve_columns,
    build_row,
    parse_csv_content,
    parse,
)

__all__ = [
    # Constants
    "TAB",
    "COMMA",
    "SEMICOLON",
    "DELIMITER_CANDIDATES",
    "DELIMITER_NAMES",
    "ENCODING_CANDIDATES",
    "MAX_DATASET_SIZE_MB",
    "MAX_ROWS_PREVIEW",
    "ALLOWED_EXTENSIONS",
    "MISSING_FIELD_POLICY",
    "MISSING_FIELD_VALUE",
    "EXTRA_FIELD_POLICY",
    "MissingFieldPolicy",
    "ExtraFieldPolicy",
    "DuplicateColumnPolicy",
    "ParserConfig",
    # Encoding
    "detect_bom",
    "decode_csv_bytes",
    # File converter
    "CSVFileConverter",
    # Line splitting
    "LineSplitResult",
    "split_csv_lines",
    # Table
    "ParsedTable",
    "convert_table_to_markdown",
    # Parser
    "DuplicateColumnError",
    "detect_delimiter",
    "parse_row",
    "resolve_columns",
    "build_row",
    "parse_csv_content",
    "parse",
]
