"""
dataset_ingest Library

Parses uploaded delimited-text datasets (CSV/TSV) into in-memory tables.

Package Structure:
- core: Dataset ingestion core module
    - DatasetProcessor: Upload validation, decoding and parsing
    - processor: Format handlers and the CSV parsing helpers

Usage:
    from dataset_ingest import parse, DatasetProcessor

    table = parse('name,age\n"Smith, John",30\n')
    table.columns   # ('name', 'age')
    table.rows[0]   # {'name': 'Smith, John', 'age': '30'}

    processor = DatasetProcessor(max_dataset_size_mb=50)
    table = processor.parse_file("survey.csv")
"""

__version__ = "0.1.0"

from dataset_ingest.core import DatasetProcessor, create_processor
from dataset_ingest.core.dataset_processor import (
    DatasetTooLargeError,
    UnsupportedFileTypeError,
)
from dataset_ingest.core.processor.csv_helper import (
    DuplicateColumnError,
    DuplicateColumnPolicy,
    ParsedTable,
    ParserConfig,
    parse,
)

from dataset_ingest import core

__all__ = [
    "__version__",
    "parse",
    "ParsedTable",
    "ParserConfig",
    "DuplicateColumnPolicy",
    "DuplicateColumnError",
    "DatasetProcessor",
    "DatasetTooLargeError",
    "UnsupportedFileTypeError",
    "create_processor",
    "core",
]
