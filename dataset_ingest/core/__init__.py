"""
Core - Dataset Ingestion Core Module

Module Structure:
- dataset_processor: Main DatasetProcessor class
- processor/: Format handlers
    - csv_handler: CSV/TSV parsing
- functions/: Shared pipeline building blocks

Usage Example:
    from dataset_ingest.core import DatasetProcessor

    processor = DatasetProcessor()
    table = processor.parse_file("survey.csv")
"""

from dataset_ingest.core.dataset_processor import (
    DatasetProcessor,
    DatasetTooLargeError,
    UnsupportedFileTypeError,
    create_processor,
)

from dataset_ingest.core import processor
from dataset_ingest.core import functions

__all__ = [
    "DatasetProcessor",
    "DatasetTooLargeError",
    "UnsupportedFileTypeError",
    "create_processor",
    "processor",
    "functions",
]
