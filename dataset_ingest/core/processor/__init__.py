"""
Processor - Dataset Format Handlers

Handler List:
- csv_handler: CSV/TSV dataset parsing

Helper Modules (subdirectories):
- csv_helper/: CSV parsing helpers

Usage Example:
    from dataset_ingest.core.processor import CSVHandler
    from dataset_ingest.core.processor.csv_helper import parse_csv_content
"""

from dataset_ingest.core.processor.base_handler import BaseHandler
from dataset_ingest.core.processor.csv_handler import CSVHandler

from dataset_ingest.core.processor import csv_helper

__all__ = [
    "BaseHandler",
    "CSVHandler",
    "csv_helper",
]
