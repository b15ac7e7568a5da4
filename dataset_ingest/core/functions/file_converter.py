# dataset_ingest/core/functions/file_converter.py
"""
BaseFileConverter - Abstract base class for upload decoding

Defines the interface for turning uploaded dataset bytes into something a
handler can parse. This is the FIRST step in the ingestion pipeline:
    Uploaded bytes -> FileConverter -> Decoded text -> Handler parsing

Usage:
    class CSVFileConverter(BaseFileConverter):
        def convert(self, file_data: bytes, **kwargs) -> Tuple[str, str]:
            return decode_csv_bytes(file_data)

        def get_format_name(self) -> str:
            return "CSV"
"""
from abc import ABC, abstractmethod
from typing import Any


class BaseFileConverter(ABC):
    """
    Abstract base class for file converters.

    Subclasses must implement:
    - convert(): Convert uploaded bytes to a workable form
    - get_format_name(): Return human-readable format name
    """

    @abstractmethod
    def convert(self, file_data: bytes, **kwargs) -> Any:
        """
        Convert uploaded bytes.

        Args:
            file_data: Raw uploaded bytes
            **kwargs: Format-specific options

        Returns:
            Format-specific result
        """

    @abstractmethod
    def get_format_name(self) -> str:
        """Return format name (e.g., "CSV (utf-8)")."""

    def validate(self, file_data: bytes) -> bool:
        """
        Check whether the data looks convertible.

        Default implementation accepts anything that is bytes-like.
        """
        return isinstance(file_data, (bytes, bytearray, memoryview))

