# dataset_ingest/core/processor/csv_helper/csv_file_converter.py
"""
CSVFileConverter - CSV upload decoder

Converts uploaded CSV/TSV bytes to text with encoding detection.
"""
from typing import Optional, Sequence, Tuple

from dataset_ingest.core.functions.file_converter import BaseFileConverter
from dataset_ingest.core.processor.csv_helper.csv_constants import ENCODING_CANDIDATES
from dataset_ingest.core.processor.csv_helper.csv_encoding import decode_csv_bytes


class CSVFileConverter(BaseFileConverter):
    """
    CSV file converter.

    Decodes uploaded bytes via BOM, chardet and candidate encodings, and
    remembers the encoding that succeeded.
    """

    def __init__(self, encodings: Optional[Sequence[str]] = None):
        self._encodings = tuple(encodings or ENCODING_CANDIDATES)
        self._detected_encoding: Optional[str] = None

    def convert(
        self,
        file_data: bytes,
        encoding: Optional[str] = None,
        **kwargs
    ) -> Tuple[str, str]:
        """
        Convert CSV bytes to text.

        Args:
            file_data: Raw uploaded bytes
            encoding: Encoding to try first (None for auto-detect)
            **kwargs: Ignored

        Returns:
            Tuple of (decoded text, detected encoding)
        """
        text, detected = decode_csv_bytes(
            bytes(file_data),
            preferred_encoding=encoding,
            candidates=self._encodings,
        )
        self._detected_encoding = detected
        return text, detected

    def get_format_name(self) -> str:
        enc = self._detected_encoding or 'unknown'
        return f"CSV ({enc})"

    @property
    def detected_encoding(self) -> Optional[str]:
        """Encoding detected during the last conversion."""
        return self._detected_encoding
