# dataset_ingest/core/processor/base_handler.py
"""
BaseHandler - Abstract base class for dataset format handlers

Holds the parser configuration and a lazily created, format-specific file
converter. Each handler should override:
- _create_file_converter(): Provide format-specific file converter
- parse_file_data(): Decode and parse uploaded bytes

Processing Pipeline:
    1. file_converter.convert() - Uploaded bytes -> decoded text
    2. Format-specific parsing -> ParsedTable
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union, TYPE_CHECKING

from dataset_ingest.core.functions.file_converter import BaseFileConverter
from dataset_ingest.core.processor.csv_helper.csv_constants import ParserConfig

if TYPE_CHECKING:
    from dataset_ingest.core.dataset_processor import CurrentFile
    from dataset_ingest.core.processor.csv_helper.csv_table import ParsedTable


class BaseHandler(ABC):
    """
    Abstract base class for dataset handlers.

    Attributes:
        config: ParserConfig shared with DatasetProcessor
        file_converter: Format-specific file converter (lazy-initialized)
        logger: Logging instance
    """

    def __init__(self, config: Optional[Union[ParserConfig, Dict[str, Any]]] = None):
        """
        Initialize BaseHandler.

        Args:
            config: ParserConfig or dict of ParserConfig fields
        """
        if isinstance(config, ParserConfig):
            self._config = config
        else:
            self._config = ParserConfig.from_dict(config)
        self._file_converter: Optional[BaseFileConverter] = None
        self._logger = logging.getLogger(f"dataset-ingest.{self.__class__.__name__}")

    @abstractmethod
    def _create_file_converter(self) -> BaseFileConverter:
        """Create format-specific file converter."""

    @abstractmethod
    def parse_file_data(self, current_file: "CurrentFile", **kwargs) -> "ParsedTable":
        """
        Decode and parse an uploaded file.

        Args:
            current_file: CurrentFile dict containing file info and bytes
            **kwargs: Handler-specific options

        Returns:
            ParsedTable
        """

    @property
    def config(self) -> ParserConfig:
        return self._config

    @property
    def file_converter(self) -> BaseFileConverter:
        if self._file_converter is None:
            self._file_converter = self._create_file_converter()
        return self._file_converter

    @property
    def logger(self) -> logging.Logger:
        return self._logger
