"""
Functions - Shared pipeline building blocks

Module Components:
- file_converter: BaseFileConverter interface for decoding uploads
"""

from dataset_ingest.core.functions.file_converter import BaseFileConverter

__all__ = [
    "BaseFileConverter",
]
