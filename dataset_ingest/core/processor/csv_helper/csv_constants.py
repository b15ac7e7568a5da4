# csv_helper/csv_constants.py
"""
CSV Parser Constants and Types

Defines constants, policies and configuration dataclasses used while
ingesting delimited-text (CSV/TSV) datasets.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


# === Quote / line constants ===

QUOTE_CHAR = '"'

# Byte order mark left at the start of text decoded without BOM handling
BOM_CHAR = "\ufeff"

# Characters that end a logical record when outside quotes
LINE_BREAK_CHARS = ('\n', '\r')


# === Delimiter constants ===

TAB = '\t'
COMMA = ','
SEMICOLON = ';'

# Supported delimiters (priority order used by detection)
DELIMITER_CANDIDATES = [TAB, COMMA, SEMICOLON]

DEFAULT_DELIMITER = COMMA

# Delimiter display names
DELIMITER_NAMES = {
    TAB: 'tab (\\t)',
    COMMA: 'comma (,)',
    SEMICOLON: 'semicolon (;)',
}


# === Encoding constants ===

# Encodings to try in order once BOM and chardet detection fail
ENCODING_CANDIDATES = [
    "utf-8",
    "cp1252",     # Windows Western European exports
    "latin-1",    # fallback (accepts every byte)
]

# chardet results below this confidence are ignored
CHARDET_MIN_CONFIDENCE = 0.7

# Bytes handed to chardet
CHARDET_SAMPLE_SIZE = 10000


# === Upload limits ===

MAX_DATASET_SIZE_MB = 100

MAX_ROWS_PREVIEW = 100

ALLOWED_EXTENSIONS = ("csv", "tsv", "txt")


# === Ragged row policies ===

class MissingFieldPolicy(Enum):
    """What a row gets for columns the source record did not supply."""
    PAD = "pad"


class ExtraFieldPolicy(Enum):
    """What happens to fields beyond the header's column count."""
    DROP = "drop"


MISSING_FIELD_POLICY = MissingFieldPolicy.PAD
MISSING_FIELD_VALUE = ""
EXTRA_FIELD_POLICY = ExtraFieldPolicy.DROP


class DuplicateColumnPolicy(Enum):
    """
    Handling of repeated header names.

    OVERWRITE keeps the names as-is and later fields win in each row,
    REJECT raises DuplicateColumnError, RENAME appends numeric suffixes.
    """
    OVERWRITE = "overwrite"
    REJECT = "reject"
    RENAME = "rename"


# === Configuration ===

@dataclass
class ParserConfig:
    """
    Dataset parser configuration.

    Attributes:
        duplicate_column_policy: How repeated header names are handled
        max_dataset_size_mb: Upload size ceiling in MiB
        allowed_extensions: Accepted file extensions (lowercase, no dot)
        preview_rows: Rows kept by preview()
        encoding_candidates: Encodings tried after BOM/chardet detection
    """
    duplicate_column_policy: DuplicateColumnPolicy = DuplicateColumnPolicy.OVERWRITE
    max_dataset_size_mb: int = MAX_DATASET_SIZE_MB
    allowed_extensions: Tuple[str, ...] = ALLOWED_EXTENSIONS
    preview_rows: int = MAX_ROWS_PREVIEW
    encoding_candidates: Tuple[str, ...] = field(
        default_factory=lambda: tuple(ENCODING_CANDIDATES)
    )

    @property
    def max_dataset_size_bytes(self) -> int:
        return self.max_dataset_size_mb * 1024 * 1024

    @classmethod
    def from_dict(cls, values: Optional[Dict[str, Any]]) -> "ParserConfig":
        """
        Build a config from a plain dictionary.

        Unknown keys are ignored. The duplicate column policy may be given
        either as a DuplicateColumnPolicy or as its string value.
        """
        values = dict(values or {})
        known = {name: values[name] for name in cls.__dataclass_fields__ if name in values}

        policy = known.get("duplicate_column_policy")
        if isinstance(policy, str):
            known["duplicate_column_policy"] = DuplicateColumnPolicy(policy.lower())

        for key in ("allowed_extensions", "encoding_candidates"):
            if key in known and known[key] is not None:
                known[key] = tuple(known[key])

        if "allowed_extensions" in known:
            known["allowed_extensions"] = tuple(
                ext.lower().lstrip('.') for ext in known["allowed_extensions"]
            )

        return cls(**known)
