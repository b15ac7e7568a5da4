# csv_helper/csv_encoding.py
"""
CSV Encoding Detection

Decodes uploaded dataset bytes to text using BOM detection, the chardet
library, and a list of fallback encodings.
"""
import logging
from typing import Optional, Sequence, Tuple

import chardet

from dataset_ingest.core.processor.csv_helper.csv_constants import (
    CHARDET_MIN_CONFIDENCE,
    CHARDET_SAMPLE_SIZE,
    ENCODING_CANDIDATES,
)

logger = logging.getLogger("dataset-ingest")

# (marker, codec) pairs; UTF-32 markers must be checked before UTF-16
BOM_MARKERS = (
    (b'\xef\xbb\xbf', 'utf-8-sig'),
    (b'\xff\xfe\x00\x00', 'utf-32'),
    (b'\x00\x00\xfe\xff', 'utf-32'),
    (b'\xff\xfe', 'utf-16'),
    (b'\xfe\xff', 'utf-16'),
)


def detect_bom(data: bytes) -> Optional[str]:
    """
    Detect a byte order mark.

    The returned codec consumes the BOM while decoding.

    Args:
        data: Raw file bytes

    Returns:
        Codec name or None
    """
    for marker, codec in BOM_MARKERS:
        if data.startswith(marker):
            return codec
    return None


def decode_csv_bytes(
    data: bytes,
    preferred_encoding: Optional[str] = None,
    candidates: Sequence[str] = ENCODING_CANDIDATES,
) -> Tuple[str, str]:
    """
    Decode raw CSV bytes to text.

    Detection order:
    1. BOM
    2. Preferred encoding (if given)
    3. Strict UTF-8
    4. chardet (confidence above CHARDET_MIN_CONFIDENCE)
    5. Candidate encodings in order
    6. latin-1 with replacement

    Args:
        data: Raw file bytes
        preferred_encoding: Encoding to try before detection
        candidates: Fallback encodings

    Returns:
        (text, encoding) tuple
    """
    if not data:
        return "", preferred_encoding or "utf-8"

    bom_encoding = detect_bom(data)
    if bom_encoding:
        logger.debug(f"BOM detected: {bom_encoding}")
        try:
            return data.decode(bom_encoding), bom_encoding
        except UnicodeDecodeError:
            logger.debug(f"BOM encoding {bom_encoding} failed")

    if preferred_encoding:
        try:
            return data.decode(preferred_encoding), preferred_encoding
        except (UnicodeDecodeError, LookupError):
            logger.warning(f"Preferred encoding {preferred_encoding} failed, detecting")

    try:
        return data.decode("utf-8"), "utf-8"
    except UnicodeDecodeError:
        pass

    detected = chardet.detect(data[:CHARDET_SAMPLE_SIZE])
    detected_enc = detected.get("encoding") if detected else None
    if detected_enc:
        confidence = detected.get("confidence") or 0
        logger.debug(f"chardet detected: {detected_enc} (confidence: {confidence})")

        if confidence > CHARDET_MIN_CONFIDENCE:
            try:
                return data.decode(detected_enc), detected_enc
            except (UnicodeDecodeError, LookupError):
                pass

    for enc in candidates:
        try:
            text = data.decode(enc)
            logger.debug(f"Successfully decoded with: {enc}")
            return text, enc
        except (UnicodeDecodeError, LookupError):
            continue

    logger.warning("No candidate encoding matched, decoding as latin-1 with replacement")
    return data.decode('latin-1', errors='replace'), 'latin-1'
