import pytest

from dataset_ingest.core.processor.csv_helper import csv_encoding
from dataset_ingest.core.processor.csv_helper.csv_encoding import decode_csv_bytes, detect_bom
from dataset_ingest.core.processor.csv_helper.csv_file_converter import CSVFileConverter


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\xef\xbb\xbfa,b", "utf-8-sig"),
        (b"\xff\xfe\x00\x00a\x00\x00\x00", "utf-32"),
        (b"\xff\xfea\x00", "utf-16"),
        (b"\xfe\xff\x00a", "utf-16"),
        (b"a,b", None),
    ],
)
def test_detect_bom(data, expected):
    assert detect_bom(data) == expected


def test_utf8_bom_is_stripped():
    text, encoding = decode_csv_bytes("name,age\n".encode("utf-8-sig"))

    assert text == "name,age\n"
    assert encoding == "utf-8-sig"


def test_utf16_with_bom():
    text, encoding = decode_csv_bytes("x,y\n1,2\n".encode("utf-16"))

    assert text == "x,y\n1,2\n"
    assert encoding == "utf-16"


def test_plain_utf8_is_decoded_without_detection(monkeypatch):
    def _fail(_data):
        raise AssertionError("chardet should not be consulted for valid UTF-8")

    monkeypatch.setattr(csv_encoding.chardet, "detect", _fail)

    text, encoding = decode_csv_bytes("naïve,ü\n".encode("utf-8"))

    assert text == "naïve,ü\n"
    assert encoding == "utf-8"


def test_preferred_encoding_is_tried_first():
    text, encoding = decode_csv_bytes("café,1\n".encode("cp1252"), preferred_encoding="cp1252")

    assert text == "café,1\n"
    assert encoding == "cp1252"


def test_unknown_preferred_encoding_falls_through():
    text, encoding = decode_csv_bytes(b"a,b\n", preferred_encoding="no-such-codec")

    assert text == "a,b\n"
    assert encoding == "utf-8"


def test_confident_chardet_result_is_used(monkeypatch):
    monkeypatch.setattr(
        csv_encoding.chardet, "detect", lambda _data: {"encoding": "latin-1", "confidence": 0.95}
    )

    text, encoding = decode_csv_bytes(b"caf\xe9,1\n")

    assert text == "café,1\n"
    assert encoding == "latin-1"


def test_low_confidence_falls_back_to_candidates(monkeypatch):
    monkeypatch.setattr(
        csv_encoding.chardet, "detect", lambda _data: {"encoding": "ascii", "confidence": 0.2}
    )

    text, encoding = decode_csv_bytes(b"caf\xe9,1\n")

    assert text == "café,1\n"
    assert encoding == "cp1252"


def test_empty_bytes():
    assert decode_csv_bytes(b"") == ("", "utf-8")


def test_file_converter_remembers_encoding():
    converter = CSVFileConverter()

    text, encoding = converter.convert("a,b\n".encode("utf-8-sig"))

    assert text == "a,b\n"
    assert converter.detected_encoding == "utf-8-sig"
    assert converter.get_format_name() == "CSV (utf-8-sig)"
    assert converter.validate(b"a,b")
    assert not converter.validate("a,b")
