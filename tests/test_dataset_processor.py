import logging

import pytest

from dataset_ingest import (
    DatasetProcessor,
    DatasetTooLargeError,
    DuplicateColumnError,
    DuplicateColumnPolicy,
    ParserConfig,
    UnsupportedFileTypeError,
    create_processor,
)
from dataset_ingest.core.dataset_processor import CurrentFile


def test_validate_upload_accepts_allowed_extensions():
    processor = DatasetProcessor()

    assert processor.validate_upload("survey.csv", 10) == "csv"
    assert processor.validate_upload("SURVEY.TSV", 10) == "tsv"


def test_validate_upload_rejects_other_extensions():
    processor = DatasetProcessor()

    with pytest.raises(UnsupportedFileTypeError):
        processor.validate_upload("survey.dta", 10)
    with pytest.raises(UnsupportedFileTypeError):
        processor.validate_upload("survey", 10)


def test_validate_upload_enforces_size_limit():
    processor = DatasetProcessor(max_dataset_size_mb=1)

    processor.validate_upload("big.csv", 1024 * 1024)
    with pytest.raises(DatasetTooLargeError):
        processor.validate_upload("big.csv", 1024 * 1024 + 1)


def test_parse_text_detects_delimiter():
    table = DatasetProcessor().parse_text("a;b\n1;2\n")

    assert table.columns == ("a", "b")
    assert dict(table.rows[0]) == {"a": "1", "b": "2"}


def test_parse_bytes_with_file_name():
    table = DatasetProcessor().parse_bytes(b"a;b\n1;2\n", file_name="upload.csv")

    assert table.delimiter == ";"
    assert table.row_count == 1


def test_parse_bytes_tsv_forces_tab():
    table = DatasetProcessor().parse_bytes(b"a,b\n1,2\n", file_name="upload.tsv")

    assert table.delimiter == "\t"
    assert table.columns == ("a,b",)
    assert dict(table.rows[0]) == {"a,b": "1,2"}


def test_parse_bytes_rejects_bad_extension():
    with pytest.raises(UnsupportedFileTypeError):
        DatasetProcessor().parse_bytes(b"a,b\n", file_name="upload.xlsx")


def test_parse_bytes_without_name_still_checks_size():
    processor = DatasetProcessor(max_dataset_size_mb=0)

    with pytest.raises(DatasetTooLargeError):
        processor.parse_bytes(b"a")


def test_parse_file_strips_bom(tmp_path):
    path = tmp_path / "people.csv"
    path.write_bytes('name,age\n"Smith, John",30\n'.encode("utf-8-sig"))

    table = DatasetProcessor().parse_file(path)

    assert table.columns == ("name", "age")
    assert dict(table.rows[0]) == {"name": "Smith, John", "age": "30"}


def test_parse_file_with_explicit_encoding(tmp_path):
    path = tmp_path / "legacy.csv"
    path.write_bytes("city;pop\nZürich;400\n".encode("cp1252"))

    table = DatasetProcessor().parse_file(path, encoding="cp1252")

    assert dict(table.rows[0]) == {"city": "Zürich", "pop": "400"}


def test_parse_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        DatasetProcessor().parse_file(tmp_path / "missing.csv")


def test_parse_file_disallowed_extension(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{}")

    with pytest.raises(UnsupportedFileTypeError):
        DatasetProcessor().parse_file(path)


def test_config_from_dict_and_kwargs():
    processor = DatasetProcessor(
        {"duplicate_column_policy": "reject", "allowed_extensions": [".CSV"], "unused": 1},
        preview_rows=5,
    )

    assert processor.config.duplicate_column_policy is DuplicateColumnPolicy.REJECT
    assert processor.supported_extensions == ["csv"]
    assert processor.config.preview_rows == 5
    with pytest.raises(DuplicateColumnError):
        processor.parse_text("a,a\n1,2\n")


def test_config_instance_with_override():
    config = ParserConfig(duplicate_column_policy=DuplicateColumnPolicy.RENAME, max_dataset_size_mb=3)

    processor = create_processor(config, max_dataset_size_mb=7)

    assert processor.config.max_dataset_size_bytes == 7 * 1024 * 1024
    assert processor.parse_text("a,a\n1,2\n").columns == ("a", "a_1")


def test_preview_limits_rows():
    processor = DatasetProcessor(preview_rows=2)
    table = processor.parse_text("n\n1\n2\n3\n4\n")

    assert processor.preview(table).row_count == 2
    assert processor.preview(table, 3).row_count == 3
    assert processor.preview_markdown(table) == "| n |\n| --- |\n| 1 |\n| 2 |"


def test_unterminated_quote_warns_once(caplog):
    caplog.set_level(logging.INFO, logger="dataset-ingest")

    table = DatasetProcessor().parse_text('a\n"never closed\n')

    assert table.unterminated_quote
    warnings = [r for r in caplog.records if r.levelno >= logging.WARNING]
    assert len(warnings) == 1
    assert "quoted field" in warnings[0].getMessage()
    assert any(
        r.levelno == logging.INFO and "unterminated quote" in r.getMessage()
        for r in caplog.records
    )


def test_processor_logs_under_package_logger(tmp_path, caplog):
    caplog.set_level(logging.INFO, logger="dataset-ingest")
    path = tmp_path / "data.csv"
    path.write_text("a,b\n1,2\n", encoding="utf-8")

    DatasetProcessor().parse_file(path)

    names = {r.name for r in caplog.records if "Parsing dataset" in r.getMessage()}
    assert names == {"dataset-ingest.processor"}


def test_handler_receives_file_without_stream(monkeypatch):
    processor = DatasetProcessor()
    seen = {}
    original = processor.csv_handler.parse_file_data

    def spy(current_file, **kwargs):
        seen.update(current_file)
        return original(current_file, **kwargs)

    monkeypatch.setattr(processor.csv_handler, "parse_file_data", spy)
    processor.parse_bytes(b"a,b\n1,2\n", file_name="data.csv")

    assert set(seen) == {"file_path", "file_name", "file_extension", "file_data", "file_size"}
    assert "file_stream" not in CurrentFile.__annotations__
