"""Tests for the JSON reader."""

from __future__ import annotations

from pathlib import Path

import pytest

from jsonfs.exceptions import InvalidJson, ReadFileFailed
from jsonfs.io.reader import parse_json, read_json_file, read_json_file_sync
from jsonfs.models import NOT_FOUND, ErrorKind


class TestParseJson:
    def test_standard_json(self) -> None:
        assert parse_json('{"a": [1, 2.5, null, true]}') == {"a": [1, 2.5, None, True]}

    @pytest.mark.parametrize("text", ["NaN", "[Infinity]", '{"x": -Infinity}'])
    def test_rejects_non_standard_constants(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_json(text)


class TestReadSync:
    def test_missing_file_returns_not_found(self, tmp_path: Path, observer) -> None:
        result = read_json_file_sync(tmp_path / "missing.json", observer=observer)
        assert result is NOT_FOUND
        assert observer.errors == []

    def test_missing_directory_returns_not_found(self, tmp_path: Path, observer) -> None:
        assert read_json_file_sync(tmp_path / "no" / "such.json", observer=observer) is NOT_FOUND

    def test_null_document_is_not_not_found(self, tmp_path: Path, observer) -> None:
        path = tmp_path / "null.json"
        path.write_text("null", encoding="utf-8")

        result = read_json_file_sync(path, observer=observer)
        assert result is None
        assert result is not NOT_FOUND

    def test_reads_value(self, existing_file: Path, observer) -> None:
        assert read_json_file_sync(existing_file, observer=observer) == {"version": "A"}

    def test_reads_utf8(self, tmp_path: Path, observer) -> None:
        path = tmp_path / "utf8.json"
        path.write_bytes('{"name": "Zoë"}'.encode("utf-8"))
        assert read_json_file_sync(str(path), observer=observer) == {"name": "Zoë"}

    def test_invalid_json(self, tmp_path: Path, observer) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(InvalidJson) as exc_info:
            read_json_file_sync(path, observer=observer)

        assert exc_info.value.kind is ErrorKind.INVALID_JSON
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert observer.error_kinds == [ErrorKind.INVALID_JSON]

    def test_empty_file_is_invalid_json(self, tmp_path: Path, observer) -> None:
        path = tmp_path / "empty.json"
        path.write_text("", encoding="utf-8")
        with pytest.raises(InvalidJson):
            read_json_file_sync(path, observer=observer)

    def test_directory_is_read_failure(self, tmp_path: Path, observer) -> None:
        path = tmp_path / "dir.json"
        path.mkdir()

        with pytest.raises(ReadFileFailed) as exc_info:
            read_json_file_sync(path, observer=observer)

        assert isinstance(exc_info.value.__cause__, OSError)
        assert observer.error_kinds == [ErrorKind.READ_FILE_FAILED]

    def test_undecodable_bytes_are_read_failure(self, tmp_path: Path, observer) -> None:
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"a": "\xff\xfe"}')
        with pytest.raises(ReadFileFailed):
            read_json_file_sync(path, observer=observer)

    def test_reports_method_and_timings(self, existing_file: Path, observer) -> None:
        read_json_file_sync(existing_file, observer=observer)

        assert observer.methods == [("read_json_file_sync", {"path": str(existing_file)})]
        assert observer.timings == ["read_file data.json", "json_parse data.json"]


class TestReadAsync:
    async def test_missing_file_returns_not_found(self, tmp_path: Path, observer) -> None:
        assert await read_json_file(tmp_path / "missing.json", observer=observer) is NOT_FOUND

    async def test_reads_value(self, existing_file: Path, observer) -> None:
        assert await read_json_file(existing_file, observer=observer) == {"version": "A"}
        assert observer.methods[0][0] == "read_json_file"

    async def test_invalid_json(self, tmp_path: Path, observer) -> None:
        path = tmp_path / "broken.json"
        path.write_text("[1, 2,", encoding="utf-8")
        with pytest.raises(InvalidJson):
            await read_json_file(path, observer=observer)

    async def test_directory_is_read_failure(self, tmp_path: Path, observer) -> None:
        path = tmp_path / "dir.json"
        path.mkdir()
        with pytest.raises(ReadFileFailed):
            await read_json_file(path, observer=observer)
