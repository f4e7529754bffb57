#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for input reading helpers."""

from io import BytesIO, StringIO
from pathlib import Path

import pytest

from tagdown._input_utils import is_file_like, read_html_input
from tagdown.exceptions import InputError, ValidationError


@pytest.mark.unit
class TestReadHtmlInput:
    """Tests for read_html_input."""

    def test_string_is_content_not_path(self, tmp_path: Path) -> None:
        html_file = tmp_path / "page.html"
        html_file.write_text("<b>file</b>", encoding="utf-8")
        assert read_html_input(str(html_file)) == str(html_file)

    def test_bytes_are_decoded(self) -> None:
        assert read_html_input("<b>é</b>".encode("utf-8")) == "<b>é</b>"

    def test_path(self, tmp_path: Path) -> None:
        html_file = tmp_path / "page.html"
        html_file.write_text("<i>x</i>", encoding="utf-8")
        assert read_html_input(html_file) == "<i>x</i>"

    def test_missing_path(self, tmp_path: Path) -> None:
        with pytest.raises(InputError, match="does not exist"):
            read_html_input(tmp_path / "missing.html")

    def test_directory_path(self, tmp_path: Path) -> None:
        with pytest.raises(InputError):
            read_html_input(tmp_path)

    def test_text_stream(self) -> None:
        assert read_html_input(StringIO("<p>x</p>")) == "<p>x</p>"

    def test_binary_stream(self) -> None:
        assert read_html_input(BytesIO(b"<p>x</p>")) == "<p>x</p>"

    def test_invalid_utf8(self) -> None:
        with pytest.raises(InputError, match="UTF-8") as exc_info:
            read_html_input(b"\xff\xfe<b>")
        assert isinstance(exc_info.value.original_error, UnicodeDecodeError)

    def test_unsupported_type(self) -> None:
        with pytest.raises(InputError, match="Unsupported input type: int") as exc_info:
            read_html_input(42)  # type: ignore[arg-type]
        assert isinstance(exc_info.value, ValidationError)
        assert exc_info.value.parameter_value == 42

    def test_stream_read_failure(self) -> None:
        class BrokenStream:
            def read(self):
                raise OSError("disk gone")

        with pytest.raises(InputError, match="disk gone"):
            read_html_input(BrokenStream())  # type: ignore[arg-type]


@pytest.mark.unit
def test_is_file_like() -> None:
    assert is_file_like(StringIO(""))
    assert is_file_like(BytesIO(b""))
    assert not is_file_like("text")
    assert not is_file_like(b"bytes")
