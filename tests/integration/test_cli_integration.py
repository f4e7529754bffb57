"""Integration tests for the tagdown command line."""

import io
import sys
from pathlib import Path

import pytest

from tagdown.cli import main


@pytest.fixture
def html_file(tmp_path: Path) -> Path:
    path = tmp_path / "page.html"
    path.write_text("<p><b>Hello</b> <span>world</span></p>", encoding="utf-8")
    return path


@pytest.mark.integration
@pytest.mark.cli
class TestCLIIntegration:
    """End-to-end CLI runs."""

    def test_convert_file_to_stdout(self, html_file, capsys, restore_package_logger) -> None:
        assert main([str(html_file)]) == 0
        assert capsys.readouterr().out == "\n\n**Hello** <span>world</span>\n\n\n"

    def test_strip_and_remove(self, html_file, capsys, restore_package_logger) -> None:
        assert main([str(html_file), "--strip", "--unknown-tags", "remove"]) == 0
        assert capsys.readouterr().out == "**Hello**\n"

    def test_output_file(self, html_file, tmp_path, restore_package_logger) -> None:
        output_file = tmp_path / "out" / "page.md"
        assert main([str(html_file), "--out", str(output_file), "--strip"]) == 0
        assert output_file.read_text(encoding="utf-8") == "**Hello** <span>world</span>"

    def test_stdin(self, monkeypatch, capsys, restore_package_logger) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO("<ul><li>a</li><li>b</li></ul>"))
        assert main(["-"]) == 0
        assert capsys.readouterr().out == "* a\n* b\n"

    def test_stdin_bytes(self, monkeypatch, capsys, restore_package_logger) -> None:
        stdin = io.TextIOWrapper(io.BytesIO("<i>é</i>".encode("utf-8")), encoding="utf-8")
        monkeypatch.setattr(sys, "stdin", stdin)
        assert main([]) == 0
        assert capsys.readouterr().out == "*é*\n"

    def test_panic_exit_code(self, html_file, capsys, restore_package_logger) -> None:
        assert main([str(html_file), "--unknown-tags", "panic"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Cannot process html tag span" in captured.err

    def test_missing_input(self, tmp_path, capsys, restore_package_logger) -> None:
        assert main([str(tmp_path / "missing.html")]) == 1
        assert "does not exist" in capsys.readouterr().err

    def test_log_file(self, html_file, tmp_path, capsys, restore_package_logger) -> None:
        log_file = tmp_path / "tagdown.log"
        output_file = tmp_path / "page.md"
        assert main([str(html_file), "-o", str(output_file), "--log-level", "INFO", "--log-file", str(log_file)]) == 0
        for handler in restore_package_logger.handlers:
            handler.flush()
        assert "Converted" in log_file.read_text(encoding="utf-8")
