"""Tests for HTML document wrapping and file output."""

from pathlib import Path

import pytest

from csvtable.exceptions import OutputWriteError
from csvtable.html_converter import output as o


def test_write_html_output_creates_parents(tmp_path: Path) -> None:
    out = tmp_path / "site" / "nested" / "table.html"
    o.write_html_output("<table></table>", out)
    assert out.read_text(encoding="utf-8") == "<table></table>"


def test_write_html_output_errors(monkeypatch, tmp_path: Path):
    out = tmp_path / "site" / "index.html"

    def bad_write_text(self, content, encoding="utf-8"):
        raise OSError("disk full")

    monkeypatch.setattr(Path, "write_text", bad_write_text)
    with pytest.raises(OutputWriteError) as excinfo:
        o.write_html_output("<table></table>", out)
    assert excinfo.value.context == {"path": str(out)}
    assert excinfo.value.transient is True


def test_wrap_html_document():
    page = o.wrap_html_document("<table></table>", title="A & B")
    assert page.startswith("<!DOCTYPE html>")
    assert "<title>A &amp; B</title>" in page
    assert "<body><table></table></body>" in page


def test_wrap_html_document_type_error():
    with pytest.raises(TypeError):
        o.wrap_html_document(None)  # type: ignore[arg-type]
