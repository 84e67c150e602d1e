"""Tests for the headless CSV to HTML runner."""

from pathlib import Path

from csvtable import runner
from csvtable.exceptions import OutputWriteError
from csvtable.html_converter import HTMLConverter
from csvtable.settings import ConverterSettings


def _settings(monkeypatch, **env) -> ConverterSettings:
    for key, value in env.items():
        monkeypatch.setenv(f"CSVTABLE_{key.upper()}", value)
    return ConverterSettings()


def test_render_csv_file_with_sections(prenoms_csv):
    html = runner.render_csv_file(
        prenoms_csv,
        HTMLConverter().configure_row_attribute("data-record-offset"),
        delimiter=";",
        encoding="utf-8",
        header_section=True,
        footer_section=True,
    )
    assert html.count('<th scope="col">prenoms</th>') == 2
    assert '<tr data-record-offset="1"><td>Aaron</td>' in html
    assert '<tr data-record-offset="10"><td>Adama</td>' in html


def test_render_csv_file_without_header_row(tmp_path: Path):
    csvp = tmp_path / "plain.csv"
    csvp.write_text("a,b\n", encoding="utf-8")
    html = runner.render_csv_file(
        csvp,
        HTMLConverter().configure_row_attribute("data-offset"),
        delimiter=",",
        encoding="utf-8",
        has_header=False,
        header_section=True,
    )
    # No header row means no labels, so no sections either.
    assert html == (
        '<table class="table-csv-data"><tr data-offset="0"><td>a</td><td>b</td></tr></table>'
    )


def test_render_csv_file_standalone(prenoms_csv):
    html = runner.render_csv_file(
        prenoms_csv, HTMLConverter(), delimiter=";", encoding="utf-8", standalone=True
    )
    assert html.startswith("<!DOCTYPE html>")
    assert "<title>prenoms</title>" in html


def test_run_from_config_writes_file(monkeypatch, prenoms_csv, tmp_path: Path):
    settings = _settings(monkeypatch, delimiter=";", table_id="test")
    out = tmp_path / "out" / "prenoms.html"
    assert runner.run_from_config(prenoms_csv, out, header_section=True, settings=settings)
    html = out.read_text(encoding="utf-8")
    assert html.startswith('<table class="table-csv-data" id="test"><thead>')


def test_run_from_config_loads_settings(monkeypatch, prenoms_csv, tmp_path: Path):
    monkeypatch.setenv("CSVTABLE_DELIMITER", ";")
    monkeypatch.setenv("CSVTABLE_CELL_ATTRIBUTE", "title")
    out = tmp_path / "prenoms.html"
    assert runner.run_from_config(prenoms_csv, out)
    assert '<td title="prenoms">Aaron</td>' in out.read_text(encoding="utf-8")


def test_run_from_config_missing_csv(tmp_path: Path, caplog):
    out = tmp_path / "out.html"
    assert runner.run_from_config(tmp_path / "missing.csv", out) is False
    assert not out.exists()
    assert "DATA_VALIDATION_ERROR" in caplog.text


def test_run_from_config_invalid_markup(monkeypatch, prenoms_csv, tmp_path: Path):
    settings = _settings(monkeypatch, table_id="te st")
    assert runner.run_from_config(prenoms_csv, tmp_path / "o.html", settings=settings) is False


def test_run_from_config_write_failure(monkeypatch, prenoms_csv, tmp_path: Path):
    def bad_write(html_content, output_file):
        raise OutputWriteError("disk full", context={"path": str(output_file)})

    monkeypatch.setattr(runner, "write_html_output", bad_write)
    assert runner.run_from_config(prenoms_csv, tmp_path / "o.html") is False
