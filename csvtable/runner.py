"""Convert a CSV file into an HTML table file.

This module provides a headless runner that loads a CSV file into records,
renders them with a configured :class:`~csvtable.html_converter.HTMLConverter`
and writes the result to disk. It is intended for programmatic invocation
and backs the ``csv-to-html`` command.

Usage Examples
--------------
Typical programmatic usage with environment defaults::

    from pathlib import Path
    from csvtable.runner import run_from_config

    ok = run_from_config(Path("data/prenoms.csv"), Path("out/prenoms.html"))

Reusing the CSV header as table header and footer::

    run_from_config(
        Path("data/prenoms.csv"),
        Path("out/prenoms.html"),
        header_section=True,
        footer_section=True,
        standalone=True,
    )
"""

from __future__ import annotations

import logging
from pathlib import Path

from csvtable.exceptions import AppError
from csvtable.html_converter import HTMLConverter, wrap_html_document, write_html_output
from csvtable.records import read_csv_records
from csvtable.settings import ConverterSettings

logger = logging.getLogger(__name__)


def render_csv_file(
    csv_path: Path,
    converter: HTMLConverter,
    *,
    delimiter: str,
    encoding: str,
    has_header: bool = True,
    header_section: bool = False,
    footer_section: bool = False,
    standalone: bool = False,
) -> str:
    """Load ``csv_path`` and return its HTML rendering.

    Parameters
    ----------
    csv_path : Path
        Source CSV file.
    converter : HTMLConverter
        Configured converter.
    delimiter, encoding : str
        CSV reading options.
    has_header : bool, optional
        Whether the first CSV line holds column names.
    header_section, footer_section : bool, optional
        Reuse the CSV column names as ``<thead>`` / ``<tfoot>`` labels.
    standalone : bool, optional
        Wrap the table in a complete HTML document.

    Returns
    -------
    str
        Rendered HTML.

    Raises
    ------
    DataValidationError
        If the CSV cannot be read.
    """
    records = read_csv_records(
        csv_path, delimiter=delimiter, encoding=encoding, has_header=has_header
    )
    labels = records.get_header() if has_header else []
    html = converter.convert(
        records,
        labels if header_section else [],
        labels if footer_section else [],
    )
    logger.info("Rendered %d records from %s", len(records), csv_path)
    if standalone:
        return wrap_html_document(html, title=csv_path.stem)
    return html


def run_from_config(
    csv_path: Path,
    output_file: Path,
    *,
    header_section: bool = False,
    footer_section: bool = False,
    standalone: bool = False,
    has_header: bool = True,
    settings: ConverterSettings | None = None,
) -> bool:
    """Generate an HTML table file from a CSV file.

    Parameters
    ----------
    csv_path : pathlib.Path
        Source CSV file.
    output_file : pathlib.Path
        Destination of the rendered HTML.
    header_section, footer_section : bool, optional
        Reuse the CSV column names as ``<thead>`` / ``<tfoot>`` labels.
    standalone : bool, optional
        Write a complete HTML document instead of a bare ``<table>``.
    has_header : bool, optional
        Whether the first CSV line holds column names.
    settings : ConverterSettings or None, optional
        Presentation and reading options. If ``None``, settings are loaded
        from the environment.

    Returns
    -------
    bool
        ``True`` if the output was written; ``False`` if an application
        error occurred (all errors are logged).
    """
    try:
        settings = settings if settings is not None else ConverterSettings()
        html = render_csv_file(
            Path(csv_path),
            settings.build_converter(),
            delimiter=settings.delimiter,
            encoding=settings.encoding,
            has_header=has_header,
            header_section=header_section,
            footer_section=footer_section,
            standalone=standalone,
        )
        write_html_output(html, Path(output_file))
        return True
    except AppError as exc:
        logger.error("Failed to convert %s: %s", csv_path, exc)
        logger.debug("Error details: %s", exc.to_dict())
        return False


__all__ = ["render_csv_file", "run_from_config"]
