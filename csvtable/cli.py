"""CLI entrypoint and logging/argument utilities for CSV to HTML conversion.

This module implements the ``csv-to-html`` command. It is a thin
orchestration layer: argument parsing, logging setup, and merging of command
line options over :class:`~csvtable.settings.ConverterSettings`. Loading,
rendering and writing are delegated to :mod:`csvtable.runner`.

Without ``--output`` the rendered HTML is printed to stdout, so logging
always goes to stderr (and optionally to a log file under ``LOG_DIR``).

Examples
--------
>>> # In shell
>>> csv-to-html data/prenoms.csv --delimiter ';' --thead --tr-attribute data-record-offset
<table class="table-csv-data"><thead>...</thead><tbody>...</tbody></table>

Programmatic usage:

>>> from csvtable.cli import main
>>> main(["data/prenoms.csv", "-o", "out/prenoms.html"])
0
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from csvtable.config import LOG_DIR, LOG_FILENAME_CSV_TO_HTML, LOG_FORMAT
from csvtable.exceptions import AppError
from csvtable.runner import render_csv_file, run_from_config
from csvtable.settings import ConverterSettings

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO", enable_file: bool = True) -> None:
    r"""Configure logging output for the command-line tool.

    Sets up a console handler (stderr) and optionally a file handler, using
    the format and log file location configured in ``csvtable/config.py``.
    If the file handler cannot be created the tool keeps logging to the
    console only.

    Parameters
    ----------
    level : str, optional
        The logging level name, e.g. ``"DEBUG"`` or ``"WARNING"``.
        Unknown names fall back to ``INFO``.
    enable_file : bool, optional
        Whether to add a file handler writing to the CLI log file.

    Notes
    -----
    All existing root handlers are removed and replaced.

    Examples
    --------
    >>> configure_logging("DEBUG", enable_file=False)
    """
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if enable_file:
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(
                0, logging.FileHandler(LOG_DIR / LOG_FILENAME_CSV_TO_HTML, mode="a")
            )
        except OSError:
            # Console logging still works without the file.
            pass
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the converter.

    Parameters
    ----------
    argv : list[str] | None
        Optional argv to parse. When ``None`` the real CLI args are used.

    Returns
    -------
    argparse.Namespace
        Parsed arguments. Options left unset are ``None`` so that settings
        loaded from the environment apply.
    """
    parser = argparse.ArgumentParser(
        prog="csv-to-html", description="Render a CSV file as an HTML table."
    )
    parser.add_argument("csv", type=Path, help="Input CSV file")
    parser.add_argument(
        "-o", "--output", type=Path, default=None, help="Output file (default: stdout)"
    )
    parser.add_argument("-d", "--delimiter", type=str, default=None)
    parser.add_argument("--encoding", type=str, default=None)
    parser.add_argument(
        "--no-header-row",
        action="store_true",
        help="The first CSV line is data, not column names",
    )
    parser.add_argument(
        "--thead", action="store_true", help="Add a <thead> built from the CSV header"
    )
    parser.add_argument(
        "--tfoot", action="store_true", help="Add a <tfoot> built from the CSV header"
    )
    parser.add_argument("--table-class", type=str, default=None)
    parser.add_argument("--table-id", type=str, default=None)
    parser.add_argument(
        "--td-attribute",
        type=str,
        default=None,
        help="Attribute set to the column name on every <td>",
    )
    parser.add_argument(
        "--tr-attribute",
        type=str,
        default=None,
        help="Attribute set to the record offset on every <tr>",
    )
    parser.add_argument(
        "--standalone",
        action="store_true",
        help="Emit a complete HTML document instead of a bare table",
    )
    parser.add_argument("--log-level", type=str, default=None)
    return parser.parse_args(argv)


def apply_arguments(settings: ConverterSettings, args: argparse.Namespace) -> None:
    """Override ``settings`` with every option given on the command line."""
    overrides = {
        "table_class": args.table_class,
        "table_id": args.table_id,
        "cell_attribute": args.td_attribute,
        "row_attribute": args.tr_attribute,
        "delimiter": args.delimiter,
        "encoding": args.encoding,
        "log_level": args.log_level,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(settings, name, value)


def main(argv: list[str] | None = None) -> int:
    """Run the ``csv-to-html`` command.

    Returns
    -------
    int
        Process exit status: ``0`` on success, ``1`` on failure.
    """
    args = parse_arguments(argv)
    try:
        settings = ConverterSettings()
        apply_arguments(settings, args)
        settings.validate()
    except AppError as exc:
        configure_logging(args.log_level or "INFO", enable_file=False)
        logger.error("Invalid configuration: %s", exc)
        return 1
    configure_logging(
        settings.log_level, enable_file=not bool(os.environ.get("DISABLE_FILE_LOGS"))
    )
    logger.debug("Starting csv-to-html for %s", args.csv)

    if args.output is not None:
        ok = run_from_config(
            args.csv,
            args.output,
            header_section=args.thead,
            footer_section=args.tfoot,
            standalone=args.standalone,
            has_header=not args.no_header_row,
            settings=settings,
        )
        return 0 if ok else 1

    try:
        html = render_csv_file(
            args.csv,
            settings.build_converter(),
            delimiter=settings.delimiter,
            encoding=settings.encoding,
            has_header=not args.no_header_row,
            header_section=args.thead,
            footer_section=args.tfoot,
            standalone=args.standalone,
        )
    except AppError as exc:
        logger.error("Failed to convert %s: %s", args.csv, exc)
        return 1
    sys.stdout.write(html + "\n")
    return 0


__all__ = ["apply_arguments", "configure_logging", "main", "parse_arguments"]


if __name__ == "__main__":
    raise SystemExit(main())
