"""Output helpers for rendered HTML tables.

Writes converter output to disk and optionally wraps a bare ``<table>``
fragment into a minimal standalone HTML page. The converter itself never
touches the filesystem; callers such as :mod:`csvtable.runner` use these
helpers after conversion.

Example
-------
>>> import tempfile
>>> from pathlib import Path
>>> page = wrap_html_document("<table></table>", title="Demo")
>>> target = Path(tempfile.gettempdir()) / "demo.html"
>>> write_html_output(page, target)
>>> "<title>Demo</title>" in target.read_text(encoding="utf-8")
True
"""

from __future__ import annotations

import logging
from html import escape
from pathlib import Path

from csvtable.config import STANDALONE_DOCUMENT_TEMPLATE, STANDALONE_DOCUMENT_TITLE
from csvtable.exceptions import OutputWriteError

logger = logging.getLogger(__name__)


def wrap_html_document(fragment: str, title: str = STANDALONE_DOCUMENT_TITLE) -> str:
    r"""Embed an HTML fragment in a minimal UTF-8 HTML5 document.

    Parameters
    ----------
    fragment : str
        Markup placed verbatim inside ``<body>``.
    title : str, optional
        Document title; escaped before insertion.

    Returns
    -------
    str
        Complete HTML document.

    Raises
    ------
    TypeError
        If ``fragment`` is not a string.
    """
    if not isinstance(fragment, str):
        raise TypeError("Input must be a string.")
    return STANDALONE_DOCUMENT_TEMPLATE.format(
        title=escape(title, quote=False), body=fragment
    )


def write_html_output(html_content: str, output_file: Path) -> None:
    r"""Write HTML content to disk, creating parent directories automatically.

    Parameters
    ----------
    html_content : str
        Full HTML string to be written.
    output_file : Path
        Output file path. Parents are created as needed.

    Raises
    ------
    OutputWriteError
        If the directory or file cannot be written.

    Notes
    -----
    Output encoding is UTF-8.
    """
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(html_content, encoding="utf-8")
    except OSError as exc:
        logger.exception("Failed to write HTML output to %s", output_file)
        raise OutputWriteError(
            f"Could not write HTML output: {exc}", context={"path": str(output_file)}
        ) from exc
    logger.info("Wrote %d characters of HTML to %s", len(html_content), output_file)


__all__ = ["wrap_html_document", "write_html_output"]
