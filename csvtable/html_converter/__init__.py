"""HTML Converter Package.

Summary
-------
Provides the import surface for rendering tabular records as an HTML
``<table>``: the :class:`HTMLConverter` builder, the markup validators it
relies on, and the helpers that write rendered HTML to disk.

All concrete logic resides in child modules:

- ``converter.py``: :class:`HTMLConverter` and its rendering rules.
- ``validation.py``: HTML id and DOM attribute-name validators.
- ``output.py``: standalone document wrapping and file output.

Usage
-----
>>> from csvtable.html_converter import HTMLConverter
>>> HTMLConverter().configure_table("report", "totals").convert([["a", "b"]])
'<table class="report" id="totals"><tr><td>a</td><td>b</td></tr></table>'
"""

from .converter import HTMLConverter, RecordFormatter
from .output import wrap_html_document, write_html_output
from .validation import (
    is_valid_attribute_name,
    is_valid_html_id,
    validate_attribute_name,
    validate_html_id,
)

__all__ = [
    "HTMLConverter",
    "RecordFormatter",
    "is_valid_attribute_name",
    "is_valid_html_id",
    "validate_attribute_name",
    "validate_html_id",
    "wrap_html_document",
    "write_html_output",
]
