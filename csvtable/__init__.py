"""csvtable package.

This module serves as the root of the csvtable Python package, which renders
tabular CSV records as HTML ``<table>`` markup with configurable table
attributes, per-row and per-cell attribute templating, and optional
``<thead>``/``<tfoot>`` sections.

Package Structure
-----------------
- `html_converter/`:
    The :class:`HTMLConverter` builder, markup validators and output helpers.
- `records/`:
    :class:`RecordSet`, the offset-aware record collection, and the pandas
    based CSV loader.
- `settings.py`: Environment and ``.env`` driven defaults.
- `runner.py`: Headless CSV file to HTML file conversion.
- `cli.py`: The ``csv-to-html`` command.
- `config.py`: All configuration constants, as UPPER_SNAKE_CASE.
- `exceptions.py`: Project-specific exception classes.

Examples
--------
>>> from csvtable import HTMLConverter, RecordSet
>>> records = RecordSet.from_records([["Anna", "F"]], header=["prenoms", "sexe"])
>>> html = HTMLConverter().convert(records, records.get_header())
>>> html.startswith('<table class="table-csv-data"><thead>')
True
"""

from .exceptions import (
    AppError,
    ConfigurationError,
    DataValidationError,
    DOMValidationError,
    OutputWriteError,
)
from .html_converter import HTMLConverter
from .records import Record, RecordSet, read_csv_records

__all__ = [
    "AppError",
    "ConfigurationError",
    "DOMValidationError",
    "DataValidationError",
    "HTMLConverter",
    "OutputWriteError",
    "Record",
    "RecordSet",
    "read_csv_records",
]
