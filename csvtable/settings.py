"""Environment-driven settings for CSV to HTML conversion.

This module provides :class:`ConverterSettings`, which loads the defaults
used by the runner and the command line: table presentation attributes,
CSV reading options and the log level. Values come from the process
environment, optionally seeded from a ``.env`` file at the project root, and
fall back to the constants in :mod:`csvtable.config`.

Role in Architecture
--------------------
- Boundary between the runtime environment and the converter's typed
  configuration.
- No conversion logic: only loading, structuring and validation.

Examples
--------
>>> import os
>>> os.environ["CSVTABLE_TABLE_ID"] = "report"
>>> settings = ConverterSettings()
>>> settings.table_id
'report'
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

import csvtable.config as _project_config
from csvtable.config import (
    DEFAULT_DELIMITER,
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TABLE_CLASS,
    DEFAULT_TABLE_ID,
    ENV_CELL_ATTRIBUTE,
    ENV_DELIMITER,
    ENV_ENCODING,
    ENV_LOG_LEVEL,
    ENV_ROW_ATTRIBUTE,
    ENV_TABLE_CLASS,
    ENV_TABLE_ID,
)
from csvtable.exceptions import ConfigurationError
from csvtable.html_converter import HTMLConverter


class ConverterSettings:
    r"""Configuration loader and validator for table conversion.

    Attributes
    ----------
    table_class : str
        ``class`` attribute of the rendered ``<table>``.
    table_id : str
        ``id`` attribute of the rendered ``<table>``; empty for none.
    cell_attribute : str
        Attribute templated with the column name on each ``<td>``.
    row_attribute : str
        Attribute templated with the record offset on each ``<tr>``.
    delimiter : str
        CSV field delimiter, exactly one character.
    encoding : str
        Text encoding of input CSV files.
    log_level : str
        Logging level name.

    Notes
    -----
    Markup values (id, attribute names) are validated when
    :meth:`build_converter` runs, by the converter itself.
    """

    def __init__(self, project_root: Path | None = None) -> None:
        r"""Load settings from ``.env`` and the environment.

        Parameters
        ----------
        project_root : Path or None, optional
            Directory holding the ``.env`` file. Defaults to
            ``csvtable.config.PROJECT_ROOT``.

        Raises
        ------
        ConfigurationError
            If the delimiter is not a single character.
        """
        # Resolved at call time so tests can monkeypatch PROJECT_ROOT.
        env_root = Path(project_root or _project_config.PROJECT_ROOT)
        env_path = env_root / ".env"
        if env_path.exists():
            load_dotenv(env_path, override=False)
        self.table_class: str = os.getenv(ENV_TABLE_CLASS, DEFAULT_TABLE_CLASS)
        self.table_id: str = os.getenv(ENV_TABLE_ID, DEFAULT_TABLE_ID)
        self.cell_attribute: str = os.getenv(ENV_CELL_ATTRIBUTE, "")
        self.row_attribute: str = os.getenv(ENV_ROW_ATTRIBUTE, "")
        self.delimiter: str = os.getenv(ENV_DELIMITER, DEFAULT_DELIMITER)
        self.encoding: str = os.getenv(ENV_ENCODING, DEFAULT_ENCODING)
        self.log_level: str = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)
        self.validate()

    def validate(self) -> None:
        """Normalize and check the reading options.

        A literal ``\\t`` delimiter is turned into a tab character.

        Raises
        ------
        ConfigurationError
            If the delimiter is not a single character.
        """
        if self.delimiter == "\\t":
            self.delimiter = "\t"
        if len(self.delimiter) != 1:
            raise ConfigurationError(
                "The CSV delimiter must be a single character",
                context={"delimiter": self.delimiter},
            )

    def build_converter(self) -> HTMLConverter:
        """Return an :class:`HTMLConverter` configured from these settings.

        Raises
        ------
        DOMValidationError
            If the configured id or attribute names are invalid markup.
        """
        return (
            HTMLConverter()
            .configure_table(self.table_class, self.table_id)
            .configure_cell_attribute(self.cell_attribute)
            .configure_row_attribute(self.row_attribute)
        )


__all__ = ["ConverterSettings"]
