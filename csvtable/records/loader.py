"""loader.py: Read CSV files into offset-aware record sets.

This module is the only place where a CSV file is opened. Parsing itself is
delegated to :func:`pandas.read_csv`; the loader only fixes the reading
options (string dtype, no NA conversion) and assigns record offsets so that
they match the record's line position in the file.

Design Principles
-----------------
- No rendering logic; the output feeds :class:`~csvtable.html_converter.HTMLConverter`.
- Every failure is mapped onto :class:`~csvtable.exceptions.DataValidationError`
  with the offending path in its context.

Usage
-----
>>> from pathlib import Path
>>> records = read_csv_records(Path("prenoms.csv"), delimiter=";")
>>> records.first_offset
1

References
----------
- pandas official documentation: https://pandas.pydata.org/
- Project config: csvtable/config.py
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from csvtable.config import DEFAULT_DELIMITER, DEFAULT_ENCODING
from csvtable.exceptions import DataValidationError

from .record_set import RecordSet

logger = logging.getLogger(__name__)


def read_csv_records(
    csv_path: Path,
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = DEFAULT_ENCODING,
    has_header: bool = True,
) -> RecordSet:
    """Read a CSV file into a :class:`RecordSet`.

    Every value is kept as a string and empty fields stay empty strings.
    When the file has a header row, that row occupies offset ``0`` and the
    first data record gets offset ``1``; otherwise records start at ``0`` and
    columns are keyed by position. Records whose fields are all empty,
    blank lines included, are skipped without renumbering the records after
    them, so every offset is the record's line position in the file.

    Parameters
    ----------
    csv_path : Path
        Path to the CSV file.
    delimiter : str, optional
        Single-character field delimiter. Defaults to ``","``.
    encoding : str, optional
        Text encoding of the file. Defaults to ``"utf-8"``.
    has_header : bool, optional
        Whether the first line holds column names. Defaults to ``True``.

    Returns
    -------
    RecordSet
        Records in file order; may be empty.

    Raises
    ------
    DataValidationError
        If the file is missing, cannot be decoded, or is malformed.

    Examples
    --------
    >>> from pathlib import Path
    >>> rs = read_csv_records(Path("data.csv"), has_header=False)
    >>> rs.first_offset
    0
    """
    context = {"path": str(csv_path), "delimiter": delimiter, "encoding": encoding}
    try:
        dataframe = pd.read_csv(
            csv_path,
            sep=delimiter,
            encoding=encoding,
            header=0 if has_header else None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=False,
        )
    except FileNotFoundError as exc:
        raise DataValidationError(
            f"CSV file not found: {csv_path}", context=context
        ) from exc
    except pd.errors.EmptyDataError:
        logger.warning("CSV file %s is empty", csv_path)
        return RecordSet(pd.DataFrame())
    except (pd.errors.ParserError, UnicodeDecodeError, ValueError, OSError) as exc:
        raise DataValidationError(
            f"Could not read CSV file {csv_path}: {exc}", context=context
        ) from exc

    # Blank lines are read as rows so the index matches file lines, then dropped.
    first_offset = 1 if has_header else 0
    dataframe.index = pd.RangeIndex(
        start=first_offset, stop=first_offset + len(dataframe)
    )
    blank_rows = (dataframe.isna() | dataframe.eq("")).all(axis=1)
    dataframe = dataframe.loc[~blank_rows].fillna("")
    logger.debug(
        "Read %d records with %d columns from %s",
        len(dataframe),
        len(dataframe.columns),
        csv_path,
    )
    return RecordSet(dataframe)


__all__ = ["read_csv_records"]
