"""Offset-aware record collection backed by a pandas DataFrame.

A :class:`RecordSet` is the sequence of records handed to the HTML converter.
Each record is an ordered mapping from column name to value and carries the
integer offset it had in its source. Offsets are read from the DataFrame
index, so a slice such as ``frame.iloc[3:8]`` keeps offsets ``3..7`` instead
of being renumbered from zero.

The set is restartable: iterating it twice yields the same records.

Examples
--------
>>> rs = RecordSet.from_records([{"a": "1"}, {"a": "2"}], offset=5)
>>> rs.get_header()
['a']
>>> [offset for offset, _ in rs.items()]
[5, 6]
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

import pandas as pd

from csvtable.exceptions import DataValidationError

Record = dict[Any, Any]


def _check_unique_header(columns: list[Any]) -> None:
    """Raise if a column name appears more than once.

    Records are keyed by column name, so duplicates would drop cells.
    """
    duplicates = sorted({str(c) for c in columns if columns.count(c) > 1})
    if duplicates:
        raise DataValidationError(
            f"The header contains duplicate column names: {', '.join(duplicates)}",
            context={"duplicates": duplicates},
        )


class RecordSet:
    """Ordered, restartable collection of records with positional offsets.

    Parameters
    ----------
    dataframe : pd.DataFrame
        Source data. Column labels become the record keys. An integer index
        provides the record offsets; any other index is replaced by
        positional offsets starting at zero.

    Raises
    ------
    DataValidationError
        If a column name appears more than once.
    """

    def __init__(self, dataframe: pd.DataFrame) -> None:
        _check_unique_header(list(dataframe.columns))
        if not pd.api.types.is_integer_dtype(dataframe.index.dtype):
            dataframe = dataframe.reset_index(drop=True)
        self._frame = dataframe

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[Any, Any] | Sequence[Any]],
        header: Sequence[str] | None = None,
        offset: int = 0,
    ) -> "RecordSet":
        """Build a record set from plain mappings or sequences.

        Parameters
        ----------
        records : iterable of mapping or sequence
            Rows to store. Sequences are keyed by ``header`` when given,
            otherwise by their positional index.
        header : sequence of str, optional
            Column names, in order.
        offset : int, optional
            Offset of the first record. Defaults to ``0``.

        Returns
        -------
        RecordSet
            The new record set.
        """
        if header:
            _check_unique_header(list(header))
        rows = [
            dict(row) if isinstance(row, Mapping) else list(row) for row in records
        ]
        frame = pd.DataFrame(rows, columns=list(header) if header else None)
        frame.index = pd.RangeIndex(start=offset, stop=offset + len(frame))
        return cls(frame)

    @property
    def header(self) -> list[str]:
        """Ordered column names of the records."""
        return [str(column) for column in self._frame.columns]

    def get_header(self) -> list[str]:
        """Return the ordered column names, usable as header/footer labels."""
        return self.header

    @property
    def first_offset(self) -> int | None:
        """Offset of the first record, or ``None`` for an empty set."""
        if self._frame.empty:
            return None
        return int(self._frame.index[0])

    def items(self) -> Iterator[tuple[int, Record]]:
        """Yield ``(offset, record)`` pairs in order."""
        columns = list(self._frame.columns)
        for offset, values in zip(
            self._frame.index, self._frame.itertuples(index=False, name=None)
        ):
            yield int(offset), dict(zip(columns, values))

    def __iter__(self) -> Iterator[Record]:
        for _, record in self.items():
            yield record

    def __len__(self) -> int:
        return len(self._frame)

    def __repr__(self) -> str:
        return (
            f"RecordSet(records={len(self)}, first_offset={self.first_offset}, "
            f"header={self.header!r})"
        )

    def to_dataframe(self) -> pd.DataFrame:
        """Return a copy of the underlying DataFrame."""
        return self._frame.copy()


__all__ = ["Record", "RecordSet"]
