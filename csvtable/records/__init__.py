"""Record layer consumed by the HTML converter.

Exposes :class:`RecordSet`, the offset-aware record collection, and
:func:`read_csv_records`, which loads a CSV file into one using pandas.
"""

from .loader import read_csv_records
from .record_set import Record, RecordSet

__all__ = [
    "Record",
    "RecordSet",
    "read_csv_records",
]
