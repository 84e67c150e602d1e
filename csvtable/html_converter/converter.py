"""HTML table rendering for tabular records.

:class:`HTMLConverter` turns a sequence of records into a single ``<table>``
string. Presentation is configured up front through chained calls, each of
which validates its input immediately, and :meth:`HTMLConverter.convert` is
then a pure transform of the current configuration plus the supplied data.

Markup produced
---------------
``<table class=".." id="..">[<thead>..</thead>][<tbody>..</tbody>][<tfoot>..</tfoot>]</table>``

- ``<thead>``/``<tfoot>`` hold one row of ``<th scope="col">`` cells built
  from the label lists passed to ``convert``.
- Data rows are wrapped in ``<tbody>`` only when a header or footer section
  is present; otherwise they are direct children of ``<table>``.
- The row attribute (record offset) and the cell attribute (column name)
  apply to data rows only, never to header/footer rows.
- All text and attribute values are escaped with :func:`html.escape`.

Example
-------
>>> from csvtable.records import RecordSet
>>> records = RecordSet.from_records([{"prenoms": "Anna"}], offset=1)
>>> converter = (
...     HTMLConverter()
...     .configure_table("table-csv-data", "test")
...     .configure_cell_attribute("title")
...     .configure_row_attribute("data-record-offset")
... )
>>> converter.convert(records)
'<table class="table-csv-data" id="test"><tr data-record-offset="1"><td title="prenoms">Anna</td></tr></table>'
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from html import escape
from typing import Any

import pandas as pd

from csvtable.config import DEFAULT_TABLE_CLASS, DEFAULT_TABLE_ID, HEADER_CELL_SCOPE
from csvtable.records.record_set import Record, RecordSet

from .validation import validate_attribute_name, validate_html_id

logger = logging.getLogger(__name__)

RecordFormatter = Callable[[Record], Any]


def _iter_offset_records(records: Any) -> Iterator[tuple[int, Any]]:
    """Yield ``(offset, record)`` pairs from any supported record source."""
    if isinstance(records, RecordSet):
        yield from records.items()
    elif isinstance(records, pd.DataFrame):
        yield from RecordSet(records).items()
    else:
        yield from enumerate(records)


def _record_fields(record: Any) -> Iterable[tuple[Any, Any]]:
    """Return the ordered ``(column, value)`` pairs of a record."""
    if isinstance(record, Mapping):
        return record.items()
    if isinstance(record, (str, bytes)):
        return [(0, record)]
    return enumerate(record)


def _text(value: Any) -> str:
    if value is None:
        return ""
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return ""
    return str(value)


def _attributes(pairs: Sequence[tuple[str, str]]) -> str:
    """Render ``name="value"`` pairs, skipping pairs with an empty name or value."""
    return "".join(
        f' {name}="{escape(value, quote=True)}"' for name, value in pairs if name and value
    )


class HTMLConverter:
    """Render records as an HTML ``<table>``.

    Configuration methods return the converter itself so calls can be
    chained, and overwrite whatever the same method set before. Invalid
    values raise :class:`~csvtable.exceptions.DOMValidationError` at once and
    leave the previous configuration untouched.

    Attributes
    ----------
    class_name : str
        ``class`` attribute of the ``<table>`` tag.
    id_value : str
        ``id`` attribute of the ``<table>`` tag; empty means no id.
    cell_attribute : str
        Attribute added to each ``<td>`` with the column name as value.
    row_attribute : str
        Attribute added to each data ``<tr>`` with the record offset as value.
    formatter : callable or None
        Applied to every record before it is rendered.
    """

    def __init__(self) -> None:
        self.class_name: str = DEFAULT_TABLE_CLASS
        self.id_value: str = DEFAULT_TABLE_ID
        self.cell_attribute: str = ""
        self.row_attribute: str = ""
        self.formatter: RecordFormatter | None = None

    def __repr__(self) -> str:
        return (
            f"HTMLConverter(class_name={self.class_name!r}, id_value={self.id_value!r}, "
            f"cell_attribute={self.cell_attribute!r}, row_attribute={self.row_attribute!r})"
        )

    def configure_table(self, class_name: str, id_value: str = "") -> "HTMLConverter":
        """Set the ``class`` and ``id`` attributes of the ``<table>`` tag.

        Parameters
        ----------
        class_name : str
            Value of the ``class`` attribute; empty omits it.
        id_value : str, optional
            Value of the ``id`` attribute; empty omits it.

        Returns
        -------
        HTMLConverter
            This converter.

        Raises
        ------
        DOMValidationError
            If ``id_value`` is not a valid HTML id.
        """
        self.id_value = validate_html_id(id_value)
        self.class_name = class_name
        return self

    def configure_cell_attribute(self, attribute_name: str) -> "HTMLConverter":
        """Add ``attribute_name="<column name>"`` to every ``<td>``; empty disables."""
        self.cell_attribute = validate_attribute_name(attribute_name)
        return self

    def configure_row_attribute(self, attribute_name: str) -> "HTMLConverter":
        """Add ``attribute_name="<record offset>"`` to every data ``<tr>``; empty disables."""
        self.row_attribute = validate_attribute_name(attribute_name)
        return self

    def configure_formatter(self, formatter: RecordFormatter | None) -> "HTMLConverter":
        """Set the callable applied to each record before rendering, or clear it."""
        if formatter is not None and not callable(formatter):
            raise TypeError("formatter must be callable or None")
        self.formatter = formatter
        return self

    def convert(
        self,
        records: Iterable[Any],
        header_labels: Sequence[str] = (),
        footer_labels: Sequence[str] = (),
    ) -> str:
        """Render ``records`` as an HTML table string.

        Parameters
        ----------
        records : RecordSet, pd.DataFrame or iterable of records
            Records to render. Offsets come from the record set or DataFrame
            index; plain iterables are numbered from ``0``.
        header_labels : sequence of str, optional
            Labels of the ``<thead>`` row; empty omits the section.
        footer_labels : sequence of str, optional
            Labels of the ``<tfoot>`` row; empty omits the section.

        Returns
        -------
        str
            One ``<table>`` element without surrounding whitespace.
        """
        header_labels = list(header_labels)
        footer_labels = list(footer_labels)
        has_sections = bool(header_labels or footer_labels)

        parts = [f"<table{self._table_attributes()}>"]
        if header_labels:
            parts.append(f"<thead>{self._label_row(header_labels)}</thead>")
        if has_sections:
            parts.append("<tbody>")
        row_count = 0
        for offset, record in _iter_offset_records(records):
            if self.formatter is not None:
                record = self.formatter(record)
            parts.append(self._record_row(offset, record))
            row_count += 1
        if has_sections:
            parts.append("</tbody>")
        if footer_labels:
            parts.append(f"<tfoot>{self._label_row(footer_labels)}</tfoot>")
        parts.append("</table>")

        logger.debug(
            "Converted %d records (thead=%s, tfoot=%s)",
            row_count,
            bool(header_labels),
            bool(footer_labels),
        )
        return "".join(parts)

    def _table_attributes(self) -> str:
        return _attributes([("class", self.class_name), ("id", self.id_value)])

    def _label_row(self, labels: Sequence[str]) -> str:
        cells = "".join(
            f'<th scope="{HEADER_CELL_SCOPE}">{escape(_text(label), quote=False)}</th>'
            for label in labels
        )
        return f"<tr>{cells}</tr>"

    def _record_row(self, offset: int, record: Any) -> str:
        cells = "".join(
            f"<td{_attributes([(self.cell_attribute, _text(column))])}>"
            f"{escape(_text(value), quote=False)}</td>"
            for column, value in _record_fields(record)
        )
        row_attributes = _attributes([(self.row_attribute, str(offset))])
        return f"<tr{row_attributes}>{cells}</tr>"


__all__ = ["HTMLConverter", "RecordFormatter"]
