"""Tests for the offset-aware RecordSet."""

import pandas as pd
import pytest

from csvtable.exceptions import DataValidationError
from csvtable.records import RecordSet


def test_from_records_with_mappings():
    rs = RecordSet.from_records([{"a": "1", "b": "2"}, {"a": "3", "b": "4"}], offset=7)
    assert rs.get_header() == ["a", "b"]
    assert list(rs.items()) == [(7, {"a": "1", "b": "2"}), (8, {"a": "3", "b": "4"})]
    assert rs.first_offset == 7
    assert len(rs) == 2


def test_from_records_with_sequences_and_header():
    rs = RecordSet.from_records([["Anna", "F"]], header=["prenoms", "sexe"])
    assert list(rs) == [{"prenoms": "Anna", "sexe": "F"}]
    assert rs.first_offset == 0


def test_empty_record_set():
    rs = RecordSet.from_records([], header=["a"])
    assert rs.header == ["a"]
    assert rs.first_offset is None
    assert list(rs) == []


def test_slice_keeps_source_offsets():
    frame = pd.DataFrame({"x": list("abcdef")})
    rs = RecordSet(frame.iloc[2:4])
    assert [offset for offset, _ in rs.items()] == [2, 3]
    assert rs.first_offset == 2


def test_non_integer_index_is_replaced_by_positions():
    frame = pd.DataFrame({"x": ["a", "b"]}, index=["r1", "r2"])
    rs = RecordSet(frame)
    assert [offset for offset, _ in rs.items()] == [0, 1]


def test_record_set_is_restartable():
    rs = RecordSet.from_records([{"a": "1"}])
    assert list(rs) == list(rs)


def test_to_dataframe_returns_copy():
    rs = RecordSet.from_records([{"a": "1"}])
    frame = rs.to_dataframe()
    frame.loc[0, "a"] = "changed"
    assert list(rs) == [{"a": "1"}]


def test_duplicate_header_is_rejected():
    with pytest.raises(DataValidationError) as excinfo:
        RecordSet.from_records([["x", "y"]], header=["a", "a"])
    assert excinfo.value.context == {"duplicates": ["a"]}


def test_duplicate_dataframe_columns_are_rejected():
    frame = pd.DataFrame([["x", "y"]], columns=["a", "a"])
    with pytest.raises(DataValidationError, match="duplicate"):
        RecordSet(frame)


def test_repr_mentions_header():
    rs = RecordSet.from_records([{"a": "1"}], offset=3)
    assert repr(rs) == "RecordSet(records=1, first_offset=3, header=['a'])"
