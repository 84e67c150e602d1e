"""Tests for the application exception hierarchy."""

import pytest

from csvtable import exceptions as exc


def test_app_error_str_and_dict():
    e = exc.AppError("CODE", "message", context={"k": "v"}, transient=True)
    assert str(e) == "CODE: message"
    assert e.to_dict() == {
        "error_code": "CODE",
        "message": "message",
        "context": {"k": "v"},
        "is_transient": True,
    }


@pytest.mark.parametrize(
    "cls, code, transient",
    [
        (exc.DOMValidationError, "DOM_VALIDATION_ERROR", False),
        (exc.ConfigurationError, "CONFIGURATION_ERROR", False),
        (exc.DataValidationError, "DATA_VALIDATION_ERROR", False),
        (exc.OutputWriteError, "OUTPUT_WRITE_ERROR", True),
    ],
)
def test_subclass_codes(cls, code, transient):
    e = cls("boom", context={"x": 1})
    assert isinstance(e, exc.AppError)
    assert e.code == code
    assert e.transient is transient
    assert e.context == {"x": 1}
    assert str(e) == f"{code}: boom"
