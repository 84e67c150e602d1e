"""Markup validation predicates for the HTML converter.

Pure string checks used when the converter is configured: HTML ``id``
values for the ``<table>`` tag and DOM attribute names used for per-row and
per-cell attribute templating. None of these helpers render anything; they
either accept the submitted value unchanged or raise
:class:`~csvtable.exceptions.DOMValidationError`.

Examples
--------
>>> is_valid_html_id("test")
True
>>> is_valid_html_id("te st")
False
>>> validate_attribute_name("data-record-offset")
'data-record-offset'
"""

from __future__ import annotations

import re

from csvtable.exceptions import DOMValidationError

# Classic HTML4 id rule relaxed to "no whitespace" after the leading letter.
_HTML_ID_PATTERN = re.compile(r"[A-Za-z]\S*")

# XML ``Name`` production restricted to what DOM createAttribute accepts.
_ATTRIBUTE_NAME_PATTERN = re.compile(r"(?:[^\W\d]|:)[\w.:-]*")


def is_valid_html_id(value: str) -> bool:
    """Return ``True`` when ``value`` is usable as an HTML ``id`` attribute.

    An id must start with an ASCII letter and must not contain whitespace.
    """
    return bool(_HTML_ID_PATTERN.fullmatch(value))


def validate_html_id(value: str) -> str:
    """Return ``value`` if it is empty or a valid HTML id.

    Parameters
    ----------
    value : str
        Candidate id. The empty string means "no id attribute".

    Returns
    -------
    str
        The submitted value, unchanged.

    Raises
    ------
    DOMValidationError
        If ``value`` is non-empty and contains whitespace or does not start
        with a letter.

    Examples
    --------
    >>> validate_html_id("")
    ''
    >>> validate_html_id("1st")  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    DOMValidationError: ...
    """
    if value == "" or is_valid_html_id(value):
        return value
    if re.search(r"\s", value):
        message = f"The id attribute's value must not contain whitespace: {value!r}"
    else:
        message = f"The id attribute's value must start with a letter: {value!r}"
    raise DOMValidationError(message, context={"id": value})


def is_valid_attribute_name(name: str) -> bool:
    """Return ``True`` when ``name`` is a legal DOM attribute name."""
    return bool(_ATTRIBUTE_NAME_PATTERN.fullmatch(name))


def validate_attribute_name(name: str) -> str:
    """Return ``name`` if it is empty or a legal DOM attribute name.

    Raises
    ------
    DOMValidationError
        If ``name`` is non-empty and not a legal attribute name.
    """
    if name == "" or is_valid_attribute_name(name):
        return name
    raise DOMValidationError(
        f"Invalid attribute name: {name!r}", context={"attribute": name}
    )


__all__ = [
    "is_valid_attribute_name",
    "is_valid_html_id",
    "validate_attribute_name",
    "validate_html_id",
]
