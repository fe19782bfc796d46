"""Runtime value helpers for Slate.

Slate values map directly onto Python objects: Number is `float`,
String is `str`, Boolean is `bool` and Nil is `None`. This module holds
the language rules that differ from Python's own: truthiness, equality
and the textual form used by `print`.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any


def is_truthy(value: Any) -> bool:
    """Only `nil` and `false` are falsy; `0` and `""` are truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def values_equal(a: Any, b: Any) -> bool:
    """Equality over all value kinds.

    Values of different kinds are never equal, so `true == 1` is false.
    """
    if type(a) is not type(b):
        return False
    return a == b


def stringify(value: Any) -> str:
    """Convert a value to the text written by `print`."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        text = repr(value)
        if 'e' in text:
            # Written out in full; the language has no exponent notation
            text = format(Decimal(text), 'f')
        if text.endswith('.0'):
            text = text[:-2]
        return text
    return str(value)
