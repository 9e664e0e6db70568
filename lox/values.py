"""Runtime value helpers for the Lox interpreter.

Lox values are represented directly by Python objects:

* ``str`` for strings,
* ``int`` for numbers (Lox numbers are integers),
* ``bool`` for booleans,
* ``None`` for ``nil``.

Because ``bool`` is a subclass of ``int`` in Python, every check in this
module tests booleans before numbers, and equality compares the kind of
both operands before comparing their contents.
"""

from __future__ import annotations

from typing import Any


def is_number(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_truthy(value: Any) -> bool:
    """``nil`` and ``false`` are falsy; every other value is truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def values_equal(a: Any, b: Any) -> bool:
    # Values of different kinds are never equal, so true != 1.
    if type(a) is not type(b):
        return False
    return a == b


def type_name(value: Any) -> str:
    """Return the Lox type name of a runtime value."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, int):
        return 'number'
    if isinstance(value, str):
        return 'string'
    return type(value).__name__


def to_string(value: Any) -> str:
    """Convert a Lox value to the form printed by ``print``.

    Strings print without quotes; booleans and nil print as the
    keywords that produce them.
    """
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    raise TypeError(f'not a Lox value: {value!r}')
