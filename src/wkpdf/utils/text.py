#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wkpdf/utils/text.py
"""Text helpers for building renderer flag strings.

Functions
---------
format_invariant : Render a number without locale-dependent formatting
null_if_empty : Collapse blank strings to ``None``
mask_secret_flags : Hide flag values that must not reach the logs

Examples
--------
    >>> format_invariant(15.0)
    '15'
    >>> format_invariant(2.5)
    '2.5'
    >>> null_if_empty("   ") is None
    True

"""

from __future__ import annotations

import re

_SECRET_FLAG_PATTERN = re.compile(r"(--password\s+)(\S+)")


def format_invariant(value: float | int) -> str:
    """Format a number using an invariant decimal representation.

    Integral values drop their fractional part, everything else uses the
    shortest round-tripping representation with ``.`` as decimal separator.

    Parameters
    ----------
    value : float or int
        Number to format

    Returns
    -------
    str
        The formatted number

    """
    if isinstance(value, bool):
        raise TypeError("format_invariant expects a number, not a bool")
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def null_if_empty(value: str | None) -> str | None:
    """Return ``None`` for ``None`` or whitespace-only strings, else the string unchanged."""
    if value is None or not value.strip():
        return None
    return value


def mask_secret_flags(flags: str | None) -> str | None:
    """Replace the value of ``--password`` in a flag string with asterisks."""
    if flags is None:
        return None
    return _SECRET_FLAG_PATTERN.sub(r"\1***", flags)
