"""Dimension strings (``24dp``, ``12.5``) → bare numbers."""

from __future__ import annotations


def _is_number(value: str) -> bool:
    try:
        float(value)
    except ValueError:
        return False
    return True


def remove_dimen_suffix(dimen: str) -> str:
    """Strip a two-character unit suffix unless the value is already a number.

    The remainder is not validated: ``"abc"`` becomes ``"a"``.
    """
    dimen = dimen.strip()
    if not dimen or _is_number(dimen):
        return dimen
    return dimen[:-2]
