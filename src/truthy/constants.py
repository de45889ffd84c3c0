"""
Built-in term tables.

The precise tables are consumed by binary search and must stay in sorted
(ordinal) order; the lowercase tables are scanned linearly and are kept in
most-likely order.
"""

from typing import Tuple


FALSEY_PRECISE_STRINGS: Tuple[str, ...] = (
    "0",
    "FALSE",
    "False",
    "NO",
    "No",
    "OFF",
    "Off",
    "false",
    "no",
    "off",
)

TRUEY_PRECISE_STRINGS: Tuple[str, ...] = (
    "1",
    "ON",
    "On",
    "TRUE",
    "True",
    "YES",
    "Yes",
    "on",
    "true",
    "yes",
)

FALSEY_LOWERCASE_STRINGS: Tuple[str, ...] = (
    "false",
    "no",
    "off",
    "0",
)

TRUEY_LOWERCASE_STRINGS: Tuple[str, ...] = (
    "true",
    "yes",
    "on",
    "1",
)


def _require_sorted(name: str, strings: Tuple[str, ...]) -> None:
    """Raise if a precise table is out of order."""
    for previous, current in zip(strings, strings[1:]):
        if not previous < current:
            raise ValueError(
                f"{name} must be in strictly ascending order: "
                f"{previous!r} precedes {current!r}"
            )


_require_sorted("FALSEY_PRECISE_STRINGS", FALSEY_PRECISE_STRINGS)
_require_sorted("TRUEY_PRECISE_STRINGS", TRUEY_PRECISE_STRINGS)
