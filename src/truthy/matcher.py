"""
String truthiness matching.

Two-tier lookup: the trimmed input is first compared exactly against the
"precise" strings, then, lowercased (ASCII only), against the "lowercase"
strings. Falsey strings are always consulted before truey strings.

Note that it is NOT guaranteed that
``string_is_falsey(x) == (not string_is_truey(x))``: a string matching
neither table is neither falsey nor truey.
"""

from bisect import bisect_left
from typing import Optional, Sequence
import logging

from . import constants
from .terms import DEFAULT_TERMS, DefaultTerms, Terms

logger = logging.getLogger(__name__)

# None: not truthy; False: falsey; True: truey.
TriState = Optional[bool]

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


# Characters with the Unicode White_Space property. str.strip() with no
# argument also strips the U+001C..U+001F separators, which are not spaces.
_WHITESPACE = (
    "\t\n\x0b\x0c\r "
    "\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def _trim(s: str) -> str:
    return s.strip(_WHITESPACE)


def _ascii_lower(s: str) -> str:
    """Lowercase A-Z only; non-ASCII characters are left untouched."""
    return s.translate(_ASCII_LOWER)


def _in_sorted(s: str, sorted_strings: Sequence[str]) -> bool:
    i = bisect_left(sorted_strings, s)
    return i != len(sorted_strings) and sorted_strings[i] == s


def _string_is_truthy_against(
    s: str,
    sorted_precise_strings: Sequence[str],
    lowercase_strings: Sequence[str],
) -> bool:
    s = _trim(s)

    if _in_sorted(s, sorted_precise_strings):
        return True

    return _ascii_lower(s) in lowercase_strings


def string_is_falsey(s: str) -> bool:
    """Indicates that the given string, when trimmed, is deemed "falsey"."""
    return _string_is_truthy_against(
        s,
        constants.FALSEY_PRECISE_STRINGS,
        constants.FALSEY_LOWERCASE_STRINGS,
    )


def string_is_truey(s: str) -> bool:
    """Indicates that the given string, when trimmed, is deemed "truey"."""
    return _string_is_truthy_against(
        s,
        constants.TRUEY_PRECISE_STRINGS,
        constants.TRUEY_LOWERCASE_STRINGS,
    )


def string_is_truthy(s: str) -> TriState:
    """
    Indicates whether the given string is "truthy" and, if so, whether it is
    "truey" or "falsey".

    Returns:
        None if the string is not classified as truthy, False if it is
        deemed falsey, True if it is deemed truey
    """
    return string_is_truthy_with(s, DEFAULT_TERMS)


def string_is_truthy_with(s: str, terms: Terms = DEFAULT_TERMS) -> TriState:
    """
    Indicates whether the given string is "truthy" when evaluated against
    the given terms.

    With ``DEFAULT_TERMS`` the built-in tables are used. With a
    ``TermStrings`` the caller's strings are used verbatim and the built-in
    strings have no special status; caller precise strings need not be
    sorted.

    Args:
        s: String to classify
        terms: Terms configuration

    Returns:
        None, False or True, as for ``string_is_truthy``
    """
    s = _trim(s)

    if isinstance(terms, DefaultTerms):
        if _in_sorted(s, constants.FALSEY_PRECISE_STRINGS):
            return False
        if _in_sorted(s, constants.TRUEY_PRECISE_STRINGS):
            return True
        falsey_lowercase_strings = constants.FALSEY_LOWERCASE_STRINGS
        truey_lowercase_strings = constants.TRUEY_LOWERCASE_STRINGS
    else:
        if s in terms.falsey_precise_strings:
            return False
        if s in terms.truey_precise_strings:
            return True
        falsey_lowercase_strings = terms.falsey_lowercase_strings
        truey_lowercase_strings = terms.truey_lowercase_strings

    lowered = _ascii_lower(s)

    if lowered in falsey_lowercase_strings:
        return False
    if lowered in truey_lowercase_strings:
        return True

    logger.debug(f"Not truthy: {s!r}")
    return None
