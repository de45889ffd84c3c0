"""
Terms configuration.

Selects which term tables a classification call consults: the built-in
tables, or four caller-supplied token sequences.
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple, Union
import logging

import yaml

from . import constants

logger = logging.getLogger(__name__)


class DefaultTerms:
    """Use the built-in comparison strings."""

    _instance: Optional["DefaultTerms"] = None

    def __new__(cls) -> "DefaultTerms":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "DEFAULT_TERMS"


DEFAULT_TERMS = DefaultTerms()


def _as_tokens(name: str, strings: Iterable[str]) -> Tuple[str, ...]:
    if isinstance(strings, str):
        raise ValueError(f"{name} must be a sequence of strings, not a string")
    tokens = tuple(strings)
    for token in tokens:
        if not isinstance(token, str):
            raise ValueError(
                f"{name} must contain only strings, got {type(token).__name__}"
            )
    return tokens


@dataclass(frozen=True)
class TermStrings:
    """
    Caller-supplied term strings.

    The precise strings are compared exactly against the trimmed input; the
    lowercase strings are compared against the ASCII-lowercased trimmed
    input. Tokens are used verbatim: nothing is trimmed, sorted or
    deduplicated.
    """

    falsey_precise_strings: Tuple[str, ...] = ()
    falsey_lowercase_strings: Tuple[str, ...] = ()
    truey_precise_strings: Tuple[str, ...] = ()
    truey_lowercase_strings: Tuple[str, ...] = ()

    def __post_init__(self):
        """Normalize every token sequence to a tuple of strings."""
        for name in (
            "falsey_precise_strings",
            "falsey_lowercase_strings",
            "truey_precise_strings",
            "truey_lowercase_strings",
        ):
            object.__setattr__(self, name, _as_tokens(name, getattr(self, name)))

    def with_falsey(
        self,
        precise_strings: Iterable[str],
        lowercase_strings: Iterable[str] = (),
    ) -> "TermStrings":
        """Return a copy with the falsey strings replaced."""
        return replace(
            self,
            falsey_precise_strings=precise_strings,
            falsey_lowercase_strings=lowercase_strings,
        )

    def with_truey(
        self,
        precise_strings: Iterable[str],
        lowercase_strings: Iterable[str] = (),
    ) -> "TermStrings":
        """Return a copy with the truey strings replaced."""
        return replace(
            self,
            truey_precise_strings=precise_strings,
            truey_lowercase_strings=lowercase_strings,
        )


Terms = Union[DefaultTerms, TermStrings]


def stock_term_strings() -> TermStrings:
    """
    Obtain the stock term strings of the library.

    Handy when providing your own "truey" strings while relying on the stock
    "falsey" strings, e.g. ``stock_term_strings().with_truey(["Da"], ["da"])``.
    """
    return TermStrings(
        falsey_precise_strings=constants.FALSEY_PRECISE_STRINGS,
        falsey_lowercase_strings=constants.FALSEY_LOWERCASE_STRINGS,
        truey_precise_strings=constants.TRUEY_PRECISE_STRINGS,
        truey_lowercase_strings=constants.TRUEY_LOWERCASE_STRINGS,
    )


def _polarity(data: Dict[str, Any], key: str) -> Optional[Dict[str, Any]]:
    section = data.get(key)
    if section is None:
        return None
    if not isinstance(section, dict):
        raise ValueError(f"'{key}' must be a mapping with 'precise'/'lowercase' lists")
    unknown = set(section) - {"precise", "lowercase"}
    if unknown:
        raise ValueError(f"Unknown keys in '{key}': {sorted(unknown)}")
    return section


def load_terms(terms_path: Union[str, Path]) -> TermStrings:
    """
    Load term strings from a YAML file.

    Expected layout::

        falsey:
          precise: [Nyet, Nope]
          lowercase: [nyet, nope]
        truey:
          precise: [Da, Yup]
          lowercase: [da, yup]

    A polarity missing from the file keeps the stock strings. Quote tokens
    such as "no" or "on": YAML otherwise reads them as booleans.

    Args:
        terms_path: Path to YAML terms file

    Returns:
        TermStrings instance

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not laid out as above
    """
    path = Path(terms_path)
    if not path.exists():
        raise FileNotFoundError(f"Terms file not found: {terms_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Terms file must contain a mapping: {terms_path}")

    terms = stock_term_strings()

    falsey = _polarity(data, "falsey")
    if falsey is not None:
        terms = terms.with_falsey(
            falsey.get("precise") or (),
            falsey.get("lowercase") or (),
        )

    truey = _polarity(data, "truey")
    if truey is not None:
        terms = terms.with_truey(
            truey.get("precise") or (),
            truey.get("lowercase") or (),
        )

    logger.info(
        f"Loaded terms from {path}: "
        f"{len(terms.falsey_precise_strings)} falsey precise, "
        f"{len(terms.truey_precise_strings)} truey precise"
    )
    return terms
