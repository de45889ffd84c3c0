"""
Truthy capability.

Defines the interface a type implements to be classified as truthy, and
the two predicates derived from it.
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from .matcher import TriState


def falsey_from(result: TriState) -> bool:
    """True iff the classification is definitively falsey."""
    return result is False


def truey_from(result: TriState) -> bool:
    """True iff the classification is definitively truey."""
    return result is True


@runtime_checkable
class Truthy(Protocol):
    """
    Protocol for types that can classify themselves as truthy.

    Only ``is_truthy`` is required; ``is_falsey`` and ``is_truey`` are
    derived from it (see ``TruthyMixin``).
    """

    def is_truthy(self) -> TriState:
        """
        Indicates whether the instance can be classed as "truthy" and, if
        so, whether it is "truey" or "falsey".
        """
        ...


class TruthyMixin(ABC):
    """
    Base class providing the derived truthy predicates.

    Subclasses implement ``is_truthy``.
    """

    @abstractmethod
    def is_truthy(self) -> TriState:
        """Classify this instance."""

    def is_falsey(self) -> bool:
        """Indicates whether the instance can be classed as "falsey"."""
        return falsey_from(self.is_truthy())

    def is_truey(self) -> bool:
        """Indicates whether the instance can be classed as "truey"."""
        return truey_from(self.is_truthy())


@runtime_checkable
class AsStr(Protocol):
    """Protocol for types exposing a read-only string view of themselves."""

    def as_str(self) -> str:
        ...
