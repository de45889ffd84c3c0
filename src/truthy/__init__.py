"""
truthy - classify strings and values as truey, falsey, or neither.

Usage:
    from truthy import string_is_truthy, is_truthy

    string_is_truthy(" YES")   # True
    string_is_truthy("Off")    # False
    string_is_truthy("maybe")  # None
    is_truthy(None)            # None
"""

__version__ = "0.1.0"

from .constants import (
    FALSEY_LOWERCASE_STRINGS,
    FALSEY_PRECISE_STRINGS,
    TRUEY_LOWERCASE_STRINGS,
    TRUEY_PRECISE_STRINGS,
)
from .terms import (
    DEFAULT_TERMS,
    DefaultTerms,
    TermStrings,
    Terms,
    load_terms,
    stock_term_strings,
)
from .matcher import (
    TriState,
    string_is_falsey,
    string_is_truey,
    string_is_truthy,
    string_is_truthy_with,
)
from .capability import AsStr, Truthy, TruthyMixin, falsey_from, truey_from
from .config import TruthyConfig, get_config, load_config, reset_config, set_config
from .adapters import (
    AdapterRegistry,
    TruthyAdapter,
    is_falsey,
    is_truey,
    is_truthy,
    register_adapter,
)
from .infrastructure import get_logger, setup_logging

__all__ = [
    "__version__",
    # Term tables
    "FALSEY_PRECISE_STRINGS",
    "FALSEY_LOWERCASE_STRINGS",
    "TRUEY_PRECISE_STRINGS",
    "TRUEY_LOWERCASE_STRINGS",
    # Terms
    "DEFAULT_TERMS",
    "DefaultTerms",
    "TermStrings",
    "Terms",
    "load_terms",
    "stock_term_strings",
    # Matching
    "TriState",
    "string_is_falsey",
    "string_is_truey",
    "string_is_truthy",
    "string_is_truthy_with",
    # Capability
    "AsStr",
    "Truthy",
    "TruthyMixin",
    "falsey_from",
    "truey_from",
    # Adapters
    "AdapterRegistry",
    "TruthyAdapter",
    "register_adapter",
    "is_truthy",
    "is_falsey",
    "is_truey",
    # Config
    "TruthyConfig",
    "get_config",
    "set_config",
    "reset_config",
    "load_config",
    # Logging
    "setup_logging",
    "get_logger",
]
