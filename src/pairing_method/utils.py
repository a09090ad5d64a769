"""
Utility functions for Pairing Method.

Includes logging setup and lenient record access shared by the normalizer
and the data layer.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pairing_method.config import LOG_FORMAT, LOG_LEVEL

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT
)
logger = logging.getLogger(__name__)


def get_field(record: Any, key: str, default: Any = None) -> Any:
    """
    Read a field from a duck-typed record.

    Mappings are read by key, other objects by attribute. Missing fields
    return the default instead of raising.
    """
    if record is None:
        return default
    if isinstance(record, Mapping):
        return record.get(key, default)
    return getattr(record, key, default)


def is_record_sequence(value: Any) -> bool:
    """True for list/tuple-like collections; strings and bytes don't count."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))
