"""The "no limit" sentinel for quantity settings.

``UNLIMITED`` (``-1``) is the one canonical representation of an unbounded
quantity. Positive infinity and any negative number are accepted as input
and normalised to it wherever values cross a boundary (merge, legacy
serialization, input parsing).
"""

from __future__ import annotations

import math
from typing import Final

UNLIMITED: Final = -1


def is_unlimited(value: float) -> bool:
    """Return True if ``value`` means "no limit" in either representation."""
    return value < 0 or value == math.inf


def normalize_limit(value: float) -> float:
    """Collapse every unbounded representation onto ``UNLIMITED``.

    Args:
        value: A quantity limit, possibly ``inf`` or negative.

    Returns:
        ``UNLIMITED`` for unbounded input, ``value`` unchanged otherwise.
    """
    if is_unlimited(value):
        return UNLIMITED
    return value
