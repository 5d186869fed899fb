"""Keyed iteration helpers for domain-keyed collections."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

logger = logging.getLogger(__name__)

K = TypeVar("K")
T = TypeVar("T")


def consume_entries(
    destination: Mapping[K, T],
    source: Mapping[K, T] | None,
    consumer: Callable[[T, T | None], object],
) -> None:
    """Pair every destination entry with its counterpart in ``source``.

    The destination's key set drives the iteration: ``consumer`` is called
    once per destination entry, with ``None`` when the source has no entry
    under that key. Source entries unknown to the destination are skipped.
    Both kinds of mismatch are logged at debug level and never raise.

    Args:
        destination: Collection receiving values.
        source: Collection supplying values. ``None`` is treated as empty.
        consumer: Called as ``consumer(destination_item, source_item_or_none)``.
    """
    if source is None:
        logger.debug("entries_source_missing", extra={"entries": len(destination)})
        source = {}

    for key, item in destination.items():
        counterpart = source.get(key)
        if counterpart is None:
            logger.debug("entry_missing_in_source", extra={"key": str(key)})
        consumer(item, counterpart)

    for key in source:
        if key not in destination:
            logger.debug("entry_unknown_to_schema", extra={"key": str(key)})
