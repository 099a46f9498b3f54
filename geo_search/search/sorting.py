"""Ordering strategies for search results."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterable

from geo_search.models.enums import SortBy
from geo_search.models.listing import Property, Timestamp

logger = logging.getLogger(__name__)


def _epoch_millis(value: Timestamp | None) -> float:
    if value is None:
        return 0
    if isinstance(value, datetime):
        return value.timestamp() * 1000
    return value


def recency(prop: Property) -> float:
    """Latest of creation and renewal time; renewing counts as re-listing."""
    return max(_epoch_millis(prop.created_at), _epoch_millis(prop.last_renewed))


def _price(prop: Property) -> float:
    return prop.price or 0


def _beds(prop: Property) -> float:
    return prop.beds or 0


# strategy -> (key, descending)
_STRATEGIES: dict[str, tuple[Callable[[Property], float], bool]] = {
    SortBy.PRICE_ASC.value: (_price, False),
    SortBy.PRICE_DESC.value: (_price, True),
    SortBy.BEDS_DESC.value: (_beds, True),
    SortBy.NEWEST.value: (recency, True),
}


def sort_properties(properties: Iterable[Property], sort_by: str | None) -> list[Property]:
    """Return listings ordered by ``sort_by``.

    The sort is stable, so ties keep their input order. An unknown or
    missing strategy leaves the order unchanged.
    """
    strategy = _STRATEGIES.get(sort_by.value if isinstance(sort_by, SortBy) else sort_by)
    if strategy is None:
        if sort_by:
            logger.debug("Unknown sort strategy %r, keeping input order", sort_by)
        return list(properties)

    key, descending = strategy
    return sorted(properties, key=key, reverse=descending)
