"""Numeric, categorical and text filtering of listings."""

from __future__ import annotations

from typing import Iterable

from geo_search.gazetteer.gazetteer import Gazetteer
from geo_search.models.enums import ANY
from geo_search.models.filters import Filters
from geo_search.models.listing import Property
from geo_search.search.matcher import matches


def _value(number: float | None) -> float:
    """Missing listing numbers compare as zero."""
    return 0 if number is None else number


def matches_filters(
    prop: Property,
    filters: Filters,
    gazetteer: Gazetteer | None,
    *,
    match_local_names: bool = True,
) -> bool:
    """Return ``True`` if one listing passes every active filter.

    Bounds are inclusive. A ``None`` filter value is skipped; ``0`` is an
    active constraint.
    """
    if not matches(filters.query, prop, gazetteer, match_local_names=match_local_names):
        return False

    price = _value(prop.price)
    if filters.min_price is not None and price < filters.min_price:
        return False
    if filters.max_price is not None and price > filters.max_price:
        return False

    if filters.beds is not None and _value(prop.beds) < filters.beds:
        return False
    if filters.baths is not None and _value(prop.baths) < filters.baths:
        return False
    if filters.living_rooms is not None and _value(prop.living_rooms) < filters.living_rooms:
        return False

    sqft = _value(prop.sqft)
    if filters.min_sqft is not None and sqft < filters.min_sqft:
        return False
    if filters.max_sqft is not None and sqft > filters.max_sqft:
        return False

    if filters.seller_type != ANY and prop.seller.type != filters.seller_type:
        return False
    if filters.property_type != ANY and prop.property_type != filters.property_type:
        return False

    return True


def filter_properties(
    properties: Iterable[Property],
    filters: Filters,
    gazetteer: Gazetteer | None,
    *,
    match_local_names: bool = True,
) -> list[Property]:
    """Listings passing every active filter, in input order."""
    return [
        p
        for p in properties
        if matches_filters(p, filters, gazetteer, match_local_names=match_local_names)
    ]


def is_form_search_active(filters: Filters) -> bool:
    """Whether the search form, rather than the map area, drives results.

    True when the query is non-blank, any numeric filter is set, or a
    seller/property type is chosen. Country and sort order do not count.
    """
    return (
        filters.query.strip() != ""
        or filters.min_price is not None
        or filters.max_price is not None
        or filters.beds is not None
        or filters.baths is not None
        or filters.living_rooms is not None
        or filters.min_sqft is not None
        or filters.max_sqft is not None
        or filters.seller_type != ANY
        or filters.property_type != ANY
    )
