"""Spatial constraint from a drawn area or the map viewport."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Mapping

from geo_search.models.geometry import Area, Bounds, LatLng
from geo_search.models.listing import Property

logger = logging.getLogger(__name__)


def within_bounds(
    properties: Iterable[Property],
    drawn_bounds: Area | None,
    map_bounds: Area | None,
) -> list[Property]:
    """Keep listings inside the active area.

    A drawn area overrides the viewport entirely. With neither present the
    input is returned unchanged (as a new list).
    """
    area = drawn_bounds if drawn_bounds is not None else map_bounds
    if area is None:
        return list(properties)
    return [p for p in properties if area.contains(p.lat, p.lng)]


def parse_bounds(value: str | Mapping[str, Any] | None) -> Bounds | None:
    """Parse serialized map bounds.

    Accepts a JSON string or a mapping in any of these shapes::

        {"_southWest": {"lat", "lng"}, "_northEast": {"lat", "lng"}}   # Leaflet
        {"southWest": {...}, "northEast": {...}}
        {"south": .., "west": .., "north": .., "east": ..}

    Empty input gives ``None``. Malformed input also gives ``None`` and is
    logged at warning level.
    """
    if not value:
        return None

    try:
        data = json.loads(value) if isinstance(value, str) else value
        return _bounds_from_mapping(data)
    except (ValueError, KeyError, TypeError) as e:
        logger.warning("Ignoring malformed bounds %r: %s", value, e)
        return None


def _bounds_from_mapping(data: Mapping[str, Any]) -> Bounds:
    if "_southWest" in data:
        return Bounds(_latlng(data["_southWest"]), _latlng(data["_northEast"]))
    if "southWest" in data:
        return Bounds(_latlng(data["southWest"]), _latlng(data["northEast"]))
    return Bounds.from_corners(
        float(data["south"]),
        float(data["west"]),
        float(data["north"]),
        float(data["east"]),
    )


def _latlng(point: Any) -> LatLng:
    if isinstance(point, Mapping):
        return LatLng(float(point["lat"]), float(point["lng"]))
    lat, lng = point
    return LatLng(float(lat), float(lng))
