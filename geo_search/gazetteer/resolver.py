"""Nearest-settlement lookup."""

from __future__ import annotations

from geo_search.gazetteer.gazetteer import Gazetteer
from geo_search.models.location import ClosestLocation


def squared_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Squared planar distance in degrees.

    Only used to rank candidates, so the square root and the geodesic
    correction are skipped.
    """
    dlat = lat1 - lat2
    dlng = lng1 - lng2
    return dlat * dlat + dlng * dlng


def find_closest(lat: float, lng: float, gazetteer: Gazetteer | None) -> ClosestLocation | None:
    """Return the settlement nearest to ``(lat, lng)``.

    Every settlement is scanned in gazetteer order and the first minimum
    wins ties. Returns ``None`` when the gazetteer is absent or empty.
    """
    if gazetteer is None:
        return None

    closest: ClosestLocation | None = None
    min_distance = float("inf")
    for country, municipality, settlement in gazetteer.iter_settlements():
        distance = squared_distance(lat, lng, settlement.lat, settlement.lng)
        if distance < min_distance:
            min_distance = distance
            closest = ClosestLocation(
                settlement=settlement,
                municipality=municipality,
                country=country,
            )
    return closest
