"""Free-text location matching against listings and the gazetteer."""

from __future__ import annotations

from typing import Iterable

from geo_search.gazetteer.gazetteer import Gazetteer
from geo_search.models.geometry import LatLng
from geo_search.models.listing import Property

# Listing city strings are written as "<settlement><CITY_DELIMITER><municipality>".
# A settlement therefore anchors the start of the string while the
# municipality may appear anywhere after it.
CITY_DELIMITER = ", "


def format_city(settlement: str, municipality: str) -> str:
    """Compose a city string in the listing convention."""
    if settlement == municipality:
        return settlement
    return f"{settlement}{CITY_DELIMITER}{municipality}"


def split_city(city: str) -> tuple[str, str | None]:
    """Split a city string into ``(settlement, municipality)``.

    The municipality part is ``None`` when the delimiter is absent.
    """
    settlement, sep, rest = city.partition(CITY_DELIMITER.strip())
    if not sep:
        return city.strip(), None
    return settlement.strip(), rest.strip() or None


def normalize_query(query: str | None) -> str:
    return (query or "").strip().casefold()


def _any_contains(needle: str, spellings: Iterable[str]) -> bool:
    return any(needle in spelling.casefold() for spelling in spellings)


def matches(
    query: str | None,
    prop: Property,
    gazetteer: Gazetteer | None,
    *,
    match_local_names: bool = True,
) -> bool:
    """Decide whether a listing satisfies a free-text location query.

    Rules, first success wins: a blank query matches everything; then a
    substring of the address, the city or the country; then a gazetteer
    municipality whose name holds the query and appears anywhere in the
    city; then a settlement whose name holds the query and starts the city.
    """
    q = normalize_query(query)
    if not q:
        return True

    if q in prop.address.casefold():
        return True
    city = prop.city.casefold()
    if q in city:
        return True
    if q in prop.country.casefold():
        return True

    if gazetteer is None:
        return False
    return _matches_gazetteer(q, city, gazetteer, match_local_names)


def _matches_gazetteer(q: str, city: str, gazetteer: Gazetteer, match_local_names: bool) -> bool:
    for _, municipality in gazetteer.iter_municipalities():
        names = municipality.spellings if match_local_names else (municipality.name,)
        if _any_contains(q, names) and any(name.casefold() in city for name in names):
            return True

        for settlement in municipality.settlements:
            names = settlement.spellings if match_local_names else (settlement.name,)
            if _any_contains(q, names) and any(
                city.startswith(name.casefold()) for name in names
            ):
                return True
    return False


def locate(query: str | None, gazetteer: Gazetteer | None) -> LatLng | None:
    """Coordinates of the place a query names exactly, if any.

    A query equal to a municipality name, a settlement name, any of their
    local names, or a full ``"Settlement, Municipality"`` string resolves to
    that place. The first hit in gazetteer order wins.
    """
    q = normalize_query(query)
    if not q or gazetteer is None:
        return None

    for _, municipality in gazetteer.iter_municipalities():
        if any(name.casefold() == q for name in municipality.spellings):
            return LatLng(municipality.lat, municipality.lng)
        for settlement in municipality.settlements:
            full_name = f"{settlement.name}{CITY_DELIMITER}{municipality.name}".casefold()
            if full_name == q or any(name.casefold() == q for name in settlement.spellings):
                return LatLng(settlement.lat, settlement.lng)
    return None
