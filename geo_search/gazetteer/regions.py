"""Per-country map regions used by the country filter."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from geo_search.models.geometry import Bounds, LatLng


@dataclass(frozen=True)
class CountryRegion:
    """Map framing for one country."""

    key: str
    name: str
    code: str  # ISO 3166-1 alpha-2 (XK for Kosovo)
    bounds: Bounds
    center: LatLng
    zoom: int


def _region(
    key: str,
    name: str,
    code: str,
    south_west: tuple[float, float],
    north_east: tuple[float, float],
    center: tuple[float, float],
    zoom: int,
) -> CountryRegion:
    return CountryRegion(
        key=key,
        name=name,
        code=code,
        bounds=Bounds(south_west=LatLng(*south_west), north_east=LatLng(*north_east)),
        center=LatLng(*center),
        zoom=zoom,
    )


COUNTRY_REGIONS: Mapping[str, CountryRegion] = MappingProxyType({
    r.key: r
    for r in (
        _region("albania", "Albania", "AL", (39.5, 19.2), (42.7, 21.1), (41.1, 20.1), 8),
        _region(
            "bosnia-herzegovina", "Bosnia and Herzegovina", "BA",
            (42.5, 15.7), (45.3, 19.6), (43.9, 17.7), 8,
        ),
        _region("bulgaria", "Bulgaria", "BG", (41.2, 22.3), (44.2, 28.6), (42.7, 25.5), 7),
        _region("croatia", "Croatia", "HR", (42.3, 13.4), (46.6, 19.4), (44.5, 16.4), 7),
        _region("greece", "Greece", "GR", (34.8, 19.3), (41.7, 28.3), (38.2, 23.8), 7),
        _region("kosovo", "Kosovo", "XK", (41.8, 20.0), (43.3, 21.8), (42.6, 20.9), 9),
        _region("montenegro", "Montenegro", "ME", (41.8, 18.4), (43.6, 20.4), (42.7, 19.4), 9),
        _region(
            "north-macedonia", "North Macedonia", "MK",
            (40.8, 20.4), (42.4, 23.0), (41.6, 21.7), 8,
        ),
        _region("romania", "Romania", "RO", (43.6, 20.2), (48.3, 29.7), (46.0, 25.0), 7),
        _region("serbia", "Serbia", "RS", (42.2, 18.8), (46.2, 23.0), (44.2, 20.9), 7),
        _region("slovenia", "Slovenia", "SI", (45.4, 13.4), (46.9, 16.6), (46.1, 15.0), 8),
    )
})

# Map framing after a filter reset
DEFAULT_CENTER = LatLng(44.2, 19.9)
DEFAULT_ZOOM = 7


def region_for(
    country: str,
    regions: Mapping[str, CountryRegion] = COUNTRY_REGIONS,
) -> CountryRegion | None:
    """Look up a region by key (``"north-macedonia"``) or display name.

    Display names compare caselessly, so ``"North Macedonia"`` (the spelling
    listings and the gazetteer carry) resolves like its key.
    """
    region = regions.get(country)
    if region is not None:
        return region
    wanted = country.strip().casefold()
    for candidate in regions.values():
        if candidate.name.casefold() == wanted:
            return candidate
    return None


def map_view(
    country: str | None,
    regions: Mapping[str, CountryRegion] = COUNTRY_REGIONS,
) -> tuple[LatLng, int]:
    """Center and zoom framing a country, or the whole region when unset.

    Unknown countries and ``"any"`` get ``DEFAULT_CENTER`` and
    ``DEFAULT_ZOOM``.
    """
    region = region_for(country, regions) if country else None
    if region is None:
        return DEFAULT_CENTER, DEFAULT_ZOOM
    return region.center, region.zoom
