"""Static location data and lookups over it."""

from geo_search.gazetteer.gazetteer import Gazetteer, default_gazetteer, load_gazetteer
from geo_search.gazetteer.regions import (
    COUNTRY_REGIONS,
    DEFAULT_CENTER,
    DEFAULT_ZOOM,
    CountryRegion,
    map_view,
    region_for,
)
from geo_search.gazetteer.resolver import find_closest

__all__ = [
    "COUNTRY_REGIONS",
    "CountryRegion",
    "DEFAULT_CENTER",
    "DEFAULT_ZOOM",
    "Gazetteer",
    "default_gazetteer",
    "find_closest",
    "load_gazetteer",
    "map_view",
    "region_for",
]
