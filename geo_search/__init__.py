"""Geo-aware listing search: gazetteer matching, filtering, bounds and sorting."""

from geo_search.gazetteer import Gazetteer, default_gazetteer, find_closest
from geo_search.models import Bounds, Filters, LatLng, Polygon, Property, Seller
from geo_search.search import SearchEngine, is_form_search_active, search

__version__ = "0.1.0"

__all__ = [
    "Bounds",
    "Filters",
    "Gazetteer",
    "LatLng",
    "Polygon",
    "Property",
    "SearchEngine",
    "Seller",
    "__version__",
    "default_gazetteer",
    "find_closest",
    "is_form_search_active",
    "search",
]
