"""Filter, match, sort and spatially constrain listings."""

from geo_search.search.bounds import parse_bounds, within_bounds
from geo_search.search.matcher import CITY_DELIMITER, format_city, locate, matches, split_city
from geo_search.search.orchestrator import SearchEngine, search
from geo_search.search.predicates import (
    filter_properties,
    is_form_search_active,
    matches_filters,
)
from geo_search.search.sorting import recency, sort_properties

__all__ = [
    "CITY_DELIMITER",
    "SearchEngine",
    "filter_properties",
    "format_city",
    "is_form_search_active",
    "locate",
    "matches",
    "matches_filters",
    "parse_bounds",
    "recency",
    "search",
    "sort_properties",
    "split_city",
    "within_bounds",
]
