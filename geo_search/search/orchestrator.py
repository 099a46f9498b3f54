"""Single entry point composing filter, sort and spatial constraint."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from geo_search.config import GeoSearchConfig
from geo_search.gazetteer.gazetteer import Gazetteer, default_gazetteer, load_gazetteer
from geo_search.gazetteer.regions import COUNTRY_REGIONS, CountryRegion, map_view, region_for
from geo_search.gazetteer.resolver import find_closest
from geo_search.logging import search_extra
from geo_search.models.enums import ANY
from geo_search.models.filters import Filters
from geo_search.models.geometry import Area, LatLng
from geo_search.models.listing import Property
from geo_search.models.location import ClosestLocation
from geo_search.search.bounds import within_bounds
from geo_search.search.matcher import locate
from geo_search.search.predicates import filter_properties, is_form_search_active
from geo_search.search.sorting import sort_properties

logger = logging.getLogger(__name__)


def _country_area(
    filters: Filters,
    regions: Mapping[str, CountryRegion],
) -> Area | None:
    if filters.country == ANY:
        return None
    region = region_for(filters.country, regions)
    if region is None:
        logger.warning("Unknown country filter %r, no area applied", filters.country)
        return None
    return region.bounds


def search(
    properties: Iterable[Property],
    filters: Filters,
    map_bounds: Area | None = None,
    drawn_bounds: Area | None = None,
    gazetteer: Gazetteer | None = None,
    *,
    regions: Mapping[str, CountryRegion] = COUNTRY_REGIONS,
    match_local_names: bool = True,
) -> list[Property]:
    """Run the full search pipeline.

    Listings pass the filter predicate first, are then ordered by
    ``filters.sort_by``, and finally restricted to the drawn area or, when
    nothing is drawn, the map viewport. A selected country stands in for a
    drawn area when none is given. Inputs are never mutated.
    """
    candidates = list(properties)
    filtered = filter_properties(
        candidates, filters, gazetteer, match_local_names=match_local_names
    )
    ordered = sort_properties(filtered, filters.sort_by)

    if drawn_bounds is None:
        drawn_bounds = _country_area(filters, regions)
    results = within_bounds(ordered, drawn_bounds, map_bounds)

    logger.debug(
        "Search %r: %d listings, %d passed filters, %d in area",
        filters.query,
        len(candidates),
        len(filtered),
        len(results),
        extra=search_extra(
            filters.query,
            filters.country,
            candidates=len(candidates),
            filtered=len(filtered),
            results=len(results),
        ),
    )
    return results


class SearchEngine:
    """Search pipeline bound to one gazetteer and configuration.

    Parameters
    ----------
    gazetteer : Gazetteer | None
        Location data. Defaults to the configured file, or the embedded
        dataset when no file is configured.
    config : GeoSearchConfig | None
        Settings; defaults to ``GeoSearchConfig()``.
    """

    def __init__(
        self,
        gazetteer: Gazetteer | None = None,
        config: GeoSearchConfig | None = None,
    ) -> None:
        self.config = config or GeoSearchConfig()
        if gazetteer is None:
            path = self.config.gazetteer.path
            gazetteer = load_gazetteer(path) if path is not None else default_gazetteer()
        self.gazetteer = gazetteer

    def default_filters(self) -> Filters:
        return Filters(sort_by=self.config.search.default_sort_by)

    def search(
        self,
        properties: Iterable[Property],
        filters: Filters | None = None,
        map_bounds: Area | None = None,
        drawn_bounds: Area | None = None,
    ) -> list[Property]:
        return search(
            properties,
            filters if filters is not None else self.default_filters(),
            map_bounds,
            drawn_bounds,
            self.gazetteer,
            match_local_names=self.config.search.match_local_names,
        )

    def locate(self, query: str) -> LatLng | None:
        return locate(query, self.gazetteer)

    def find_closest(self, lat: float, lng: float) -> ClosestLocation | None:
        return find_closest(lat, lng, self.gazetteer)

    def map_view(self, filters: Filters | None = None) -> tuple[LatLng, int]:
        """Map center and zoom for the selected country, or the default view."""
        return map_view(filters.country if filters is not None else None)

    @staticmethod
    def is_form_search_active(filters: Filters) -> bool:
        return is_form_search_active(filters)
