"""Domain models for geo-aware listing search."""

from geo_search.models.enums import ANY, PropertyType, SellerType, SortBy
from geo_search.models.filters import Filters
from geo_search.models.geometry import Area, Bounds, LatLng, Polygon, bounds_of
from geo_search.models.listing import Property, Seller
from geo_search.models.location import ClosestLocation, Municipality, Settlement

__all__ = [
    "ANY",
    "Area",
    "Bounds",
    "ClosestLocation",
    "Filters",
    "LatLng",
    "Municipality",
    "Polygon",
    "Property",
    "PropertyType",
    "Seller",
    "SellerType",
    "Settlement",
    "SortBy",
    "bounds_of",
]
