"""Enumeration types for listings and search filters."""

from enum import Enum

# Filter value meaning "no categorical constraint".
ANY = "any"


class SellerType(str, Enum):
    AGENT = "agent"
    PRIVATE = "private"


class PropertyType(str, Enum):
    HOUSE = "house"
    APARTMENT = "apartment"
    VILLA = "villa"
    OTHER = "other"


class SortBy(str, Enum):
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    BEDS_DESC = "beds_desc"
    NEWEST = "newest"
