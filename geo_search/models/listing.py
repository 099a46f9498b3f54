"""Listing model as delivered by the listings API."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from geo_search.exceptions import InvalidListingError
from geo_search.models.enums import PropertyType, SellerType

# Epoch milliseconds or a datetime
Timestamp = float | datetime


@dataclass(frozen=True)
class Seller:
    """Who is selling a listing."""

    type: str = SellerType.PRIVATE.value
    name: str = ""


@dataclass(frozen=True)
class Property:
    """A marketplace listing.

    Numeric fields may be missing (``None``); the search pipeline reads a
    missing number as ``0``. ``city`` follows the ``"Settlement,
    Municipality"`` convention written by the listing-creation flow.
    """

    property_id: str
    address: str
    city: str
    country: str
    lat: float
    lng: float
    price: float | None = None
    beds: int | None = None
    baths: int | None = None
    living_rooms: int | None = None
    sqft: float | None = None
    seller: Seller = field(default_factory=Seller)
    property_type: str = PropertyType.OTHER.value
    created_at: Timestamp | None = None
    last_renewed: Timestamp | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Property":
        """Build a listing from a camelCase API payload.

        Raises
        ------
        InvalidListingError
            If an identifier or coordinate is missing or not numeric.
        """
        try:
            property_id = str(data.get("id") or data["propertyId"])
            lat = float(data["lat"])
            lng = float(data["lng"])
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidListingError(f"Listing payload lacks id or coordinates: {e}") from e

        seller_data = data.get("seller") or {}
        return cls(
            property_id=property_id,
            address=data.get("address") or "",
            city=data.get("city") or "",
            country=data.get("country") or "",
            lat=lat,
            lng=lng,
            price=data.get("price"),
            beds=data.get("beds"),
            baths=data.get("baths"),
            living_rooms=data.get("livingRooms"),
            sqft=data.get("sqft"),
            seller=Seller(
                type=seller_data.get("type", SellerType.PRIVATE.value),
                name=seller_data.get("name", ""),
            ),
            property_type=data.get("propertyType") or PropertyType.OTHER.value,
            created_at=_parse_timestamp(data.get("createdAt")),
            last_renewed=_parse_timestamp(data.get("lastRenewed")),
        )


def _parse_timestamp(value: Any) -> Timestamp | None:
    if value is None or value == "":
        return None
    if isinstance(value, (int, float, datetime)):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError as e:
        raise InvalidListingError(f"Unparseable timestamp: {value!r}") from e
