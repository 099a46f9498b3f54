"""Search filter value object."""

from dataclasses import dataclass, fields, replace
from typing import Any

from geo_search.exceptions import InvalidFiltersError
from geo_search.models.enums import ANY, PropertyType, SellerType, SortBy

# attribute name -> DTO key
_NUMERIC_FIELDS: dict[str, str] = {
    "min_price": "minPrice",
    "max_price": "maxPrice",
    "beds": "beds",
    "baths": "baths",
    "living_rooms": "livingRooms",
    "min_sqft": "minSqft",
    "max_sqft": "maxSqft",
}

SELLER_TYPE_CHOICES = frozenset({ANY, *(s.value for s in SellerType)})
PROPERTY_TYPE_CHOICES = frozenset({ANY, *(p.value for p in PropertyType)})


@dataclass(frozen=True)
class Filters:
    """Search form state.

    A ``None`` numeric field means "no constraint" and is distinct from
    ``0``. ``beds``, ``baths`` and ``living_rooms`` are floors ("at least
    N"); price and area are two-sided ranges.
    """

    query: str = ""
    country: str = ANY
    min_price: float | None = None
    max_price: float | None = None
    beds: int | None = None
    baths: int | None = None
    living_rooms: int | None = None
    min_sqft: float | None = None
    max_sqft: float | None = None
    seller_type: str = ANY
    property_type: str = ANY
    sort_by: str = SortBy.NEWEST.value

    @property
    def active_filter_count(self) -> int:
        """Number of constraints currently set, country included."""
        count = 0
        if self.query.strip():
            count += 1
        if self.country != ANY:
            count += 1
        count += sum(1 for name in _NUMERIC_FIELDS if getattr(self, name) is not None)
        if self.seller_type != ANY:
            count += 1
        if self.property_type != ANY:
            count += 1
        return count

    @property
    def has_active_filters(self) -> bool:
        return self.active_filter_count > 0

    def with_query(self, query: str) -> "Filters":
        return replace(self, query=query)

    def reset(self) -> "Filters":
        return Filters()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase DTO used by the UI and saved searches."""
        data: dict[str, Any] = {"query": self.query, "country": self.country}
        for name, key in _NUMERIC_FIELDS.items():
            data[key] = getattr(self, name)
        data["sellerType"] = self.seller_type
        data["propertyType"] = self.property_type
        data["sortBy"] = self.sort_by
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Filters":
        """Build filters from a camelCase DTO.

        Blank strings in numeric fields mean "unset", as submitted by an
        empty form input. Missing keys take their defaults.

        Raises
        ------
        InvalidFiltersError
            If a numeric value cannot be parsed or a categorical value is
            not one of the known choices.
        """
        kwargs: dict[str, Any] = {}
        for name, key in _NUMERIC_FIELDS.items():
            kwargs[name] = _parse_number(key, data.get(key))

        seller_type = data.get("sellerType") or ANY
        if seller_type not in SELLER_TYPE_CHOICES:
            raise InvalidFiltersError(f"Unknown seller type: {seller_type!r}")
        property_type = data.get("propertyType") or ANY
        if property_type not in PROPERTY_TYPE_CHOICES:
            raise InvalidFiltersError(f"Unknown property type: {property_type!r}")

        defaults = {f.name: f.default for f in fields(cls)}
        return cls(
            query=data.get("query") or "",
            country=data.get("country") or ANY,
            seller_type=seller_type,
            property_type=property_type,
            sort_by=data.get("sortBy") or defaults["sort_by"],
            **kwargs,
        )


def _parse_number(key: str, value: Any) -> float | int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidFiltersError(f"{key} must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError as e:
        raise InvalidFiltersError(f"{key} must be a number, got {value!r}") from e
    return int(number) if number.is_integer() else number
