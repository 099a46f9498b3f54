"""Geographic primitives used for spatial constraints."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING, Iterable, Protocol

from shapely.geometry import Point
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.prepared import PreparedGeometry, prep

if TYPE_CHECKING:
    from geo_search.models.listing import Property


class Area(Protocol):
    """Anything that can answer whether a coordinate lies inside it."""

    def contains(self, lat: float, lng: float) -> bool: ...


@dataclass(frozen=True)
class LatLng:
    """A WGS84 coordinate in decimal degrees."""

    lat: float
    lng: float


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned lat/lng rectangle.

    Edges are inclusive. No orientation check is made: a rectangle whose
    south-west corner lies north or east of its north-east corner simply
    contains nothing.
    """

    south_west: LatLng
    north_east: LatLng

    @classmethod
    def from_corners(cls, south: float, west: float, north: float, east: float) -> "Bounds":
        """Build bounds from the four edge values."""
        return cls(south_west=LatLng(south, west), north_east=LatLng(north, east))

    @property
    def center(self) -> LatLng:
        return LatLng(
            (self.south_west.lat + self.north_east.lat) / 2,
            (self.south_west.lng + self.north_east.lng) / 2,
        )

    def contains(self, lat: float, lng: float) -> bool:
        """Return ``True`` if the point lies within the rectangle."""
        return (
            self.south_west.lat <= lat <= self.north_east.lat
            and self.south_west.lng <= lng <= self.north_east.lng
        )


@dataclass(frozen=True)
class Polygon:
    """Free-form drawn area, vertices in drawing order.

    The ring is closed implicitly; repeating the first vertex is allowed.
    Like ``Bounds``, edges and vertices count as inside.
    """

    vertices: tuple[LatLng, ...]

    @classmethod
    def from_points(cls, points: Iterable[tuple[float, float]]) -> "Polygon":
        """Build a polygon from ``(lat, lng)`` pairs."""
        return cls(vertices=tuple(LatLng(lat, lng) for lat, lng in points))

    @cached_property
    def _shape(self) -> PreparedGeometry | None:
        if len(self.vertices) < 3:
            return None
        # shapely works in (x, y) = (lng, lat)
        return prep(ShapelyPolygon([(v.lng, v.lat) for v in self.vertices]))

    def contains(self, lat: float, lng: float) -> bool:
        """Return ``True`` if the point lies inside or on the ring."""
        shape = self._shape
        if shape is None:
            return False
        return shape.covers(Point(lng, lat))


def bounds_of(properties: Iterable[Property]) -> Bounds | None:
    """Smallest rectangle enclosing every listing, or ``None`` if empty."""
    south = west = north = east = None
    for prop in properties:
        if south is None:
            south = north = prop.lat
            west = east = prop.lng
            continue
        south = min(south, prop.lat)
        north = max(north, prop.lat)
        west = min(west, prop.lng)
        east = max(east, prop.lng)

    if south is None:
        return None
    return Bounds.from_corners(south, west, north, east)
