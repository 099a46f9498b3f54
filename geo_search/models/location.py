"""Gazetteer entities: settlements grouped under municipalities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Settlement:
    """A named place with alternate local spellings."""

    name: str
    lat: float
    lng: float
    local_names: tuple[str, ...] = ()

    @property
    def spellings(self) -> tuple[str, ...]:
        return tuple(n for n in (self.name, *self.local_names) if n)


@dataclass(frozen=True)
class Municipality:
    """Administrative unit owning its settlements.

    The first settlement is conventionally the municipal seat.
    """

    name: str
    lat: float
    lng: float
    settlements: tuple[Settlement, ...]
    local_names: tuple[str, ...] = ()

    @property
    def spellings(self) -> tuple[str, ...]:
        return tuple(n for n in (self.name, *self.local_names) if n)


@dataclass(frozen=True)
class ClosestLocation:
    """Result of a nearest-settlement lookup."""

    settlement: Settlement
    municipality: Municipality
    country: str
