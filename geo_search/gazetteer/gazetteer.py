"""Read-only country -> municipality -> settlement hierarchy."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from geo_search.exceptions import GazetteerLoadError
from geo_search.models.location import Municipality, Settlement

logger = logging.getLogger(__name__)


class Gazetteer:
    """Immutable location hierarchy.

    Iteration follows insertion order (countries, then municipalities, then
    settlements), which makes every scan over it reproducible.

    Parameters
    ----------
    municipalities : Mapping[str, Iterable[Municipality]]
        Country name -> municipalities of that country.
    """

    __slots__ = ("_data",)

    def __init__(self, municipalities: Mapping[str, Any]) -> None:
        self._data: Mapping[str, tuple[Municipality, ...]] = MappingProxyType(
            {country: tuple(items) for country, items in municipalities.items()}
        )

    @classmethod
    def empty(cls) -> Gazetteer:
        return cls({})

    @classmethod
    def from_raw(cls, data: Mapping[str, list[dict[str, Any]]]) -> Gazetteer:
        """Build from nested literals.

        Each municipality is a mapping with ``name``, ``lat``, ``lng``,
        ``settlements`` and optional ``local_names`` (``localNames`` is
        accepted too); settlements carry the same keys minus
        ``settlements``. The input is trusted as-is.
        """
        return cls(
            {
                country: [_municipality_from_raw(raw) for raw in municipalities]
                for country, municipalities in data.items()
            }
        )

    def lookup(self, country: str) -> tuple[Municipality, ...]:
        """Municipalities of ``country``; empty for an unknown country."""
        return self._data.get(country, ())

    def all_municipalities(self) -> Mapping[str, tuple[Municipality, ...]]:
        return self._data

    def countries(self) -> list[str]:
        return list(self._data)

    def iter_municipalities(self) -> Iterator[tuple[str, Municipality]]:
        for country, municipalities in self._data.items():
            for municipality in municipalities:
                yield country, municipality

    def iter_settlements(self) -> Iterator[tuple[str, Municipality, Settlement]]:
        """Yield ``(country, municipality, settlement)`` in natural order."""
        for country, municipality in self.iter_municipalities():
            for settlement in municipality.settlements:
                yield country, municipality, settlement

    def __len__(self) -> int:
        """Total number of settlements."""
        return sum(len(m.settlements) for _, m in self.iter_municipalities())

    def __bool__(self) -> bool:
        return any(self._data.values())

    def __repr__(self) -> str:
        return f"Gazetteer(countries={len(self._data)}, settlements={len(self)})"


def _local_names(raw: Mapping[str, Any]) -> tuple[str, ...]:
    return tuple(raw.get("local_names", raw.get("localNames", ())))


def _municipality_from_raw(raw: Mapping[str, Any]) -> Municipality:
    return Municipality(
        name=raw["name"],
        lat=raw["lat"],
        lng=raw["lng"],
        settlements=tuple(
            Settlement(
                name=s["name"],
                lat=s["lat"],
                lng=s["lng"],
                local_names=_local_names(s),
            )
            for s in raw["settlements"]
        ),
        local_names=_local_names(raw),
    )


def load_gazetteer(path: Path | str) -> Gazetteer:
    """Load a gazetteer from a JSON file holding the nested structure.

    Raises
    ------
    GazetteerLoadError
        If the file cannot be read or is not valid JSON.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise GazetteerLoadError(f"Failed to load gazetteer from {path}: {e}") from e

    gazetteer = Gazetteer.from_raw(data)
    logger.info("Loaded gazetteer from %s: %r", path, gazetteer)
    return gazetteer


@lru_cache(maxsize=1)
def default_gazetteer() -> Gazetteer:
    """The embedded dataset, built once per process."""
    from geo_search.gazetteer.data import MUNICIPALITY_DATA

    gazetteer = Gazetteer.from_raw(MUNICIPALITY_DATA)
    logger.debug("Built embedded gazetteer: %r", gazetteer)
    return gazetteer
