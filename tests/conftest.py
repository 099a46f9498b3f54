"""Pytest configuration and fixtures."""

from typing import Any, Callable

import pytest

from geo_search.gazetteer import Gazetteer
from geo_search.models import Property, Seller

SMALL_GAZETTEER_DATA: dict[str, list[dict[str, Any]]] = {
    "North Macedonia": [
        {
            "name": "Resen",
            "lat": 41.0889,
            "lng": 21.0122,
            "local_names": ["Ресен"],
            "settlements": [
                {"name": "Resen", "lat": 41.0889, "lng": 21.0122, "local_names": ["Ресен"]},
                {"name": "Krani", "lat": 40.9356, "lng": 21.0300, "local_names": ["Крани"]},
            ],
        },
        {
            "name": "Ohrid",
            "lat": 41.1171,
            "lng": 20.8016,
            "settlements": [
                {"name": "Ohrid", "lat": 41.1171, "lng": 20.8016, "localNames": ["Охрид"]},
                {"name": "Peštani", "lat": 41.0127, "lng": 20.8080},
            ],
        },
    ],
    "Serbia": [
        {
            "name": "Belgrade",
            "lat": 44.7872,
            "lng": 20.4573,
            "local_names": ["Београд"],
            "settlements": [
                {"name": "Belgrade", "lat": 44.7872, "lng": 20.4573},
                {"name": "Zemun", "lat": 44.8400, "lng": 20.3700, "local_names": ["Земун"]},
            ],
        },
    ],
}


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def gazetteer_data() -> dict[str, list[dict[str, Any]]]:
    """Nested literals for the small gazetteer."""
    return SMALL_GAZETTEER_DATA


@pytest.fixture
def gazetteer(gazetteer_data) -> Gazetteer:
    """Small deterministic gazetteer."""
    return Gazetteer.from_raw(gazetteer_data)


@pytest.fixture
def make_property() -> Callable[..., Property]:
    """Factory for listings with sensible defaults."""
    counter = {"n": 0}

    def _make(**overrides: Any) -> Property:
        counter["n"] += 1
        values: dict[str, Any] = {
            "property_id": f"prop-test-{counter['n']:03d}",
            "address": "Main Street 1",
            "city": "Skopje",
            "country": "North Macedonia",
            "lat": 41.99,
            "lng": 21.43,
            "price": 100_000,
            "beds": 2,
            "baths": 1,
            "living_rooms": 1,
            "sqft": 80,
            "seller": Seller(type="private"),
            "property_type": "apartment",
        }
        values.update(overrides)
        return Property(**values)

    return _make
