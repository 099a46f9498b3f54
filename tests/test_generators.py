"""Tests for synthetic listing generators."""

import pytest

from geo_search.exceptions import ConfigurationError
from geo_search.generators import BaseGenerator, ListingGenerator
from geo_search.models import Filters, PropertyType, SellerType
from geo_search.search import search, split_city


def _stable_fields(prop):
    """Fields that do not depend on the wall clock."""
    return (prop.property_id, prop.address, prop.city, prop.lat, prop.lng, prop.price, prop.seller)


class TestBaseGenerator:
    """Tests for BaseGenerator."""

    def test_seeded_faker(self, seed: int) -> None:
        first = BaseGenerator(seed=seed)
        second = BaseGenerator(seed=seed)

        assert first.fake.name() == second.fake.name()


class TestListingGenerator:
    """Tests for ListingGenerator."""

    def test_generate_listing(self, seed: int, gazetteer) -> None:
        """Test listing generation."""
        prop = ListingGenerator(gazetteer=gazetteer, seed=seed).generate()

        assert prop.property_id.startswith("prop-000001-")
        assert prop.address
        assert prop.country in gazetteer.countries()
        assert 30_000 <= prop.price <= 500_000
        assert prop.price % 1000 == 0
        assert 1 <= prop.beds <= 5
        assert 1 <= prop.baths <= 3
        assert prop.seller.type in [s.value for s in SellerType]
        assert prop.seller.name
        assert prop.property_type in [p.value for p in PropertyType]
        assert prop.created_at is not None

    def test_city_and_coordinates_follow_gazetteer(self, seed: int, gazetteer) -> None:
        gen = ListingGenerator(gazetteer=gazetteer, seed=seed)
        places = {
            (settlement.name, municipality.name): settlement
            for _, municipality, settlement in gazetteer.iter_settlements()
        }

        for prop in gen.generate_batch(20):
            settlement_name, municipality_name = split_city(prop.city)
            settlement = places[(settlement_name, municipality_name or settlement_name)]
            assert abs(prop.lat - settlement.lat) <= ListingGenerator.JITTER_DEGREES + 1e-6
            assert abs(prop.lng - settlement.lng) <= ListingGenerator.JITTER_DEGREES + 1e-6

    def test_renewal_not_before_creation(self, seed: int, gazetteer) -> None:
        for prop in ListingGenerator(gazetteer=gazetteer, seed=seed).generate_batch(30):
            if prop.last_renewed is not None:
                assert prop.last_renewed >= prop.created_at

    def test_deterministic_with_seed(self, seed: int, gazetteer) -> None:
        first = ListingGenerator(gazetteer=gazetteer, seed=seed).generate_batch(5)
        second = ListingGenerator(gazetteer=gazetteer, seed=seed).generate_batch(5)

        assert [_stable_fields(p) for p in first] == [_stable_fields(p) for p in second]

    def test_unique_ids(self, seed: int, gazetteer) -> None:
        props = ListingGenerator(gazetteer=gazetteer, seed=seed).generate_batch(25)
        assert len({p.property_id for p in props}) == 25

    def test_iter_listings_is_lazy(self, seed: int, gazetteer) -> None:
        listings = ListingGenerator(gazetteer=gazetteer, seed=seed).iter_listings(3)
        assert next(listings).property_id.startswith("prop-000001-")
        assert len(list(listings)) == 2

    def test_countries_filter(self, seed: int, gazetteer) -> None:
        gen = ListingGenerator(gazetteer=gazetteer, seed=seed, countries=["Serbia"])
        assert {p.country for p in gen.generate_batch(10)} == {"Serbia"}

    def test_unknown_countries(self, gazetteer) -> None:
        with pytest.raises(ConfigurationError):
            ListingGenerator(gazetteer=gazetteer, countries=["Atlantis"])

    def test_default_gazetteer(self, seed: int) -> None:
        prop = ListingGenerator(seed=seed).generate()
        assert prop.city

    def test_generated_listings_are_searchable(self, seed: int, gazetteer) -> None:
        """Every listing placed in Krani is found by a Krani query."""
        props = ListingGenerator(gazetteer=gazetteer, seed=seed).generate_batch(40)
        in_krani = [p for p in props if p.city == "Krani, Resen"]

        result = search(props, Filters(query="Krani", sort_by=""), gazetteer=gazetteer)

        assert result == in_krani
