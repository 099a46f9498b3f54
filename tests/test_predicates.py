"""Tests for the filter predicate engine."""

import pytest

from geo_search.models import Filters, Seller
from geo_search.search.predicates import (
    filter_properties,
    is_form_search_active,
    matches_filters,
)


class TestNumericFilters:
    """Range and floor filters."""

    def test_max_price_inclusive(self, make_property) -> None:
        at_limit = make_property(price=200_000)
        over_limit = make_property(price=200_001)
        filters = Filters(max_price=200_000)

        assert filter_properties([at_limit, over_limit], filters, None) == [at_limit]

    def test_min_price_inclusive(self, make_property) -> None:
        at_limit = make_property(price=150_000)
        under_limit = make_property(price=149_999)
        filters = Filters(min_price=150_000)

        assert filter_properties([at_limit, under_limit], filters, None) == [at_limit]

    def test_null_means_unconstrained(self, make_property) -> None:
        """Dropping a constraint never shrinks the result set."""
        props = [make_property(price=p) for p in (50_000, 100_000, 250_000)]
        constrained = filter_properties(props, Filters(min_price=100_000), None)
        relaxed = filter_properties(props, Filters(min_price=None), None)

        assert set(p.property_id for p in constrained) <= set(p.property_id for p in relaxed)
        assert len(relaxed) == 3
        assert len(constrained) == 2

    def test_zero_is_a_real_constraint(self, make_property) -> None:
        """max_price=0 is not the same as no maximum."""
        free = make_property(price=0)
        priced = make_property(price=10)

        assert filter_properties([free, priced], Filters(max_price=0), None) == [free]

    @pytest.mark.parametrize(
        "field, filter_field",
        [("beds", "beds"), ("baths", "baths"), ("living_rooms", "living_rooms")],
    )
    def test_room_counts_are_floors(self, make_property, field, filter_field) -> None:
        one = make_property(**{field: 1})
        two = make_property(**{field: 2})
        three = make_property(**{field: 3})
        filters = Filters(**{filter_field: 2})

        assert filter_properties([one, two, three], filters, None) == [two, three]

    def test_sqft_range(self, make_property) -> None:
        small = make_property(sqft=40)
        medium = make_property(sqft=80)
        large = make_property(sqft=120)
        filters = Filters(min_sqft=80, max_sqft=120)

        assert filter_properties([small, medium, large], filters, None) == [medium, large]

    def test_missing_number_reads_as_zero(self, make_property) -> None:
        """A listing without beds fails a beds>=1 filter but passes max_price."""
        no_beds = make_property(beds=None, price=None)

        assert matches_filters(no_beds, Filters(beds=1), None) is False
        assert matches_filters(no_beds, Filters(max_price=100), None) is True
        assert matches_filters(no_beds, Filters(min_price=1), None) is False


class TestCategoricalFilters:
    """Seller and property type filters."""

    def test_seller_type(self, make_property) -> None:
        agent = make_property(seller=Seller(type="agent", name="Prespa Homes"))
        private = make_property(seller=Seller(type="private"))

        assert filter_properties([agent, private], Filters(seller_type="agent"), None) == [agent]
        assert filter_properties([agent, private], Filters(seller_type="any"), None) == [
            agent,
            private,
        ]

    def test_property_type(self, make_property) -> None:
        villa = make_property(property_type="villa")
        house = make_property(property_type="house")

        assert filter_properties([villa, house], Filters(property_type="house"), None) == [house]


class TestCombinedFilters:
    """Text and numeric filters combine with AND."""

    def test_query_and_price(self, make_property, gazetteer) -> None:
        cheap_krani = make_property(city="Krani, Resen", price=90_000)
        pricey_krani = make_property(city="Krani, Resen", price=400_000)
        cheap_skopje = make_property(city="Skopje", price=90_000)
        filters = Filters(query="Krani", max_price=100_000)

        result = filter_properties([cheap_krani, pricey_krani, cheap_skopje], filters, gazetteer)

        assert result == [cheap_krani]

    def test_preserves_input_order(self, make_property) -> None:
        props = [make_property(price=p) for p in (3, 1, 2)]
        assert filter_properties(props, Filters(), None) == props

    def test_does_not_mutate_input(self, make_property) -> None:
        props = [make_property(price=p) for p in (3, 1, 2)]
        snapshot = list(props)
        filter_properties(props, Filters(max_price=1), None)
        assert props == snapshot


class TestIsFormSearchActive:
    """Tests for is_form_search_active."""

    def test_default_filters_inactive(self) -> None:
        assert is_form_search_active(Filters()) is False

    def test_blank_query_inactive(self) -> None:
        assert is_form_search_active(Filters(query="   ")) is False

    @pytest.mark.parametrize(
        "overrides",
        [
            {"query": "ohrid"},
            {"min_price": 0},
            {"max_price": 100},
            {"beds": 1},
            {"baths": 1},
            {"living_rooms": 1},
            {"min_sqft": 10},
            {"max_sqft": 10},
            {"seller_type": "agent"},
            {"property_type": "villa"},
        ],
    )
    def test_any_constraint_activates(self, overrides) -> None:
        assert is_form_search_active(Filters(**overrides)) is True

    def test_country_and_sort_do_not_activate(self) -> None:
        assert is_form_search_active(Filters(country="serbia", sort_by="price_asc")) is False
