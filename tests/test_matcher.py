"""Tests for free-text location matching."""

import pytest

from geo_search.gazetteer import Gazetteer
from geo_search.search.matcher import (
    CITY_DELIMITER,
    format_city,
    locate,
    matches,
    normalize_query,
    split_city,
)


class TestCityFormat:
    """Tests for the city string convention helpers."""

    def test_delimiter(self) -> None:
        assert CITY_DELIMITER == ", "

    def test_format_city(self) -> None:
        assert format_city("Krani", "Resen") == "Krani, Resen"

    def test_format_city_seat_collapses(self) -> None:
        """A seat named like its municipality is written once."""
        assert format_city("Resen", "Resen") == "Resen"

    def test_split_city(self) -> None:
        assert split_city("Krani, Resen") == ("Krani", "Resen")

    def test_split_city_without_delimiter(self) -> None:
        assert split_city("Skopje") == ("Skopje", None)

    def test_split_city_tolerates_missing_space(self) -> None:
        assert split_city("Krani,Resen") == ("Krani", "Resen")

    def test_normalize_query(self) -> None:
        assert normalize_query("  ReSeN ") == "resen"
        assert normalize_query(None) == ""


class TestDirectFields:
    """Rules 1-3: blank query, address, city and country substrings."""

    @pytest.mark.parametrize("query", ["", "   ", None])
    def test_blank_query_matches(self, make_property, query) -> None:
        assert matches(query, make_property(), None) is True

    def test_address_match_case_insensitive(self, make_property) -> None:
        prop = make_property(address="Bulevar Partizanski Odredi 12")
        assert matches("partizanski", prop, None) is True

    def test_caseless_match_beyond_lowercase(self, make_property) -> None:
        """Case folding equates spellings that lowercasing keeps apart."""
        prop = make_property(address="Hauptstraße 5")
        assert matches("STRASSE", prop, None) is True

    def test_greek_final_sigma(self, make_property) -> None:
        prop = make_property(address="Λεωφόρος Νίκης 4", city="Thessaloniki", country="Greece")
        assert matches("ΝΊΚΗΣ", prop, None) is True

    def test_city_match(self, make_property) -> None:
        prop = make_property(city="Krani, Resen")
        assert matches("  KRANI ", prop, None) is True

    def test_country_match(self, make_property) -> None:
        prop = make_property(country="Montenegro")
        assert matches("montenegro", prop, None) is True

    def test_no_match_without_gazetteer(self, make_property) -> None:
        prop = make_property(city="Skopje")
        assert matches("ohrid", prop, None) is False

    def test_empty_gazetteer_adds_nothing(self, make_property) -> None:
        prop = make_property(city="Skopje")
        assert matches("ohrid", prop, Gazetteer.empty()) is False


class TestSettlementAnchorRule:
    """Rule 4: municipality may appear anywhere, settlement must lead."""

    def test_settlement_query_matches_anchored_city_only(self, make_property, gazetteer) -> None:
        a = make_property(city="Krani, Resen")
        b = make_property(city="Resen, North Macedonia")

        assert matches("Krani", a, gazetteer) is True
        assert matches("Krani", b, gazetteer) is False

    def test_municipality_query_matches_both(self, make_property, gazetteer) -> None:
        a = make_property(city="Krani, Resen")
        b = make_property(city="Resen, North Macedonia")

        assert matches("Resen", a, gazetteer) is True
        assert matches("Resen", b, gazetteer) is True

    def test_partial_municipality_query(self, make_property, gazetteer) -> None:
        """A query fragment of a municipality name matches via the gazetteer."""
        prop = make_property(city="Centar, Belgrade", address="Knez Mihailova 5")
        assert matches("belgr", prop, gazetteer) is True

    def test_partial_settlement_query_requires_prefix(self, make_property, gazetteer) -> None:
        anchored = make_property(city="Zemun, Belgrade")
        elsewhere = make_property(city="Novi Beograd, Belgrade")

        assert matches("zemu", anchored, gazetteer) is True
        assert matches("zemu", elsewhere, gazetteer) is False


class TestLocalNames:
    """Alternate spellings take part in the gazetteer rule."""

    def test_cyrillic_query_matches_latin_city(self, make_property, gazetteer) -> None:
        prop = make_property(city="Krani, Resen")
        assert matches("Крани", prop, gazetteer) is True

    def test_cyrillic_municipality_query(self, make_property, gazetteer) -> None:
        prop = make_property(city="Zemun, Belgrade")
        assert matches("Београд", prop, gazetteer) is True

    def test_latin_query_matches_cyrillic_city(self, make_property, gazetteer) -> None:
        prop = make_property(city="Охрид", country="Северна Македонија")
        assert matches("ohrid", prop, gazetteer) is True

    def test_local_names_can_be_disabled(self, make_property, gazetteer) -> None:
        prop = make_property(city="Krani, Resen")
        assert matches("Крани", prop, gazetteer, match_local_names=False) is False


class TestLocate:
    """Tests for exact place lookup."""

    def test_municipality(self, gazetteer) -> None:
        point = locate("resen", gazetteer)
        assert point is not None
        assert (point.lat, point.lng) == (41.0889, 21.0122)

    def test_settlement(self, gazetteer) -> None:
        point = locate("Krani", gazetteer)
        assert point is not None
        assert (point.lat, point.lng) == (40.9356, 21.0300)

    def test_full_name(self, gazetteer) -> None:
        point = locate("Zemun, Belgrade", gazetteer)
        assert point is not None
        assert point.lat == 44.84

    def test_local_name(self, gazetteer) -> None:
        point = locate("Охрид", gazetteer)
        assert point is not None
        assert point.lng == 20.8016

    def test_partial_name_is_not_a_location(self, gazetteer) -> None:
        assert locate("Kran", gazetteer) is None

    def test_blank_or_missing_gazetteer(self, gazetteer) -> None:
        assert locate("  ", gazetteer) is None
        assert locate("Resen", None) is None
