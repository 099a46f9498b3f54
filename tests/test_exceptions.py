"""Tests for custom exception hierarchy."""

from geo_search.exceptions import (
    ConfigurationError,
    GazetteerLoadError,
    GeoSearchError,
    InvalidFiltersError,
    InvalidListingError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_geo_search_error_is_exception(self) -> None:
        assert isinstance(GeoSearchError("test"), Exception)

    def test_configuration_error_is_geo_search_error(self) -> None:
        assert isinstance(ConfigurationError("test"), GeoSearchError)

    def test_gazetteer_load_error_is_geo_search_error(self) -> None:
        assert isinstance(GazetteerLoadError("test"), GeoSearchError)

    def test_invalid_filters_is_geo_search_error(self) -> None:
        assert isinstance(InvalidFiltersError("test"), GeoSearchError)

    def test_invalid_listing_is_geo_search_error(self) -> None:
        assert isinstance(InvalidListingError("test"), GeoSearchError)

    def test_exception_message(self) -> None:
        err = InvalidFiltersError("Unknown seller type: 'bank'")
        assert str(err) == "Unknown seller type: 'bank'"
