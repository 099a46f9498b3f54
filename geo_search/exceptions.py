"""Custom exception hierarchy for geo-search."""


class GeoSearchError(Exception):
    """Base exception for all geo-search errors."""


class ConfigurationError(GeoSearchError):
    """Raised when configuration is invalid or missing."""


class GazetteerLoadError(GeoSearchError):
    """Raised when an external gazetteer file cannot be read or decoded."""


class InvalidFiltersError(GeoSearchError):
    """Raised when a filter payload holds an unparseable or unknown value."""


class InvalidListingError(GeoSearchError):
    """Raised when a listing payload is missing required fields."""
