"""Configuration management for geo-search."""

from dataclasses import dataclass, field
from pathlib import Path

from geo_search.exceptions import ConfigurationError
from geo_search.models.enums import SortBy

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class GazetteerConfig:
    """Where the gazetteer comes from.

    ``path`` set to ``None`` selects the embedded dataset.
    """

    path: Path | None = None


@dataclass
class SearchConfig:
    """Search pipeline defaults."""

    default_sort_by: str = SortBy.NEWEST.value
    match_local_names: bool = True


@dataclass
class GeneratorConfig:
    """Synthetic listing generation settings."""

    seed: int | None = None
    locale: str = "en_US"
    countries: list[str] | None = None


@dataclass
class GeoSearchConfig:
    """Main configuration for geo-search."""

    gazetteer: GazetteerConfig = field(default_factory=GazetteerConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "GeoSearchConfig":
        """Create config from environment variables."""
        import os

        gazetteer_path = os.getenv("GEO_SEARCH_GAZETTEER_PATH")
        gazetteer = GazetteerConfig(path=Path(gazetteer_path) if gazetteer_path else None)

        default_sort_by = os.getenv("GEO_SEARCH_DEFAULT_SORT", SortBy.NEWEST.value)
        if default_sort_by not in {s.value for s in SortBy}:
            raise ConfigurationError(f"Unknown sort strategy: {default_sort_by!r}")

        search = SearchConfig(
            default_sort_by=default_sort_by,
            match_local_names=_parse_bool(
                "GEO_SEARCH_MATCH_LOCAL_NAMES",
                os.getenv("GEO_SEARCH_MATCH_LOCAL_NAMES", "true"),
            ),
        )

        seed_str = os.getenv("GEO_SEARCH_SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as e:
            raise ConfigurationError(f"GEO_SEARCH_SEED must be an integer, got {seed_str!r}") from e

        countries_str = os.getenv("GEO_SEARCH_COUNTRIES")
        countries = (
            [c.strip() for c in countries_str.split(",") if c.strip()] if countries_str else None
        )

        generator = GeneratorConfig(
            seed=seed,
            locale=os.getenv("GEO_SEARCH_LOCALE", "en_US"),
            countries=countries,
        )

        log_format = os.getenv("LOG_FORMAT", "standard")
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"LOG_FORMAT must be 'standard' or 'json', got {log_format!r}")

        return cls(
            gazetteer=gazetteer,
            search=search,
            generator=generator,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")
