"""Synthetic listing generators for demos and tests."""

from geo_search.generators.base import BaseGenerator
from geo_search.generators.listing import ListingGenerator

__all__ = ["BaseGenerator", "ListingGenerator"]
