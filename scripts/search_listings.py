#!/usr/bin/env python3
"""Run a property search over synthetic listings.

Generates listings around gazetteer settlements, applies the filters given
on the command line and prints the ranked results. Handy for checking how
a query, a country or a map area narrows a result set.

Example::

    python scripts/search_listings.py --count 500 --query resen --sort price_asc
    python scripts/search_listings.py --bounds '{"south": 41.9, "west": 21.3, "north": 42.1, "east": 21.6}'
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from geo_search.config import GeoSearchConfig
from geo_search.exceptions import GeoSearchError
from geo_search.generators import ListingGenerator
from geo_search.logging import setup_logging
from geo_search.models import Filters, SortBy, bounds_of
from geo_search.search import SearchEngine, parse_bounds
from geo_search.serialization import to_dict

logger = logging.getLogger("geo_search.scripts.search_listings")


def build_filters(args: argparse.Namespace, default_sort: str) -> Filters:
    """Translate command-line flags into a filter DTO and parse it."""
    return Filters.from_dict(
        {
            "query": args.query,
            "country": args.country,
            "minPrice": args.min_price,
            "maxPrice": args.max_price,
            "beds": args.beds,
            "baths": args.baths,
            "livingRooms": args.living_rooms,
            "minSqft": args.min_sqft,
            "maxSqft": args.max_sqft,
            "sellerType": args.seller_type,
            "propertyType": args.property_type,
            "sortBy": args.sort or default_sort,
        }
    )


def print_table(results: list, limit: int) -> None:
    """Print results as aligned text rows."""
    for prop in results[:limit]:
        print(
            f"{prop.property_id:<22} {prop.price or 0:>10,.0f} "
            f"{prop.beds or 0:>2}bd {prop.baths or 0:>2}ba "
            f"{prop.property_type:<9} {prop.seller.type:<7} {prop.city}, {prop.country}"
        )
    if len(results) > limit:
        print(f"... and {len(results) - limit} more")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Search synthetic property listings")
    parser.add_argument("--count", type=int, default=200, help="Listings to generate (default: 200)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--query", type=str, default="", help="Free-text location query")
    parser.add_argument("--country", type=str, default="any", help="Country key or name, e.g. north-macedonia")
    parser.add_argument("--min-price", type=float, default=None)
    parser.add_argument("--max-price", type=float, default=None)
    parser.add_argument("--beds", type=int, default=None, help="At least N bedrooms")
    parser.add_argument("--baths", type=int, default=None, help="At least N bathrooms")
    parser.add_argument("--living-rooms", type=int, default=None, help="At least N living rooms")
    parser.add_argument("--min-sqft", type=float, default=None)
    parser.add_argument("--max-sqft", type=float, default=None)
    parser.add_argument("--seller-type", choices=["any", "agent", "private"], default="any")
    parser.add_argument(
        "--property-type",
        choices=["any", "house", "apartment", "villa", "other"],
        default="any",
    )
    parser.add_argument("--sort", choices=[s.value for s in SortBy], default=None)
    parser.add_argument("--bounds", type=str, default=None, help="Map viewport as JSON")
    parser.add_argument("--drawn", type=str, default=None, help="Drawn area as JSON")
    parser.add_argument("--limit", type=int, default=20, help="Rows to print (default: 20)")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    args = parser.parse_args()

    try:
        config = GeoSearchConfig.from_env()
    except GeoSearchError as e:
        parser.error(str(e))
    setup_logging(config.log_level, config.log_format, stream=sys.stderr)

    seed = args.seed if args.seed is not None else config.generator.seed
    try:
        engine = SearchEngine(config=config)
        generator = ListingGenerator(
            gazetteer=engine.gazetteer,
            seed=seed,
            locale=config.generator.locale,
            countries=config.generator.countries,
        )
        filters = build_filters(args, config.search.default_sort_by)
    except GeoSearchError as e:
        logger.error("%s", e)
        sys.exit(1)

    listings = generator.generate_batch(args.count)
    results = engine.search(
        listings,
        filters,
        map_bounds=parse_bounds(args.bounds),
        drawn_bounds=parse_bounds(args.drawn),
    )

    logger.info(
        "%d of %d listings matched (%d active filters, form search %s)",
        len(results),
        len(listings),
        filters.active_filter_count,
        "on" if engine.is_form_search_active(filters) else "off",
    )
    center, zoom = engine.map_view(filters)
    logger.info("Map view %.4f, %.4f at zoom %d", center.lat, center.lng, zoom)
    if filters.query:
        target = engine.locate(filters.query)
        if target is not None:
            logger.info("Query names a place at %.4f, %.4f", target.lat, target.lng)

    if args.json:
        print(json.dumps([to_dict(p) for p in results[: args.limit]], indent=2, ensure_ascii=False))
    else:
        print_table(results, args.limit)
        area = bounds_of(results)
        if area is not None:
            print(f"Results span {area.south_west} to {area.north_east}")


if __name__ == "__main__":
    main()
