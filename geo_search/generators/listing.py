"""Listing generator scattering properties around gazetteer settlements."""

from __future__ import annotations

from datetime import datetime
from typing import Iterator

from geo_search.exceptions import ConfigurationError
from geo_search.gazetteer.gazetteer import Gazetteer, default_gazetteer
from geo_search.generators.base import BaseGenerator
from geo_search.models.enums import PropertyType, SellerType
from geo_search.models.listing import Property, Seller
from geo_search.models.location import Municipality, Settlement
from geo_search.search.matcher import format_city


class ListingGenerator(BaseGenerator):
    """Generate synthetic listings located in real settlements.

    Each listing sits within roughly 2 km of a randomly chosen settlement
    and carries a city string in the ``"Settlement, Municipality"``
    convention, so generated data exercises the gazetteer matcher.

    Parameters
    ----------
    gazetteer : Gazetteer | None
        Source of settlements. Defaults to the embedded dataset.
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale for street and seller names.
    countries : list[str] | None
        Restrict generation to these countries.
    """

    PRICE_RANGE = (30_000, 500_000)
    JITTER_DEGREES = 0.02
    RENEWAL_RATE = 0.4

    def __init__(
        self,
        gazetteer: Gazetteer | None = None,
        seed: int | None = None,
        locale: str = "en_US",
        countries: list[str] | None = None,
    ) -> None:
        super().__init__(seed=seed, locale=locale)
        gazetteer = gazetteer if gazetteer is not None else default_gazetteer()

        self._places: list[tuple[str, Municipality, Settlement]] = [
            place
            for place in gazetteer.iter_settlements()
            if countries is None or place[0] in countries
        ]
        if not self._places:
            raise ConfigurationError(f"No settlements available for countries {countries!r}")
        self._counter = 0

    def generate(self) -> Property:
        """Generate one listing.

        Returns
        -------
        Property
            Generated listing.
        """
        fake = self.fake
        country, municipality, settlement = fake.random.choice(self._places)
        self._counter += 1

        price = round(fake.random_int(*self.PRICE_RANGE) / 1000) * 1000
        created = fake.date_time_between(start_date="-1y", end_date="now")
        last_renewed = None
        if fake.random.random() < self.RENEWAL_RATE:
            last_renewed = _millis(fake.date_time_between(start_date=created, end_date="now"))

        seller_type = fake.random_element([s.value for s in SellerType])
        return Property(
            property_id=f"prop-{self._counter:06d}-{fake.hexify('^^^^^^')}",
            address=f"{fake.street_name()} {fake.building_number()}",
            city=format_city(settlement.name, municipality.name),
            country=country,
            lat=round(settlement.lat + fake.random.uniform(-1, 1) * self.JITTER_DEGREES, 6),
            lng=round(settlement.lng + fake.random.uniform(-1, 1) * self.JITTER_DEGREES, 6),
            price=price,
            beds=fake.random_int(1, 5),
            baths=fake.random_int(1, 3),
            living_rooms=fake.random_int(1, 2),
            sqft=fake.random_int(35, 350),
            seller=Seller(
                type=seller_type,
                name=fake.company() if seller_type == SellerType.AGENT.value else fake.name(),
            ),
            property_type=fake.random_element([p.value for p in PropertyType]),
            created_at=_millis(created),
            last_renewed=last_renewed,
        )

    def generate_batch(self, count: int) -> list[Property]:
        return list(self.iter_listings(count))

    def iter_listings(self, count: int) -> Iterator[Property]:
        for _ in range(count):
            yield self.generate()


def _millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)
