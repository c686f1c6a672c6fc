"""Shared ship fixtures.

The catalog below is used by the repository and use case suites. Ids are
assigned 1..5 in list order; ratings are precomputed with the rating formula.

    id  name          planet       type       prod year  used  speed  crew  rating
    1   Eagle One     Mars         TRANSPORT  3000       no    0.5    10    2.0
    2   Black Eagle   Earth        MILITARY   2990       yes   0.9    500   1.2
    3   Falcon        Jupiter      MERCHANT   3010       no    0.2    3     1.6
    4   eagle scout   Mars Colony  TRANSPORT  2850       no    0.75   40    0.35
    5   Nebula        Venus        MILITARY   3019       yes   0.3    9999  12.0
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from ship_catalog.domain.ship import Ship, ShipType


def utc(year: int, month: int = 1, day: int = 1) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


@pytest.fixture()
def ships() -> list[Ship]:
    return [
        Ship(
            id=None,
            name="Eagle One",
            planet="Mars",
            ship_type=ShipType.TRANSPORT,
            prod_date=utc(3000, 1, 1),
            is_used=False,
            speed=0.5,
            crew_size=10,
            rating=2.0,
        ),
        Ship(
            id=None,
            name="Black Eagle",
            planet="Earth",
            ship_type=ShipType.MILITARY,
            prod_date=utc(2990, 6, 15),
            is_used=True,
            speed=0.9,
            crew_size=500,
            rating=1.2,
        ),
        Ship(
            id=None,
            name="Falcon",
            planet="Jupiter",
            ship_type=ShipType.MERCHANT,
            prod_date=utc(3010, 3, 3),
            is_used=False,
            speed=0.2,
            crew_size=3,
            rating=1.6,
        ),
        Ship(
            id=None,
            name="eagle scout",
            planet="Mars Colony",
            ship_type=ShipType.TRANSPORT,
            prod_date=utc(2850, 12, 31),
            is_used=False,
            speed=0.75,
            crew_size=40,
            rating=0.35,
        ),
        Ship(
            id=None,
            name="Nebula",
            planet="Venus",
            ship_type=ShipType.MILITARY,
            prod_date=utc(3019, 1, 1),
            is_used=True,
            speed=0.3,
            crew_size=9999,
            rating=12.0,
        ),
    ]
