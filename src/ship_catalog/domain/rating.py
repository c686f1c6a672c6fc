from __future__ import annotations

from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal

from ship_catalog.domain.ship import Ship

# Fixed "current year" of the simulated universe, not wall-clock time
CURRENT_YEAR = 3019
SPEED_FACTOR = Decimal("80")
USED_SHIP_FACTOR = Decimal("0.5")
NEW_SHIP_FACTOR = Decimal("1")


def calculate_rating(speed: float, prod_year: int, is_used: bool) -> float:
    """
    Rating = 80 * speed * k / (CURRENT_YEAR - prod_year + 1), k = 0.5 for used ships.

    Rounding policy:
    - speed enters as its shortest decimal form (0.1 is Decimal("0.1"), not the binary double)
    - The quotient keeps full Decimal precision
    - The result is rounded to 2 decimal places using ROUND_HALF_UP
    """
    k = USED_SHIP_FACTOR if is_used else NEW_SHIP_FACTOR
    age = Decimal(CURRENT_YEAR - prod_year + 1)

    precise = SPEED_FACTOR * Decimal(str(speed)) * k / age

    return float(precise.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def rate_ship(ship: Ship) -> Ship:
    """Return a copy of ship with its rating recomputed from speed, prod_date and is_used."""
    return replace(
        ship,
        rating=calculate_rating(ship.speed, ship.prod_date.year, ship.is_used),
    )
