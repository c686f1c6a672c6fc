"""Predicate fragments for ship queries.

Each optional query parameter becomes one fragment, or None when the parameter
is unset. all_of() folds the fragments into a ShipSpecification, skipping None,
so an empty specification matches every ship.

Fragments are plain values: the in-memory store evaluates them with matches(),
the SQL store translates them into WHERE clauses.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Union

from ship_catalog.domain.ship import Ship, ShipFilters, ShipType


@dataclass(frozen=True, slots=True)
class Contains:
    """Case-sensitive, unanchored substring match on a text field."""

    field: str
    value: str

    def matches(self, ship: Ship) -> bool:
        return self.value in getattr(ship, self.field)


@dataclass(frozen=True, slots=True)
class Equals:
    field: str
    value: Any

    def matches(self, ship: Ship) -> bool:
        return getattr(ship, self.field) == self.value


@dataclass(frozen=True, slots=True)
class Between:
    """Inclusive range; a missing bound leaves that side open."""

    field: str
    lower: Any = None
    upper: Any = None

    def matches(self, ship: Ship) -> bool:
        value = getattr(ship, self.field)
        if self.lower is not None and value < self.lower:
            return False
        if self.upper is not None and value > self.upper:
            return False
        return True


Fragment = Union[Contains, Equals, Between]


@dataclass(frozen=True, slots=True)
class ShipSpecification:
    """Conjunction (AND) of predicate fragments."""

    fragments: tuple[Fragment, ...] = ()

    def matches(self, ship: Ship) -> bool:
        return all(fragment.matches(ship) for fragment in self.fragments)


def all_of(*fragments: Fragment | None) -> ShipSpecification:
    return ShipSpecification(
        fragments=tuple(fragment for fragment in fragments if fragment is not None)
    )


# ==============================================================================
# Fragment builders
# ==============================================================================


def name_filter(name: str | None) -> Contains | None:
    if name is None:
        return None
    return Contains("name", name)


def planet_filter(planet: str | None) -> Contains | None:
    if planet is None:
        return None
    return Contains("planet", planet)


def ship_type_filter(ship_type: ShipType | None) -> Equals | None:
    if ship_type is None:
        return None
    return Equals("ship_type", ship_type)


def is_used_filter(is_used: bool | None) -> Equals | None:
    if is_used is None:
        return None
    return Equals("is_used", is_used)


def _range(field: str, lower: Any, upper: Any) -> Between | None:
    if lower is None and upper is None:
        return None
    return Between(field, lower=lower, upper=upper)


def prod_date_filter(after: datetime | None, before: datetime | None) -> Between | None:
    return _range("prod_date", after, before)


def speed_filter(min_speed: float | None, max_speed: float | None) -> Between | None:
    return _range("speed", min_speed, max_speed)


def crew_size_filter(min_crew_size: int | None, max_crew_size: int | None) -> Between | None:
    return _range("crew_size", min_crew_size, max_crew_size)


def rating_filter(min_rating: float | None, max_rating: float | None) -> Between | None:
    return _range("rating", min_rating, max_rating)


def build_specification(filters: ShipFilters) -> ShipSpecification:
    """Compose every filter parameter into a single specification."""
    return all_of(
        name_filter(filters.name),
        planet_filter(filters.planet),
        ship_type_filter(filters.ship_type),
        prod_date_filter(filters.after, filters.before),
        is_used_filter(filters.is_used),
        speed_filter(filters.min_speed, filters.max_speed),
        crew_size_filter(filters.min_crew_size, filters.max_crew_size),
        rating_filter(filters.min_rating, filters.max_rating),
    )
