from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Any

from ship_catalog.domain.errors import BadRequestError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(BadRequestError):
    """Raised when paging parameters are invalid."""

    pass


class ShipType(str, Enum):
    TRANSPORT = "TRANSPORT"
    MILITARY = "MILITARY"
    MERCHANT = "MERCHANT"


class ShipOrder(str, Enum):
    """Sort keys accepted by list queries, mapped to Ship attribute names."""

    ID = "ID"
    NAME = "NAME"
    PLANET = "PLANET"
    DATE = "DATE"
    SPEED = "SPEED"
    CREW_SIZE = "CREW_SIZE"
    RATING = "RATING"

    @property
    def field_name(self) -> str:
        return _ORDER_FIELDS[self]


_ORDER_FIELDS = {
    ShipOrder.ID: "id",
    ShipOrder.NAME: "name",
    ShipOrder.PLANET: "planet",
    ShipOrder.DATE: "prod_date",
    ShipOrder.SPEED: "speed",
    ShipOrder.CREW_SIZE: "crew_size",
    ShipOrder.RATING: "rating",
}


@dataclass(frozen=True, slots=True)
class Ship:
    id: int | None
    name: str
    planet: str
    ship_type: ShipType
    prod_date: datetime
    is_used: bool
    speed: float
    crew_size: int
    rating: float = 0.0


class _Unset(Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


# Marks a payload field the client did not send (as opposed to an explicit null)
UNSET = _Unset.UNSET


@dataclass(frozen=True, slots=True)
class ShipPayload:
    """
    Client-settable ship fields for create and edit.

    Every field is in one of three states: UNSET (omitted by the client),
    None (explicit null) or a value. id and rating are never part of a payload.
    """

    name: Any = UNSET
    planet: Any = UNSET
    ship_type: Any = UNSET
    prod_date: Any = UNSET
    speed: Any = UNSET
    crew_size: Any = UNSET
    is_used: Any = UNSET

    def is_set(self, field_name: str) -> bool:
        return getattr(self, field_name) is not UNSET

    def present_fields(self) -> dict[str, Any]:
        """Fields the client sent, in declaration order."""
        return {
            field.name: getattr(self, field.name)
            for field in fields(self)
            if self.is_set(field.name)
        }


@dataclass(frozen=True, slots=True)
class ShipFilters:
    name: str | None = None
    planet: str | None = None
    ship_type: ShipType | None = None
    after: datetime | None = None
    before: datetime | None = None
    is_used: bool | None = None
    min_speed: float | None = None
    max_speed: float | None = None
    min_crew_size: int | None = None
    max_crew_size: int | None = None
    min_rating: float | None = None
    max_rating: float | None = None


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = 0
    page_size: int = 3
    order: ShipOrder = ShipOrder.ID

    @property
    def offset(self) -> int:
        return self.page * self.page_size

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page < 0:
            raise PagingValidationError("page must be >= 0")
        if self.page_size <= 0:
            raise PagingValidationError("page_size must be > 0")
