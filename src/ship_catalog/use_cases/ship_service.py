"""Ship catalog use cases."""

from __future__ import annotations

import logging
import re
from dataclasses import replace

from ship_catalog.domain.errors import BadRequestError, NotFoundError
from ship_catalog.domain.rating import rate_ship
from ship_catalog.domain.ship import Paging, Ship, ShipFilters, ShipPayload, ShipType
from ship_catalog.domain.validation import validate_new_ship, validate_ship_changes
from ship_catalog.ports.ship_repository import ShipRepository
from ship_catalog.use_cases.search_ships import CountShips, SearchShips, SearchShipsRequest

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"-?[0-9]+")
# Largest id a store can hold (signed 64-bit)
MAX_SHIP_ID = 2**63 - 1


def parse_ship_id(raw_id: str | None) -> int:
    """
    Parse a ship id from its external string form.

    Raises:
        BadRequestError: If raw_id is empty, not an integer, not positive or
            too large to be a stored id
    """
    if not raw_id:
        raise BadRequestError("Ship id must not be empty", field="id")

    if not _ID_PATTERN.fullmatch(raw_id):
        raise BadRequestError("Ship id must be a number", field="id", value=raw_id)

    ship_id = int(raw_id)
    if ship_id <= 0:
        raise BadRequestError("Ship id must be greater than zero", field="id", value=raw_id)
    if ship_id > MAX_SHIP_ID:
        raise BadRequestError("Ship id is out of range", field="id", value=raw_id)

    return ship_id


class ShipService:
    """
    Orchestrates ship mutations and queries.

    Responsibilities:
    - Parse ship ids before touching the repository
    - Validate payloads before any mutation (a failed validation leaves the store untouched)
    - Recompute rating from the final field values on every create and edit
    - Delegate list/count to SearchShips/CountShips
    """

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._repository = ship_repository
        self._search_ships = SearchShips(ship_repository)
        self._count_ships = CountShips(ship_repository)

    def list_ships(self, filters: ShipFilters, paging: Paging) -> list[Ship]:
        response = self._search_ships.execute(
            SearchShipsRequest(filters=filters, paging=paging)
        )
        return response.ships

    def count_ships(self, filters: ShipFilters) -> int:
        return self._count_ships.execute(filters)

    def get_ship(self, raw_id: str) -> Ship:
        """
        Raises:
            BadRequestError: If raw_id is not a valid ship id
            NotFoundError: If no ship has that id
        """
        return self._get_existing(parse_ship_id(raw_id))

    def create_ship(self, payload: ShipPayload) -> Ship:
        """
        Create a ship from a full payload.

        isUsed defaults to False when omitted or null. The rating is computed
        before the ship reaches the repository.

        Raises:
            ValidationError: If a required field is missing or a value breaks its rule
        """
        validate_new_ship(payload)

        is_used = payload.is_used if payload.is_set("is_used") else None
        ship = Ship(
            id=None,
            name=payload.name,
            planet=payload.planet,
            ship_type=ShipType(payload.ship_type),
            prod_date=payload.prod_date,
            is_used=bool(is_used),
            speed=float(payload.speed),
            crew_size=payload.crew_size,
        )

        saved = self._repository.save(rate_ship(ship))

        logger.info("Ship created", extra={"ship_id": saved.id, "rating": saved.rating})
        return saved

    def edit_ship(self, raw_id: str, payload: ShipPayload) -> Ship:
        """
        Overlay the fields present in payload onto an existing ship.

        Fields the payload omits keep their stored value. The rating is
        recomputed from the merged ship, whichever fields changed.

        Raises:
            BadRequestError: If raw_id is not a valid ship id
            NotFoundError: If no ship has that id
            ValidationError: If a present field is null or breaks its rule
        """
        current = self._get_existing(parse_ship_id(raw_id))

        validate_ship_changes(payload)

        changes = payload.present_fields()
        if "ship_type" in changes:
            changes["ship_type"] = ShipType(changes["ship_type"])
        if "speed" in changes:
            changes["speed"] = float(changes["speed"])

        saved = self._repository.save(rate_ship(replace(current, **changes)))

        logger.info(
            "Ship updated",
            extra={"ship_id": saved.id, "fields": sorted(changes), "rating": saved.rating},
        )
        return saved

    def delete_ship(self, raw_id: str) -> None:
        """
        Raises:
            BadRequestError: If raw_id is not a valid ship id
            NotFoundError: If no ship has that id
        """
        ship_id = parse_ship_id(raw_id)

        if not self._repository.exists_by_id(ship_id):
            raise NotFoundError(resource="Ship", identifier=str(ship_id))

        self._repository.delete(ship_id)

        logger.info("Ship deleted", extra={"ship_id": ship_id})

    def _get_existing(self, ship_id: int) -> Ship:
        ship = self._repository.get_by_id(ship_id)

        if ship is None:
            raise NotFoundError(resource="Ship", identifier=str(ship_id))

        return ship
