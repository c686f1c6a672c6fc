from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from ship_catalog.domain.ship import Paging, Ship
from ship_catalog.domain.specification import ShipSpecification
from ship_catalog.ports.ship_repository import ShipRepository


class InMemoryShipRepository(ShipRepository):
    """
    Canonical contract implementation for tests.

    - Assigns ids from an increasing counter, starting after the largest seeded id
    - Applies AND-semantics filtering through ShipSpecification.matches
    - Sorts by the requested field, then by id
    - Applies paging AFTER filtering and sorting
    """

    def __init__(self, ships: Iterable[Ship] = ()) -> None:
        self._ships: dict[int, Ship] = {}
        self._next_id = 1
        for ship in ships:
            self.save(ship)

    def get_by_id(self, ship_id: int) -> Ship | None:
        return self._ships.get(ship_id)

    def exists_by_id(self, ship_id: int) -> bool:
        return ship_id in self._ships

    def save(self, ship: Ship) -> Ship:
        if ship.id is None:
            ship = replace(ship, id=self._next_id)
        self._ships[ship.id] = ship
        self._next_id = max(self._next_id, ship.id + 1)
        return ship

    def delete(self, ship_id: int) -> None:
        self._ships.pop(ship_id, None)

    def search(self, specification: ShipSpecification, paging: Paging) -> list[Ship]:
        # Trust that UseCase has validated inputs (contract programming)
        field_name = paging.order.field_name
        matches = sorted(
            self._matching(specification),
            key=lambda ship: (getattr(ship, field_name), ship.id),
        )

        start = paging.offset
        end = paging.offset + paging.page_size

        return matches[start:end]

    def count(self, specification: ShipSpecification) -> int:
        return len(self._matching(specification))

    def _matching(self, specification: ShipSpecification) -> list[Ship]:
        return [ship for ship in self._ships.values() if specification.matches(ship)]
