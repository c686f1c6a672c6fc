from __future__ import annotations

from dataclasses import dataclass

from ship_catalog.domain.ship import Paging, Ship, ShipFilters
from ship_catalog.domain.specification import build_specification
from ship_catalog.ports.ship_repository import ShipRepository


@dataclass(frozen=True, slots=True)
class SearchShipsRequest:
    filters: ShipFilters
    paging: Paging


@dataclass(frozen=True, slots=True)
class SearchShipsResponse:
    ships: list[Ship]


class SearchShips:
    """
    Ship search with filters, sorting and pagination.

    Validates paging, composes the filters into a single specification
    and lets the repository evaluate it. No filtering logic lives here;
    a range whose lower bound exceeds its upper bound simply matches nothing.
    """

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._repository = ship_repository

    def execute(self, request: SearchShipsRequest) -> SearchShipsResponse:
        """
        Execute ship search.

        Args:
            request: Search parameters (filters and paging)

        Returns:
            Response containing the ships of the requested page

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        # Validate paging (UseCase responsibility per contract)
        request.paging.validate()

        ships = self._repository.search(
            specification=build_specification(request.filters),
            paging=request.paging,
        )

        return SearchShipsResponse(ships=ships)


class CountShips:
    """Count ships matching the same filters SearchShips accepts."""

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._repository = ship_repository

    def execute(self, filters: ShipFilters) -> int:
        return self._repository.count(build_specification(filters))
