from __future__ import annotations

from abc import ABC, abstractmethod

from ship_catalog.domain.ship import Paging, Ship
from ship_catalog.domain.specification import ShipSpecification


class ShipRepository(ABC):
    """
    Port for ship storage.

    The store owns id assignment and physical storage; validation and rating
    belong to the caller.

    Contract (Preconditions):
        - specification and paging must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
        - search and count evaluate the same specification, so count equals the
          number of ships reachable by walking every page of search
    """

    @abstractmethod
    def get_by_id(self, ship_id: int) -> Ship | None:
        """Return the ship with ship_id, or None if it does not exist."""
        ...

    @abstractmethod
    def exists_by_id(self, ship_id: int) -> bool: ...

    @abstractmethod
    def save(self, ship: Ship) -> Ship:
        """
        Insert or update a ship.

        A ship with id None is inserted and returned with the id the store
        assigned. A ship with an id replaces the stored record.
        """
        ...

    @abstractmethod
    def delete(self, ship_id: int) -> None: ...

    @abstractmethod
    def search(self, specification: ShipSpecification, paging: Paging) -> list[Ship]:
        """
        Return one page of ships matching specification.

        Ships are sorted ascending by paging.order, ties broken by id ascending.
        A page past the end of the result set is empty.
        """
        ...

    @abstractmethod
    def count(self, specification: ShipSpecification) -> int:
        """Return the number of ships matching specification."""
        ...
