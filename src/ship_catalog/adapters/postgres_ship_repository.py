"""PostgreSQL implementation of ShipRepository."""

from __future__ import annotations

from datetime import timezone
from typing import TYPE_CHECKING

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from ship_catalog.domain.ship import Paging, Ship
from ship_catalog.domain.specification import (
    Between,
    Contains,
    Equals,
    Fragment,
    ShipSpecification,
)
from ship_catalog.infra.db.models.ship import ShipRow
from ship_catalog.ports.ship_repository import ShipRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import ColumnElement, Select


class PostgresShipRepository(ShipRepository):
    """
    PostgreSQL implementation of ShipRepository.

    - Uses SQLAlchemy ORM for database access
    - Translates specification fragments into SQL WHERE clauses
    - Orders by the requested column, then by id, before OFFSET/LIMIT
    - Converts ShipRow (infrastructure) to Ship (domain)

    Writes are flushed, not committed: the session owner commits once per request.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def get_by_id(self, ship_id: int) -> Ship | None:
        row = self._session.get(ShipRow, ship_id)
        return self._to_domain(row) if row else None

    def exists_by_id(self, ship_id: int) -> bool:
        query = select(ShipRow.id).where(ShipRow.id == ship_id)
        return self._session.execute(query).scalar_one_or_none() is not None

    def save(self, ship: Ship) -> Ship:
        """
        Insert a new ship or overwrite an existing one.

        The flush makes the database assign the id of a new row, so the returned
        ship always carries its id.
        """
        row = self._session.get(ShipRow, ship.id) if ship.id is not None else None
        if row is None:
            row = ShipRow(id=ship.id)
            self._session.add(row)

        row.name = ship.name
        row.planet = ship.planet
        row.ship_type = ship.ship_type
        row.prod_date = ship.prod_date
        row.is_used = ship.is_used
        row.speed = ship.speed
        row.crew_size = ship.crew_size
        row.rating = ship.rating

        self._session.flush()

        return self._to_domain(row)

    def delete(self, ship_id: int) -> None:
        self._session.execute(delete(ShipRow).where(ShipRow.id == ship_id))

    def search(self, specification: ShipSpecification, paging: Paging) -> list[Ship]:
        """
        Return one sorted page of matching ships.

        Args:
            specification: Filter criteria (AND semantics) - must be pre-validated
            paging: Page index, page size and sort key - must be pre-validated

        Returns:
            Ships of the requested page, possibly empty
        """
        order_column = getattr(ShipRow, paging.order.field_name)

        query = (
            self._build_query(specification)
            .order_by(order_column.asc(), ShipRow.id.asc())
            .offset(paging.offset)
            .limit(paging.page_size)
        )

        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def count(self, specification: ShipSpecification) -> int:
        query = self._build_query(specification)
        count_query = select(func.count()).select_from(query.subquery())
        return self._session.execute(count_query).scalar() or 0

    def _build_query(self, specification: ShipSpecification) -> Select[tuple[ShipRow]]:
        """
        Build SQLAlchemy query with every fragment applied as a WHERE clause.

        Args:
            specification: Fragments to apply

        Returns:
            SQLAlchemy select statement
        """
        query = select(ShipRow)

        for fragment in specification.fragments:
            query = query.where(self._to_clause(fragment))

        return query

    def _to_clause(self, fragment: Fragment) -> ColumnElement[bool]:
        column = getattr(ShipRow, fragment.field)

        # LIKE is case-sensitive in PostgreSQL; autoescape keeps % and _ literal
        if isinstance(fragment, Contains):
            return column.contains(fragment.value, autoescape=True)

        if isinstance(fragment, Equals):
            return column == fragment.value

        if isinstance(fragment, Between):
            # Range filters (inclusive)
            if fragment.lower is not None and fragment.upper is not None:
                return column.between(fragment.lower, fragment.upper)
            if fragment.lower is not None:
                return column >= fragment.lower
            return column <= fragment.upper

        raise TypeError(f"Unsupported fragment: {fragment!r}")

    def _to_domain(self, row: ShipRow) -> Ship:
        """
        Convert database model (ShipRow) to domain entity (Ship).

        Args:
            row: SQLAlchemy ShipRow model

        Returns:
            Ship domain entity
        """
        prod_date = row.prod_date
        # Backends without time zone support hand back naive UTC values
        if prod_date.tzinfo is None:
            prod_date = prod_date.replace(tzinfo=timezone.utc)

        return Ship(
            id=row.id,
            name=row.name,
            planet=row.planet,
            ship_type=row.ship_type,
            prod_date=prod_date,
            is_used=row.is_used,
            speed=row.speed,
            crew_size=row.crew_size,
            rating=row.rating,
        )
