"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Only stateless singletons should use lru_cache.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from ship_catalog.adapters.postgres_ship_repository import PostgresShipRepository
from ship_catalog.infra.db.session import get_session
from ship_catalog.ports.ship_repository import ShipRepository
from ship_catalog.use_cases.ship_service import ShipService


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() is a context manager that handles:
    - Session creation
    - Auto-commit on success
    - Auto-rollback on exception
    - Session cleanup

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_ship_repository(db: Session = Depends(get_db)) -> ShipRepository:
    return PostgresShipRepository(session=db)


def get_ship_service(
    repository: ShipRepository = Depends(get_ship_repository),
) -> ShipService:
    """
    Factory function that returns a ShipService bound to this request's session.

    Args:
        repository: Ship repository (injected by FastAPI)

    Returns:
        ShipService: Configured service instance
    """
    return ShipService(ship_repository=repository)
