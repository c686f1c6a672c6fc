#!/usr/bin/env python3
"""
Seed the ships table with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Goes through ShipService, so every ship is validated and rated like an API create

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_ships.py
"""

from __future__ import annotations

import random
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy import delete

from ship_catalog.adapters.postgres_ship_repository import PostgresShipRepository
from ship_catalog.domain.ship import ShipPayload, ShipType
from ship_catalog.infra.db.models.ship import ShipRow
from ship_catalog.infra.db.session import create_schema, get_session
from ship_catalog.use_cases.ship_service import ShipService


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_SHIPS = 40  # Number of ships to generate


# ==============================================================================
# Catalog Data
# ==============================================================================

NAME_PREFIXES = ["Orion", "Eagle", "Falcon", "Nebula", "Comet", "Aurora", "Vega", "Titan"]
NAME_SUFFIXES = ["I", "II", "III", "Prime", "Express", "Star", "Runner", "Hawk"]

PLANETS = ["Earth", "Mars", "Jupiter", "Saturn", "Neptune", "Venus", "Mercury", "Pluto"]

# Military ships carry bigger crews
CREW_SIZE_BY_TYPE = {
    ShipType.TRANSPORT: (1, 500),
    ShipType.MILITARY: (100, 9999),
    ShipType.MERCHANT: (1, 200),
}


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_payload() -> ShipPayload:
    """Generate a single random, valid ship payload."""
    ship_type = random.choice(list(ShipType))
    crew_min, crew_max = CREW_SIZE_BY_TYPE[ship_type]

    # Year: 2800-3019 (weighted toward newer)
    year = random.choices(
        range(2800, 3020),
        weights=[1 if y < 2950 else 3 for y in range(2800, 3020)],
        k=1,
    )[0]
    prod_date = datetime(
        year,
        random.randint(1, 12),
        random.randint(1, 28),
        tzinfo=timezone.utc,
    )

    return ShipPayload(
        name=f"{random.choice(NAME_PREFIXES)} {random.choice(NAME_SUFFIXES)}",
        planet=random.choice(PLANETS),
        ship_type=ship_type,
        prod_date=prod_date,
        speed=round(random.uniform(0.01, 0.99), 2),
        crew_size=random.randint(crew_min, crew_max),
        is_used=random.random() < 0.4,
    )


def seed_ships(num_ships: int = NUM_SHIPS, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with random ships.

    Args:
        num_ships: Number of ships to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"Seeding database with {num_ships} ships (seed={seed})...")
    create_schema()

    with get_session() as session:
        # Step 1: Clear existing data (idempotent)
        deleted = session.execute(delete(ShipRow)).rowcount
        print(f"   Deleted {deleted} existing ships")

        # Step 2: Create ships through the service
        service = ShipService(PostgresShipRepository(session))
        ships = [service.create_ship(generate_payload()) for _ in range(num_ships)]

        print(f"Successfully seeded {len(ships)} ships!")

        print("\nSample ships:")
        for i, ship in enumerate(ships[:5], 1):
            print(
                f"   {i}. {ship.name} ({ship.ship_type.value}, {ship.planet}, "
                f"{ship.prod_date.year}) - speed {ship.speed}, rating {ship.rating}"
            )

        if len(ships) > 5:
            print(f"   ... and {len(ships) - 5} more")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_ships()
    except Exception as e:
        print(f"Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
