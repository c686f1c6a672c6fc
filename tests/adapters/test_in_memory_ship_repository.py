"""
Test suite for InMemoryShipRepository.

The in-memory store is the reference implementation of the ShipRepository
contract; the SQL store is checked against the same expectations.

Test sections:
- Persistence: id assignment, overwrite, delete
- Filters: every filter parameter on its own and combined
- Ordering: every sort key, ties broken by id
- Paging: page slicing after filtering and sorting
- Count: counts ignore paging
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from ship_catalog.adapters.in_memory_ship_repository import InMemoryShipRepository
from ship_catalog.domain.ship import Paging, Ship, ShipFilters, ShipOrder, ShipType
from ship_catalog.domain.specification import ShipSpecification, build_specification


def utc(year: int, month: int = 1, day: int = 1) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


ALL = Paging(page=0, page_size=50)


@pytest.fixture()
def repo(ships: list[Ship]) -> InMemoryShipRepository:
    return InMemoryShipRepository(ships)


def _ids(result: list[Ship]) -> list[int]:
    return [ship.id for ship in result]


# ==============================================================================
# Persistence
# ==============================================================================


def test_seeded_ships_get_sequential_ids(repo: InMemoryShipRepository) -> None:
    assert _ids(repo.search(ShipSpecification(), ALL)) == [1, 2, 3, 4, 5]


def test_save_assigns_next_id(repo: InMemoryShipRepository, ships: list[Ship]) -> None:
    saved = repo.save(replace(ships[0], name="Copy"))

    assert saved.id == 6
    assert repo.get_by_id(6) == saved


def test_save_with_id_overwrites(repo: InMemoryShipRepository) -> None:
    ship = repo.get_by_id(2)
    assert ship is not None

    repo.save(replace(ship, name="Renamed"))

    assert repo.get_by_id(2).name == "Renamed"
    assert repo.count(ShipSpecification()) == 5


def test_ids_are_not_reused_after_delete(
    repo: InMemoryShipRepository, ships: list[Ship]
) -> None:
    repo.delete(5)

    saved = repo.save(ships[0])

    assert saved.id == 6


def test_seeding_explicit_ids_moves_counter_forward(ships: list[Ship]) -> None:
    repo = InMemoryShipRepository([replace(ships[0], id=10)])

    assert repo.save(ships[1]).id == 11


def test_get_by_id_missing_returns_none(repo: InMemoryShipRepository) -> None:
    assert repo.get_by_id(999) is None


def test_exists_by_id(repo: InMemoryShipRepository) -> None:
    assert repo.exists_by_id(1)
    assert not repo.exists_by_id(999)


def test_delete_removes_ship(repo: InMemoryShipRepository) -> None:
    repo.delete(3)

    assert not repo.exists_by_id(3)
    assert repo.count(ShipSpecification()) == 4


# ==============================================================================
# Filters
# ==============================================================================


@pytest.mark.parametrize(
    "filters, expected_ids",
    [
        (ShipFilters(), [1, 2, 3, 4, 5]),
        (ShipFilters(name="Eagle"), [1, 2]),  # case-sensitive: "eagle scout" excluded
        (ShipFilters(name="eagle"), [4]),
        (ShipFilters(name="a"), [1, 2, 3, 4, 5]),
        (ShipFilters(planet="Mars"), [1, 4]),
        (ShipFilters(ship_type=ShipType.TRANSPORT), [1, 4]),
        (ShipFilters(ship_type=ShipType.MERCHANT), [3]),
        (ShipFilters(is_used=True), [2, 5]),
        (ShipFilters(is_used=False), [1, 3, 4]),
        (ShipFilters(after=utc(2990), before=utc(3010, 12, 31)), [1, 2, 3]),
        (ShipFilters(after=utc(3010, 3, 3)), [3, 5]),  # inclusive
        (ShipFilters(before=utc(2990, 6, 15)), [2, 4]),  # inclusive
        (ShipFilters(min_speed=0.5, max_speed=0.9), [1, 2, 4]),
        (ShipFilters(min_crew_size=40), [2, 4, 5]),
        (ShipFilters(max_crew_size=10), [1, 3]),
        (ShipFilters(min_rating=1.6), [1, 3, 5]),
        (ShipFilters(max_rating=1.2), [2, 4]),
        (ShipFilters(name="Eagle", is_used=True), [2]),
        (ShipFilters(planet="Mars", max_speed=0.5), [1]),
        (ShipFilters(name="Zeppelin"), []),
        (ShipFilters(min_speed=0.9, max_speed=0.5), []),
        (ShipFilters(after=utc(3010), before=utc(2990)), []),
    ],
)
def test_search_filters(
    repo: InMemoryShipRepository, filters: ShipFilters, expected_ids: list[int]
) -> None:
    result = repo.search(build_specification(filters), ALL)

    assert _ids(result) == expected_ids


# ==============================================================================
# Ordering
# ==============================================================================


@pytest.mark.parametrize(
    "order, expected_ids",
    [
        (ShipOrder.ID, [1, 2, 3, 4, 5]),
        (ShipOrder.NAME, [2, 1, 3, 5, 4]),
        (ShipOrder.SPEED, [3, 5, 1, 4, 2]),
        (ShipOrder.DATE, [4, 2, 1, 3, 5]),
        (ShipOrder.RATING, [4, 2, 3, 1, 5]),
        (ShipOrder.CREW_SIZE, [3, 1, 4, 2, 5]),
    ],
)
def test_search_orders_ascending(
    repo: InMemoryShipRepository, order: ShipOrder, expected_ids: list[int]
) -> None:
    result = repo.search(ShipSpecification(), Paging(page=0, page_size=50, order=order))

    assert _ids(result) == expected_ids


def test_planet_order_is_lexicographic(repo: InMemoryShipRepository) -> None:
    result = repo.search(
        ShipSpecification(), Paging(page=0, page_size=50, order=ShipOrder.PLANET)
    )

    assert _ids(result) == [2, 3, 1, 4, 5]


def test_ties_are_broken_by_id(repo: InMemoryShipRepository, ships: list[Ship]) -> None:
    repo.save(replace(ships[0], name="Eagle Two"))  # id 6, same speed as id 1

    result = repo.search(
        ShipSpecification(), Paging(page=0, page_size=50, order=ShipOrder.SPEED)
    )

    assert _ids(result) == [3, 5, 1, 6, 4, 2]


# ==============================================================================
# Paging
# ==============================================================================


def test_default_page_is_first_three(repo: InMemoryShipRepository) -> None:
    assert _ids(repo.search(ShipSpecification(), Paging())) == [1, 2, 3]


def test_second_page(repo: InMemoryShipRepository) -> None:
    result = repo.search(ShipSpecification(), Paging(page=1, page_size=2))

    assert _ids(result) == [3, 4]


def test_last_partial_page(repo: InMemoryShipRepository) -> None:
    result = repo.search(ShipSpecification(), Paging(page=1, page_size=3))

    assert _ids(result) == [4, 5]


def test_page_past_the_end_is_empty(repo: InMemoryShipRepository) -> None:
    assert repo.search(ShipSpecification(), Paging(page=5, page_size=3)) == []


def test_large_page_holds_every_match(repo: InMemoryShipRepository) -> None:
    result = repo.search(ShipSpecification(), Paging(page_size=500))

    assert _ids(result) == [1, 2, 3, 4, 5]
    assert len(result) == repo.count(ShipSpecification())


def test_paging_applies_after_filter_and_sort(repo: InMemoryShipRepository) -> None:
    result = repo.search(
        build_specification(ShipFilters(min_crew_size=10)),
        Paging(page=1, page_size=2, order=ShipOrder.RATING),
    )

    # matches by rating: 4 (0.35), 2 (1.2), 1 (2.0), 5 (12.0)
    assert _ids(result) == [1, 5]


# ==============================================================================
# Count
# ==============================================================================


def test_count_all(repo: InMemoryShipRepository) -> None:
    assert repo.count(ShipSpecification()) == 5


def test_count_with_filters(repo: InMemoryShipRepository) -> None:
    assert repo.count(build_specification(ShipFilters(planet="Mars"))) == 2


def test_count_empty_repository() -> None:
    assert InMemoryShipRepository().count(ShipSpecification()) == 0


def test_count_with_inverted_range_is_zero(repo: InMemoryShipRepository) -> None:
    filters = ShipFilters(min_rating=5.0, max_rating=1.0)

    assert repo.count(build_specification(filters)) == 0
