from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from ship_catalog.entrypoints.http.dependencies import get_ship_service
from ship_catalog.entrypoints.http.dtos.ships import (
    ShipPayloadDTO,
    ShipResponseDTO,
    ShipsFilterQueryDTO,
    ShipsSearchQueryDTO,
)
from ship_catalog.entrypoints.http.error_responses import ErrorResponse
from ship_catalog.entrypoints.http.mappers.ship_mapper import ShipMapper
from ship_catalog.use_cases.ship_service import ShipService


router = APIRouter(tags=["Ships"])

_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Malformed request or invalid ship"}}
_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Ship not found"}}


@router.get(
    "/ships",
    response_model=list[ShipResponseDTO],
    summary="List ships",
    description="""
    List ships with optional filters, sorting and pagination.

    ## Filters
    - All filters use AND semantics; omitted filters do not constrain the result
    - name/planet: case-sensitive substring match
    - shipType/isUsed: exact match
    - after/before (epoch millis), speed, crew size, rating: inclusive ranges,
      either bound may be omitted

    ## Sorting and pagination
    - order: ID (default), NAME, PLANET, DATE, SPEED, CREW_SIZE, RATING; ties broken by id
    - pageNumber is zero-based (default 0), pageSize defaults to 3
    - A page past the last match is an empty list

    ## Example
    ```
    GET /rest/ships?planet=Mars&minSpeed=0.5&order=RATING&pageSize=10
    ```
    """,
    responses=_BAD_REQUEST,
)
def list_ships(
    query: Annotated[ShipsSearchQueryDTO, Query()],
    service: ShipService = Depends(get_ship_service),
) -> list[ShipResponseDTO]:
    """List ships endpoint following parse → execute → map → return pattern."""
    ships = service.list_ships(
        filters=ShipMapper.to_domain_filters(query),
        paging=ShipMapper.to_domain_paging(query),
    )

    return ShipMapper.to_list_response(ships)


@router.get(
    "/ships/count",
    response_model=int,
    summary="Count ships",
    description="Count ships matching the same filters as the list endpoint (no pagination).",
    responses=_BAD_REQUEST,
)
def count_ships(
    query: Annotated[ShipsFilterQueryDTO, Query()],
    service: ShipService = Depends(get_ship_service),
) -> int:
    return service.count_ships(ShipMapper.to_domain_filters(query))


@router.get(
    "/ships/{ship_id}",
    response_model=ShipResponseDTO,
    summary="Get ship",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
def get_ship(
    ship_id: str,
    service: ShipService = Depends(get_ship_service),
) -> ShipResponseDTO:
    ship = service.get_ship(ship_id)

    return ShipMapper.to_ship_response(ship)


@router.post(
    "/ships",
    response_model=ShipResponseDTO,
    summary="Create ship",
    description="""
    Create a ship. name, planet, shipType, prodDate, speed and crewSize are required;
    isUsed defaults to false. The rating is computed by the server.
    """,
    responses=_BAD_REQUEST,
)
def create_ship(
    payload: ShipPayloadDTO,
    service: ShipService = Depends(get_ship_service),
) -> ShipResponseDTO:
    ship = service.create_ship(ShipMapper.to_domain_payload(payload))

    return ShipMapper.to_ship_response(ship)


@router.post(
    "/ships/{ship_id}",
    response_model=ShipResponseDTO,
    summary="Edit ship",
    description="""
    Update the fields present in the body; omitted fields keep their value.
    Sending a field as null is rejected. The rating is recomputed on every edit.
    """,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
def edit_ship(
    ship_id: str,
    payload: ShipPayloadDTO,
    service: ShipService = Depends(get_ship_service),
) -> ShipResponseDTO:
    ship = service.edit_ship(ship_id, ShipMapper.to_domain_payload(payload))

    return ShipMapper.to_ship_response(ship)


@router.delete(
    "/ships/{ship_id}",
    summary="Delete ship",
    response_class=Response,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
def delete_ship(
    ship_id: str,
    service: ShipService = Depends(get_ship_service),
) -> Response:
    service.delete_ship(ship_id)

    return Response(status_code=status.HTTP_200_OK)
