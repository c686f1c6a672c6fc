from __future__ import annotations

from datetime import datetime, timedelta, timezone

from ship_catalog.domain.errors import BadRequestError, ValidationError
from ship_catalog.domain.ship import Paging, Ship, ShipFilters, ShipPayload
from ship_catalog.entrypoints.http.dtos.ships import (
    ShipPayloadDTO,
    ShipResponseDTO,
    ShipsFilterQueryDTO,
    ShipsSearchQueryDTO,
)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def millis_to_datetime(millis: int) -> datetime:
    """
    Raises:
        OverflowError: If millis lies outside the range datetime can represent
    """
    return EPOCH + timedelta(milliseconds=millis)


def datetime_to_millis(value: datetime) -> int:
    return (value - EPOCH) // timedelta(milliseconds=1)


class ShipMapper:
    """Maps between REST DTOs and domain models for ships."""

    @staticmethod
    def to_domain_filters(dto: ShipsFilterQueryDTO) -> ShipFilters:
        """
        Converts query params to domain filters, handling epoch-millis conversion.

        Raises:
            BadRequestError: If after/before cannot be represented as a date
        """
        return ShipFilters(
            name=dto.name,
            planet=dto.planet,
            ship_type=dto.ship_type,
            after=ShipMapper._filter_date("after", dto.after),
            before=ShipMapper._filter_date("before", dto.before),
            is_used=dto.is_used,
            min_speed=dto.min_speed,
            max_speed=dto.max_speed,
            min_crew_size=dto.min_crew_size,
            max_crew_size=dto.max_crew_size,
            min_rating=dto.min_rating,
            max_rating=dto.max_rating,
        )

    @staticmethod
    def to_domain_paging(dto: ShipsSearchQueryDTO) -> Paging:
        return Paging(page=dto.page_number, page_size=dto.page_size, order=dto.order)

    @staticmethod
    def to_domain_payload(dto: ShipPayloadDTO) -> ShipPayload:
        """
        Converts a request body to a domain payload.

        Fields missing from the JSON body become UNSET; fields sent as null stay None.

        Raises:
            ValidationError: If prodDate cannot be represented as a date
        """
        values = {}
        for field_name in dto.model_fields_set:
            value = getattr(dto, field_name)
            if field_name == "prod_date" and value is not None:
                value = ShipMapper._payload_date(value)
            values[field_name] = value

        return ShipPayload(**values)

    @staticmethod
    def to_ship_response(ship: Ship) -> ShipResponseDTO:
        return ShipResponseDTO(
            id=ship.id,
            name=ship.name,
            planet=ship.planet,
            ship_type=ship.ship_type,
            prod_date=datetime_to_millis(ship.prod_date),
            is_used=ship.is_used,
            speed=ship.speed,
            crew_size=ship.crew_size,
            rating=ship.rating,
        )

    @staticmethod
    def to_list_response(ships: list[Ship]) -> list[ShipResponseDTO]:
        return [ShipMapper.to_ship_response(ship) for ship in ships]

    @staticmethod
    def _filter_date(field: str, millis: int | None) -> datetime | None:
        if millis is None:
            return None
        try:
            return millis_to_datetime(millis)
        except OverflowError:
            raise BadRequestError(f"{field} is not a valid date", field=field, value=millis)

    @staticmethod
    def _payload_date(millis: int) -> datetime:
        try:
            return millis_to_datetime(millis)
        except OverflowError:
            raise ValidationError(
                errors=[
                    {
                        "field": "prodDate",
                        "message": f"Must be a valid date: {millis}",
                        "code": "INVALID_DATE",
                    }
                ]
            )
