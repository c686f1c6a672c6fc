from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ship_catalog.domain.ship import ShipOrder, ShipType


class ShipResponseDTO(BaseModel):
    id: int
    name: str
    planet: str
    ship_type: ShipType
    prod_date: int = Field(description="Production date, milliseconds since the Unix epoch (UTC)")
    is_used: bool
    speed: float
    crew_size: int
    rating: float

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Falcon",
                "planet": "Mars",
                "shipType": "TRANSPORT",
                "prodDate": 32503680000000,
                "isUsed": False,
                "speed": 0.5,
                "crewSize": 10,
                "rating": 2.0,
            }
        },
    )


class ShipPayloadDTO(BaseModel):
    """
    Request body for creating or editing a ship.

    Every field is optional at this layer: the domain decides what is required.
    Omitted fields and explicit nulls are told apart via model_fields_set.
    id and rating are not accepted; unknown keys are ignored.
    """

    name: str | None = None
    planet: str | None = None
    ship_type: str | None = Field(
        default=None,
        description="One of TRANSPORT, MILITARY, MERCHANT",
    )
    prod_date: int | None = Field(
        default=None,
        description="Production date, milliseconds since the Unix epoch (UTC)",
    )
    is_used: bool | None = None
    speed: float | None = None
    crew_size: int | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "name": "Falcon",
                "planet": "Mars",
                "shipType": "TRANSPORT",
                "prodDate": 32503680000000,
                "isUsed": False,
                "speed": 0.5,
                "crewSize": 10,
            }
        },
    )


class ShipsFilterQueryDTO(BaseModel):
    """Query parameters shared by the list and count endpoints."""

    name: str | None = Field(
        default=None,
        description="Substring of the ship name (case-sensitive)",
        examples=["Eagle"],
    )
    planet: str | None = Field(
        default=None,
        description="Substring of the planet (case-sensitive)",
        examples=["Mars"],
    )
    ship_type: ShipType | None = Field(default=None, alias="shipType", examples=["MILITARY"])
    after: int | None = Field(
        default=None,
        description="Earliest production date (inclusive), epoch milliseconds",
    )
    before: int | None = Field(
        default=None,
        description="Latest production date (inclusive), epoch milliseconds",
    )
    is_used: bool | None = Field(default=None, alias="isUsed")
    min_speed: float | None = Field(
        default=None, alias="minSpeed", description="Minimum speed (inclusive)"
    )
    max_speed: float | None = Field(
        default=None, alias="maxSpeed", description="Maximum speed (inclusive)"
    )
    min_crew_size: int | None = Field(
        default=None, alias="minCrewSize", description="Minimum crew size (inclusive)"
    )
    max_crew_size: int | None = Field(
        default=None, alias="maxCrewSize", description="Maximum crew size (inclusive)"
    )
    min_rating: float | None = Field(
        default=None, alias="minRating", description="Minimum rating (inclusive)"
    )
    max_rating: float | None = Field(
        default=None, alias="maxRating", description="Maximum rating (inclusive)"
    )

    model_config = ConfigDict(populate_by_name=True)


class ShipsSearchQueryDTO(ShipsFilterQueryDTO):
    """Query parameters for listing ships."""

    order: ShipOrder = Field(
        default=ShipOrder.ID,
        description="Sort key; ties are broken by id",
        examples=["SPEED"],
    )
    page_number: int = Field(
        default=0,
        alias="pageNumber",
        description="Zero-based page index",
        examples=[0],
        ge=0,
    )
    page_size: int = Field(
        default=3,
        alias="pageSize",
        description="Number of ships per page",
        examples=[3],
        ge=1,
    )
