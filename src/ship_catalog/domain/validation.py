"""Field rules for ship payloads.

Create runs every presence check first, then the value rule of every field
that was sent. Edit skips presence checks and runs the value rule of each
field that was sent, rejecting explicit nulls. The first violation raises
ValidationError; payloads are never modified.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, NoReturn

from ship_catalog.domain.errors import ValidationError
from ship_catalog.domain.ship import ShipPayload, ShipType

MIN_TEXT_LENGTH = 1
MAX_TEXT_LENGTH = 50
MIN_PROD_YEAR = 2800
MAX_PROD_YEAR = 3019
MIN_SPEED = 0.01
MAX_SPEED = 0.99
MIN_CREW_SIZE = 1
MAX_CREW_SIZE = 9999

REQUIRED_FIELDS = ("name", "planet", "ship_type", "prod_date", "speed", "crew_size")

# Domain attribute -> name the client knows the field by
FIELD_LABELS = {
    "name": "name",
    "planet": "planet",
    "ship_type": "shipType",
    "prod_date": "prodDate",
    "speed": "speed",
    "crew_size": "crewSize",
    "is_used": "isUsed",
}


def validate_new_ship(payload: ShipPayload) -> None:
    """
    Validate a create payload.

    Raises:
        ValidationError: On the first missing required field, then on the
            first present field whose value breaks its rule
    """
    for field_name in REQUIRED_FIELDS:
        if getattr(payload, field_name) is None or not payload.is_set(field_name):
            _fail(field_name, f"{FIELD_LABELS[field_name]} is required", "REQUIRED")

    for field_name, value in payload.present_fields().items():
        # isUsed is the only optional field; null means "use the default"
        if value is None:
            continue
        _VALUE_RULES[field_name](field_name, value)


def validate_ship_changes(payload: ShipPayload) -> None:
    """
    Validate an edit payload field by field.

    Omitted fields are not checked. A field sent as null is rejected, since
    omission is the only way to leave a field unchanged.

    Raises:
        ValidationError: On the first present field that is null or breaks its rule
    """
    for field_name, value in payload.present_fields().items():
        if value is None:
            _fail(field_name, f"{FIELD_LABELS[field_name]} cannot be null", "NOT_NULL")
        _VALUE_RULES[field_name](field_name, value)


def _check_text(field_name: str, value: Any) -> None:
    label = FIELD_LABELS[field_name]
    if not isinstance(value, str):
        _fail(field_name, f"{label} must be a string", "INVALID_TYPE")
    if not MIN_TEXT_LENGTH <= len(value) <= MAX_TEXT_LENGTH:
        _fail(
            field_name,
            f"{label} must be between {MIN_TEXT_LENGTH} and {MAX_TEXT_LENGTH} characters",
            "INVALID_LENGTH",
        )


def _check_ship_type(field_name: str, value: Any) -> None:
    try:
        ShipType(value)
    except (ValueError, TypeError):
        allowed = ", ".join(member.value for member in ShipType)
        _fail(field_name, f"shipType must be one of {allowed}", "INVALID_CHOICE")


def _check_prod_date(field_name: str, value: Any) -> None:
    if not isinstance(value, datetime):
        _fail(field_name, "prodDate must be a date", "INVALID_TYPE")
    if not MIN_PROD_YEAR <= value.year <= MAX_PROD_YEAR:
        _fail(
            field_name,
            f"prodDate year must be between {MIN_PROD_YEAR} and {MAX_PROD_YEAR}",
            "OUT_OF_RANGE",
        )


def _check_speed(field_name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        _fail(field_name, "speed must be a number", "INVALID_TYPE")
    if not MIN_SPEED <= value <= MAX_SPEED:
        _fail(field_name, f"speed must be between {MIN_SPEED} and {MAX_SPEED}", "OUT_OF_RANGE")


def _check_crew_size(field_name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        _fail(field_name, "crewSize must be an integer", "INVALID_TYPE")
    if not MIN_CREW_SIZE <= value <= MAX_CREW_SIZE:
        _fail(
            field_name,
            f"crewSize must be between {MIN_CREW_SIZE} and {MAX_CREW_SIZE}",
            "OUT_OF_RANGE",
        )


def _check_is_used(field_name: str, value: Any) -> None:
    if not isinstance(value, bool):
        _fail(field_name, "isUsed must be a boolean", "INVALID_TYPE")


_VALUE_RULES: dict[str, Callable[[str, Any], None]] = {
    "name": _check_text,
    "planet": _check_text,
    "ship_type": _check_ship_type,
    "prod_date": _check_prod_date,
    "speed": _check_speed,
    "crew_size": _check_crew_size,
    "is_used": _check_is_used,
}


def _fail(field_name: str, message: str, code: str) -> NoReturn:
    raise ValidationError(
        message,
        errors=[
            {
                "field": FIELD_LABELS[field_name],
                "message": message,
                "code": code,
            }
        ],
    )
