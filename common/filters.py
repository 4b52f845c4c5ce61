"""
Allow-list of fields that GET /demos can filter on.

Each field is bound to a parser that turns the raw query string value
into a typed equality condition for the ORM.
"""

from typing import Callable, Mapping

from common.errors import FieldError, ValidationError
from models import INT_MAX, INT_MIN


def parse_id(value: str) -> dict:
    return {"id": parse_int(value, low=1)}


def parse_url(value: str) -> dict:
    return {"url": value}


def parse_number(value: str) -> dict:
    if value == "null":
        return {"number__isnull": True}
    return {"number": parse_int(value)}


def parse_int(value: str, low: int = INT_MIN, high: int = INT_MAX) -> int:
    # int() alone would also accept "+1", " 1" and "1_000"
    if not value.lstrip("-").isdigit() or not value.isascii():
        raise ValueError(value)
    parsed = int(value)
    if not low <= parsed <= high:
        raise ValueError(value)
    return parsed


FILTERS: dict[str, Callable[[str], dict]] = {
    "id": parse_id,
    "url": parse_url,
    "number": parse_number,
}


def build_filter(query: Mapping[str, str]) -> dict:
    """
    Returns ORM filter kwargs for the allow-listed keys of ``query``.

    Unknown keys are ignored. Values that don't parse for their field
    raise a ValidationError listing every offending field.
    """

    conditions = {}
    errors = []

    for key, parse in FILTERS.items():
        if key not in query:
            continue
        value = query[key]
        try:
            conditions.update(parse(value))
        except ValueError:
            errors.append(FieldError(
                message=f"Invalid filter value for {key}",
                type="Validation error",
                path=key,
                value=value,
            ))

    if errors:
        raise ValidationError(errors)

    return conditions
