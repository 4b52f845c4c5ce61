"""
Persistence accessor for demos.

DemoStore runs every query on the connection it was constructed with and
signals failures with the typed errors from common.errors. It never logs;
reporting is left to the routers.
"""

from tortoise.backends.base.client import BaseDBAsyncClient
from tortoise.exceptions import BaseORMException
from tortoise.exceptions import ValidationError as ORMValidationError

from contextlib import contextmanager
from typing import Any, Mapping, Optional

from common.errors import FieldError, NotFound, StorageError, ValidationError
from models import INT_MAX, Demo


WRITABLE_FIELDS = ("url", "number")


def writable(fields: Mapping[str, Any]) -> dict:
    return {key: fields[key] for key in WRITABLE_FIELDS if key in fields}


def check_type(name: str, value: Any) -> Optional[FieldError]:
    if name == "url" and not isinstance(value, str):
        return FieldError("Validation isUrl failed", "Validation error", name, value)
    if name == "number" and (isinstance(value, bool) or not isinstance(value, int)):
        return FieldError("Validation isInt failed", "Validation error", name, value)
    return None


def validate(values: Mapping[str, Any], partial: bool = False) -> None:
    """
    Checks ``values`` against the Demo field rules.

    With ``partial`` set, only the fields present are checked, which is
    what an update needs. Raises ValidationError with one entry per
    offending field.
    """

    errors = []

    for name in WRITABLE_FIELDS:
        field = Demo._meta.fields_map[name]

        if name not in values:
            if not partial and not field.null:
                errors.append(FieldError(f"{name} is required", "notNull Violation", name, None))
            continue

        value = values[name]
        if value is None:
            if not field.null:
                errors.append(FieldError(f"{name} is required", "notNull Violation", name, None))
            continue

        error = check_type(name, value)
        if error is None:
            # validators declared on the model, including max length
            for validator in field.validators:
                try:
                    validator(value)
                except ORMValidationError as e:
                    error = FieldError(str(e), "Validation error", name, value)
                    break

        if error is not None:
            errors.append(error)

    if errors:
        raise ValidationError(errors)


@contextmanager
def storage_errors(message: str):
    try:
        yield
    except ORMValidationError as e:
        # the model rejected a value on save: "<field>: <reason>"
        path, _, reason = str(e).partition(": ")
        raise ValidationError([FieldError(reason or str(e), "Validation error", path, None)]) from e
    except (BaseORMException, OSError, OverflowError) as e:
        raise StorageError(message, e) from e


class DemoStore:
    def __init__(self, connection: BaseDBAsyncClient):
        self.connection = connection

    async def create(self, fields: Mapping[str, Any]) -> Demo:
        values = writable(fields)
        validate(values)

        with storage_errors("Can't add a new demo"):
            return await Demo.create(using_db=self.connection, **values)

    async def list_all(self, conditions: Optional[Mapping[str, Any]] = None) -> list[Demo]:
        """
        Newest first. ``conditions`` are ORM filter kwargs, as built by
        common.filters.build_filter.
        """

        with storage_errors("Can't retrieve all demos"):
            return await (
                Demo.filter(**(conditions or {}))
                .order_by("-created_at", "-id")
                .using_db(self.connection)
            )

    async def find_by_id(self, demo_id: int) -> Demo:
        # ids outside the column range can never match a row
        if not 1 <= demo_id <= INT_MAX:
            raise NotFound(demo_id)

        with storage_errors(f"Can't get demo with id: {demo_id}"):
            demo = await Demo.get_or_none(id=demo_id, using_db=self.connection)

        if demo is None:
            raise NotFound(demo_id)
        return demo

    async def update(self, demo_id: int, fields: Mapping[str, Any]) -> Demo:
        demo = await self.find_by_id(demo_id)

        values = writable(fields)
        validate(values, partial=True)

        with storage_errors(f"Can't update a demo: {demo_id}"):
            demo.update_from_dict(values)
            await demo.save(using_db=self.connection)

        return demo

    async def delete(self, demo_id: int) -> Demo:
        """
        Hard delete. The returned instance keeps the values the row had.
        """

        demo = await self.find_by_id(demo_id)

        with storage_errors(f"Can't delete a demo with id: {demo_id}"):
            await demo.delete(using_db=self.connection)

        return demo
