"""
Typed failures raised by the persistence layer.

The routers are the only place these get turned into HTTP responses,
so each class knows how to render its own response body.
"""

from dataclasses import dataclass, asdict
from typing import Any, Optional


def jsonable(value: Any) -> Any:
    # orjson only encodes integers that fit in 64 bits
    if isinstance(value, int) and not isinstance(value, bool) and not -2**63 <= value < 2**64:
        return str(value)
    if isinstance(value, dict):
        return {key: jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [jsonable(item) for item in value]
    return value


@dataclass(frozen=True)
class FieldError:
    message: str
    type: str
    path: str
    value: Any = None


class DemoError(Exception):
    def to_dict(self) -> dict:
        return {"message": str(self)}


class ValidationError(DemoError):
    name = "ValidationError"

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return ",\n".join(f"Validation error: {error.message}" for error in self.errors)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "message": self.message,
            "errors": [jsonable(asdict(error)) for error in self.errors],
        }


class NotFound(DemoError):
    def __init__(self, demo_id: int):
        self.demo_id = demo_id
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return f"demo with id: {self.demo_id} not found"

    def to_dict(self) -> dict:
        return {"message": self.message, "status": 404}


class StorageError(DemoError):
    def __init__(self, message: str, cause: Optional[Exception] = None):
        self.message = message
        self.cause = cause
        super().__init__(message)

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "error": str(self.cause) if self.cause is not None else None,
            "status": 500,
        }
