"""
Field validators attached to the ORM models.
"""

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from tortoise.exceptions import ValidationError
from tortoise.validators import Validator

from typing import Final


AnyUrlAdapter: Final[TypeAdapter[AnyUrl]] = TypeAdapter(AnyUrl)


class URLValidator(Validator):
    """
    Accepts absolute URLs with a scheme, e.g. http://www.foo.bar

    The value is stored as given, so it must not carry whitespace the
    URL parser would silently strip.
    """

    message = "Validation isUrl failed"

    def __call__(self, value) -> None:
        if not isinstance(value, str) or value != value.strip():
            raise ValidationError(self.message)

        try:
            AnyUrlAdapter.validate_python(value)
        except PydanticValidationError as e:
            raise ValidationError(self.message) from e
