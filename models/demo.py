"""
Database model for demos, plus its serialised form.
"""

from pydantic import BaseModel, ConfigDict
from tortoise import fields, models
from tortoise.validators import MaxValueValidator, MinValueValidator

from datetime import datetime
from typing import Optional

from common.validators import URLValidator

# id and number are 32-bit INTEGER columns
INT_MIN = -2**31
INT_MAX = 2**31 - 1


class Demo(models.Model):
    id = fields.IntField(primary_key=True)
    url = fields.CharField(max_length=1024, validators=[URLValidator()])
    number = fields.IntField(
        null=True,
        validators=[MinValueValidator(INT_MIN), MaxValueValidator(INT_MAX)],
    )
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "demo_table"

    def __str__(self) -> str:
        return self.url


class DemoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    url: str
    number: Optional[int] = None
    created_at: datetime
    updated_at: datetime
