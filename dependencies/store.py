"""
Request dependencies handing the database connection down to the store.
"""

from fastapi import Depends
from tortoise import connections
from tortoise.backends.base.client import BaseDBAsyncClient

from typing import Annotated

from common.store import DemoStore


async def get_connection() -> BaseDBAsyncClient:
    return connections.get("default")


async def get_demo_store(
    connection: Annotated[BaseDBAsyncClient, Depends(get_connection)],
) -> DemoStore:
    return DemoStore(connection)
