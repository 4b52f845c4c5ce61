"""
API interface for creating, reading, updating and deleting demos.

Every handler turns the store's typed errors into a response here:
ValidationError -> 400, NotFound -> 404, StorageError -> 500.
"""

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import ORJSONResponse, PlainTextResponse, Response
import structlog

from typing import Annotated, Any

from common.errors import DemoError, NotFound, StorageError, ValidationError
from common.filters import build_filter
from common.store import DemoStore
from dependencies.store import get_demo_store
from models import DemoOut

logger = structlog.get_logger(__name__)

router = APIRouter()

Store = Annotated[DemoStore, Depends(get_demo_store)]
JSONBody = Annotated[dict[str, Any], Body()]


def error_response(error: DemoError) -> Response:
    if isinstance(error, ValidationError):
        status_code = 400
    elif isinstance(error, NotFound):
        status_code = 404
    elif isinstance(error, StorageError):
        status_code = 500
    else:
        raise TypeError(f"unhandled demo error: {error!r}")

    return ORJSONResponse(error.to_dict(), status_code=status_code)


@router.post("", status_code=201, response_model=DemoOut)
async def post_demo(body: JSONBody, store: Store):
    logger.debug("executing post_demo", body=body)

    try:
        demo = await store.create(body)
    except DemoError as e:
        logger.warning("can't add a new demo", error=e.to_dict())
        return error_response(e)

    return DemoOut.model_validate(demo)


@router.get("", response_model=list[DemoOut])
async def get_demos(request: Request, store: Store):
    """
    Filters on id, url and number are taken from the query string,
    e.g. GET /demos?number=1
    """

    logger.debug("executing get_demos", query=dict(request.query_params))

    try:
        demos = await store.list_all(build_filter(request.query_params))
    except DemoError as e:
        logger.warning("can't retrieve all demos", error=e.to_dict())
        return error_response(e)

    return [DemoOut.model_validate(demo) for demo in demos]


@router.get("/{demo_id}", response_model=DemoOut)
async def get_one_demo(demo_id: int, store: Store):
    logger.debug("executing get_one_demo", demo_id=demo_id)

    try:
        demo = await store.find_by_id(demo_id)
    except NotFound as e:
        logger.warning(e.message)
        return PlainTextResponse(e.message, status_code=404)
    except DemoError as e:
        logger.warning("can't get demo", demo_id=demo_id, error=e.to_dict())
        return error_response(e)

    return DemoOut.model_validate(demo)


@router.put("/{demo_id}", response_model=DemoOut)
async def put_demo(demo_id: int, body: JSONBody, store: Store):
    logger.debug("executing put_demo", demo_id=demo_id, body=body)

    try:
        demo = await store.update(demo_id, body)
    except DemoError as e:
        logger.warning("can't update demo", demo_id=demo_id, error=e.to_dict())
        return error_response(e)

    return DemoOut.model_validate(demo)


@router.delete("/{demo_id}", response_model=DemoOut)
async def delete_demo(demo_id: int, store: Store):
    logger.debug("executing delete_demo", demo_id=demo_id)

    try:
        demo = await store.delete(demo_id)
    except DemoError as e:
        logger.warning("can't delete demo", demo_id=demo_id, error=e.to_dict())
        return error_response(e)

    return DemoOut.model_validate(demo)
