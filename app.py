from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import ORJSONResponse
from fastapi.routing import APIRoute
from tortoise.contrib.fastapi import register_tortoise
import structlog
import uvicorn

from typing import Optional

from common.errors import FieldError, ValidationError
from common.log import configure_logging
from config import Settings
from routers import router

logger = structlog.get_logger(__name__)


async def request_validation_error(request: Request, exc: RequestValidationError):
    # malformed ids, bodies and the like get the same 400 body as model errors
    error = ValidationError([
        FieldError(
            message=item["msg"],
            type="Validation error",
            path=str(item["loc"][-1]) if item["loc"] else "",
            value=item.get("input"),
        )
        for item in exc.errors()
    ])
    logger.warning("rejected request", path=request.url.path, error=error.to_dict())
    return ORJSONResponse(jsonable_encoder(error.to_dict()), status_code=400)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.verbosity)

    app = FastAPI(
        title="Demos",
        default_response_class=ORJSONResponse,
        docs_url=None,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"]
    )

    app.add_exception_handler(RequestValidationError, request_validation_error)

    app.include_router(router)
    # included routers may show up as their own entries without a path
    logger.debug("routes added", routes=[route.path for route in app.routes if isinstance(route, APIRoute)])

    @app.get("/docs", include_in_schema=False)
    async def get_documentation(request: Request):
        return get_swagger_ui_html(
            openapi_url=request.scope.get("root_path", "") + "/openapi.json",
            title="Swagger",
        )

    # opens the connection pool on startup and closes it on shutdown
    register_tortoise(
        app=app,
        config=settings.tortoise_config(),
        generate_schemas=True
    )

    return app


if __name__ == "__main__":
    settings = Settings.from_env()
    configure_logging(settings.verbosity)
    logger.info("server listening", port=settings.port, verbosity=settings.verbosity)
    uvicorn.run("app:create_app", factory=True, host="0.0.0.0", port=settings.port)
