import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.routers import books
from .core.config import get_settings
from .db_connection import init_schema
from .exceptions import StoreError
from .gateway import Gateway
from .validation import describe_error

logger = logging.getLogger(__name__)

SERVER_FAULT = "Terjadi kegagalan pada server"
INVALID_JSON = "Invalid request payload JSON format"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    logger.info("Starting bookshelf API (%s)", settings["environment"])
    gateway = Gateway.from_settings(settings)
    if settings["db_init_schema"]:
        init_schema(gateway.engine)
    app.state.gateway = gateway
    try:
        yield
    finally:
        logger.info("Shutting down, closing connection pool")
        gateway.close()


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"status": "fail", "message": SERVER_FAULT})


async def request_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if any(error["type"] == "json_invalid" for error in errors):
        message = INVALID_JSON
    else:
        first = dict(errors[0], loc=tuple(errors[0]["loc"])[1:])
        message = describe_error(first)
    return JSONResponse(status_code=400, content={"status": "fail", "message": message})


def create_app(settings=None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings["log_level"])
    app = FastAPI(
        title="Bookshelf API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, request_error_handler)

    @app.get("/health")
    def healthcheck():
        return {"status": "ok"}

    app.include_router(books.router, prefix="/books", tags=["books"])
    return app


app = create_app()


def run_server(host: str | None = None, port: int | None = None) -> None:
    settings = app.state.settings
    uvicorn.run(app, host=host or settings["api_host"], port=port or settings["api_port"])


if __name__ == "__main__":
    run_server()
