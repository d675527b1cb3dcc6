from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from droppydrop.config import get_settings
from droppydrop.datastore import DatastoreError
from droppydrop.db import create_db_and_tables
from droppydrop.routers import admin, identity, locations, messages, pages, targets, test_results

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    configure_logging(get_settings().log_level)
    create_db_and_tables()
    yield


app = FastAPI(
    title='DroppyDrop',
    description='Location sharing and messaging for a live location-based group game',
    version='0.1.0',
    lifespan=lifespan,
)

API_ROUTERS = (
    locations.router,
    messages.router,
    targets.router,
    identity.router,
    test_results.router,
    admin.router,
)


def include_api_routers(api: FastAPI, prefix: str = '') -> None:
    """Mount the JSON API under 'prefix'. Page shells and '/static' stay at the root."""
    for router in API_ROUTERS:
        api.include_router(router, prefix=prefix)


include_api_routers(app, get_settings().api_prefix)
app.include_router(pages.router)

app.mount('/static', StaticFiles(directory=get_settings().static_dir, check_dir=False), name='static')


@app.exception_handler(DatastoreError)
async def datastore_error_handler(request: Request, exc: DatastoreError) -> JSONResponse:
    logger.error('%s %s: %s', request.method, request.url.path, exc, exc_info=exc.__cause__)
    return JSONResponse(status_code=500, content={'detail': f'Internal server error ({exc.operation}).'})


@app.get('/health')
async def health() -> dict[str, str]:
    return {'status': 'ok'}


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info('Listening on http://%s:%d', settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
