"""HTML page shells. The pages' scripts talk to the JSON API."""

from __future__ import annotations

import time
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from droppydrop.config import Settings, get_settings

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / 'templates'

templates = Jinja2Templates(directory=TEMPLATES_DIR)

router = APIRouter(tags=['pages'], include_in_schema=False)


def get_app_version(settings: Settings = Depends(get_settings)) -> str:
    """Cache-busting version appended to asset URLs."""
    return settings.app_version or f'local-{int(time.time())}'


def get_page_context(
    app_version: str = Depends(get_app_version),
    settings: Settings = Depends(get_settings),
) -> dict[str, str]:
    # Scripts read api_prefix from <body data-api-prefix> to build API URLs.
    return {'app_version': app_version, 'api_prefix': settings.api_prefix}


def _render(request: Request, name: str, context: dict[str, str]) -> HTMLResponse:
    return templates.TemplateResponse(request, name, context)


@router.get('/gamelead', response_class=HTMLResponse)
def gamelead_page(request: Request, context: dict = Depends(get_page_context)) -> HTMLResponse:
    return _render(request, 'gamelead.html', context)


@router.get('/player/{obfuscated_id}', response_class=HTMLResponse)
def player_page(
    obfuscated_id: str, request: Request, context: dict = Depends(get_page_context)
) -> HTMLResponse:
    # The page reads its own id from the URL; nothing is decoded server-side.
    return _render(request, 'player.html', context)


@router.get('/test', response_class=HTMLResponse)
def test_page(request: Request, context: dict = Depends(get_page_context)) -> HTMLResponse:
    return _render(request, 'test.html', context)


@router.get('/generator', response_class=HTMLResponse)
def generator_page(request: Request, context: dict = Depends(get_page_context)) -> HTMLResponse:
    return _render(request, 'generator.html', context)


@router.get('/testresults', response_class=HTMLResponse)
def test_results_page(
    request: Request, context: dict = Depends(get_page_context)
) -> HTMLResponse:
    return _render(request, 'testresults.html', context)
