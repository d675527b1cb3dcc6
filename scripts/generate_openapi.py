#!/usr/bin/env python3
"""Generate the OpenAPI document for the DroppyDrop JSON API and write it to openapi/openapi.yaml.

Paths are listed relative to the API root. The configured ``DROPPYDROP_API_PREFIX``
goes into ``servers`` so clients resolve them the same way the deployed app does.
Page shells and ``/static`` are not part of the document.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI

from droppydrop.config import get_settings
from droppydrop.main import app, include_api_routers

REPO_ROOT = Path(__file__).resolve().parent.parent
OUTPUT_PATH = REPO_ROOT / 'openapi' / 'openapi.yaml'

HEADER = (
    '# AUTO-GENERATED from the DroppyDrop routers. DO NOT EDIT.\n'
    '# Regenerate with: python scripts/generate_openapi.py\n'
)


def build_openapi(api_prefix: str = '') -> dict[str, Any]:
    api = FastAPI(title=app.title, description=app.description, version=app.version)
    include_api_routers(api)
    spec = api.openapi()
    spec['servers'] = [{'url': api_prefix or '/'}]
    return spec


def main():
    spec = build_openapi(get_settings().api_prefix)
    OUTPUT_PATH.parent.mkdir(parents=True, exist_ok=True)
    with open(OUTPUT_PATH, 'w') as f:
        f.write(HEADER)
        yaml.dump(spec, f, default_flow_style=False, sort_keys=False)
    print(f'OpenAPI document written to {OUTPUT_PATH} ({len(spec["paths"])} paths)')


if __name__ == '__main__':
    main()
