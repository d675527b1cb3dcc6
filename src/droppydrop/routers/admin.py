"""Admin endpoints. Guarded by an explicit confirmation only, not by authentication."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from droppydrop.config import Settings, get_settings
from droppydrop.datastore import Datastore
from droppydrop.dependencies import get_datastore
from droppydrop.schemas.response import ClearDatastoreResponse, LoadTargetsResponse
from droppydrop.services.admin import wipe_all
from droppydrop.services.targets import bulk_load_targets, read_initial_targets

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/admin', tags=['admin'])


@router.post('/load-initial-targets', response_model=LoadTargetsResponse)
def load_initial_targets(
    store: Datastore = Depends(get_datastore),
    settings: Settings = Depends(get_settings),
) -> LoadTargetsResponse:
    """Create a released target for every player listed in the seed file."""
    path = settings.initial_targets_path
    try:
        entries = read_initial_targets(path)
    except OSError as exc:
        logger.error('Failed to open %s: %s', path, exc)
        raise HTTPException(
            status_code=500, detail=f'Could not find {path.name} on the server.'
        ) from None
    except ValidationError as exc:
        logger.error('Failed to parse %s: %s', path, exc)
        raise HTTPException(status_code=500, detail=f'Failed to parse {path.name}.') from None

    targets = bulk_load_targets(store, entries, secret=settings.hmac_secret)
    logger.info('Loaded %d initial targets from %s', len(targets), path)
    return LoadTargetsResponse(
        message=f'Successfully loaded and set {len(targets)} initial targets.',
        count=len(targets),
    )


@router.post('/clear-datastore', response_model=ClearDatastoreResponse)
def clear_datastore(
    confirm: str | None = Query(default=None, description='Must be "true" to proceed.'),
    store: Datastore = Depends(get_datastore),
    settings: Settings = Depends(get_settings),
) -> ClearDatastoreResponse:
    """Delete every record of every kind. Irreversible."""
    if confirm != 'true':
        raise HTTPException(
            status_code=403,
            detail='This is a destructive operation. Add ?confirm=true to the URL to proceed.',
        )
    logger.warning('Clearing the datastore')
    report = wipe_all(store, batch_size=settings.delete_batch_size)
    return ClearDatastoreResponse.from_report(report)
