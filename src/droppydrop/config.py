"""Runtime configuration, loaded from the environment (prefix ``DROPPYDROP_``) or a ``.env`` file."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='DROPPYDROP_', env_file='.env', extra='ignore', populate_by_name=True
    )

    # ── Storage ──────────────────────────────────────────────────────────────
    database_url: str = Field(
        default='sqlite:///data/droppydrop.db',
        description='SQLAlchemy URL. The default SQLite file is relative to the working directory.',
    )
    delete_batch_size: int = Field(default=500, ge=1, description='Keys per delete call.')

    # ── Secrets (obfuscation only, not access control) ───────────────────────
    obfuscation_key: str = 'THIS_IS_A_STATIC_32_BYTE_SECRET_KEY'
    hmac_secret: str = 'a-very-secret-key-for-the-game'

    # ── Files ────────────────────────────────────────────────────────────────
    initial_targets_path: Path = Path('static/initial_targets.json')
    static_dir: Path = Path('static')

    # ── Server ───────────────────────────────────────────────────────────────
    api_prefix: str = Field(
        default='',
        pattern=r'^(/[A-Za-z0-9_-]+)*$',
        description='Path prefix for the JSON API, e.g. "/api" for the original web pages.',
    )
    app_version: str | None = Field(
        default=None,
        validation_alias=AliasChoices('DROPPYDROP_APP_VERSION', 'GAE_VERSION'),
    )
    log_level: str = 'INFO'
    host: str = '0.0.0.0'
    port: int = Field(default=8080, validation_alias=AliasChoices('DROPPYDROP_PORT', 'PORT'))


@lru_cache
def get_settings() -> Settings:
    return Settings()
