"""Shared schema types used across both requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """Base for every API schema. Fields carry the camelCase aliases the web pages use."""

    model_config = ConfigDict(populate_by_name=True)


class StatusResponse(ApiModel):
    status: str = 'ok'
