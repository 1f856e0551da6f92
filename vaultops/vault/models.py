"""Vault data models."""

from __future__ import annotations

from pydantic import BaseModel


class TeamEngine(BaseModel):
    """A freshly configured team engine: kv mount, policy and issued token."""

    name: str
    policy: str
    token: str
    engine_type: str = "kv"
