"""
Team engine setup: kv mount, access policy and a scoped token.
"""

from __future__ import annotations

import logging

from vaultops.config import Credentials
from vaultops.vault.client import get_client
from vaultops.vault.models import TeamEngine

logger = logging.getLogger(__name__)

ENGINE_TYPE = "kv"
CAPABILITIES = ["read", "create", "update", "list", "delete"]


def build_policy(engine_name: str) -> str:
    """Policy granting full CRUD and list on everything under the engine."""
    capabilities = ", ".join(f'"{c}"' for c in CAPABILITIES)
    return f'path "{engine_name}/*" {{ capabilities = [{capabilities}] }}'


def enable_engine(creds: Credentials) -> TeamEngine:
    """Mount a kv engine for the team, attach its policy and issue a token.

    Needs a token allowed to manage mounts, policies and tokens (normally
    root). Fails with the Vault client's error if the mount already exists.
    """
    client = get_client(creds)
    name = creds.engine_name

    logger.info("Mounting %s engine at %s", ENGINE_TYPE, name)
    client.sys.enable_secrets_engine(backend_type=ENGINE_TYPE, path=name)

    policy = build_policy(name)
    logger.info("Writing policy %s", name)
    client.sys.create_or_update_policy(name=name, policy=policy)

    logger.info("Creating token for policy %s", name)
    response = client.auth.token.create(policies=[name])
    token = response["auth"]["client_token"]

    return TeamEngine(name=name, policy=policy, token=token, engine_type=ENGINE_TYPE)
