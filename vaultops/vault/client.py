"""
Client factory: an hvac.Client bound to the configured address and token.

A new client is built for every operation; nothing is cached between calls.
"""

from __future__ import annotations

import logging

import hvac

from vaultops.config import Credentials

logger = logging.getLogger(__name__)


def get_client(creds: Credentials) -> hvac.Client:
    """Create a Vault client for creds.url authenticated with creds.token."""
    logger.debug("Creating Vault client for %s", creds.url)
    client = hvac.Client(url=creds.url, verify=creds.verify)
    client.token = creds.token
    return client
