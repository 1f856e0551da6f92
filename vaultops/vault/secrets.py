"""
Secret operations on a team engine.

Each secret lives at ``<engine>/<key>`` and stores its value under a field
named after the key. Errors from the Vault client propagate unchanged.
"""

from __future__ import annotations

import logging

from vaultops.config import Credentials
from vaultops.vault.client import get_client
from vaultops.vault.errors import SecretDecodeError

logger = logging.getLogger(__name__)


def _secret_path(key: str, creds: Credentials) -> str:
    return f"{creds.engine_name}/{key}"


def list_secrets(creds: Credentials) -> list[str]:
    """List secret keys in the engine. Returns [] if the path does not exist."""
    client = get_client(creds)
    logger.debug("Listing secrets at %s", creds.engine_name)
    response = client.list(creds.engine_name)
    if response is None:
        return []

    keys = (response.get("data") or {}).get("keys")
    if not isinstance(keys, list):
        raise SecretDecodeError(f"unexpected list response for {creds.engine_name}")

    result: list[str] = []
    for key in keys:
        if not isinstance(key, str):
            raise SecretDecodeError(f"non-string key in listing: {key!r}")
        result.append(key)
    return result


def get_secret(key: str, creds: Credentials) -> str | None:
    """Read a secret's value. Returns None if the secret or its field is absent."""
    client = get_client(creds)
    path = _secret_path(key, creds)
    logger.debug("Reading secret at %s", path)
    response = client.read(path)
    if response is None:
        return None
    value = (response.get("data") or {}).get(key)
    if value is not None and not isinstance(value, str):
        raise SecretDecodeError(f"secret {key} is not a string value")
    return value


def put_secret(key: str, value: str, creds: Credentials) -> None:
    """Write a secret, silently overwriting any existing value."""
    # TODO: reject keys outside [\w.-]+ once teams agree on a naming scheme
    client = get_client(creds)
    path = _secret_path(key, creds)
    logger.debug("Writing secret at %s", path)
    client.write_data(path, data={key: value})


def delete_secret(key: str, creds: Credentials) -> None:
    """Permanently delete a secret.

    This is a hard delete on the logical path, not the soft, versioned delete
    of kv v2; the value cannot be recovered.
    """
    client = get_client(creds)
    path = _secret_path(key, creds)
    logger.debug("Deleting secret at %s", path)
    client.delete(path)
