"""
vaultops Vault facade: team secrets on a HashiCorp Vault server.

Public API:
    vault.list_secrets(creds)            → list of keys ([] if the engine path is absent)
    vault.get_secret(key, creds)         → value or None
    vault.put_secret(key, value, creds)  → store (overwrites)
    vault.delete_secret(key, creds)      → hard delete
    vault.enable_engine(creds)           → TeamEngine with the new team token
"""

from __future__ import annotations

from vaultops.vault.client import get_client
from vaultops.vault.engine import build_policy, enable_engine
from vaultops.vault.errors import SecretDecodeError, SecretNotFoundError, VaultOpsError
from vaultops.vault.models import TeamEngine
from vaultops.vault.secrets import delete_secret, get_secret, list_secrets, put_secret

__all__ = [
    "get_client",
    "list_secrets",
    "get_secret",
    "put_secret",
    "delete_secret",
    "enable_engine",
    "build_policy",
    "TeamEngine",
    "VaultOpsError",
    "SecretDecodeError",
    "SecretNotFoundError",
]
