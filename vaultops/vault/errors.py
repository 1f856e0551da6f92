"""Error types raised by vaultops itself.

Errors from the Vault client (hvac) and its transport are not wrapped; they
propagate to the caller unchanged.
"""

from __future__ import annotations


class VaultOpsError(Exception):
    """Base class for vaultops errors."""


class SecretDecodeError(VaultOpsError):
    """A Vault response could not be decoded into the expected shape."""


class SecretNotFoundError(VaultOpsError):
    """The requested secret does not exist in the engine."""

    def __init__(self, key: str) -> None:
        super().__init__(f"could not retrieve secret: {key}")
        self.key = key
