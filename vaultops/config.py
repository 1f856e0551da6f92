"""
Centralized configuration for vaultops.

Defaults come from environment variables; CLI flags and prompt answers
override them to produce the Credentials handed to each Vault operation.

Usage:
    from vaultops.config import get_config
    cfg = get_config()
    print(cfg.url)           # "http://host.docker.internal:8200" or $VAULT_ADDR
    creds = cfg.credentials(team="demo")
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_URL = "http://host.docker.internal:8200"
DEFAULT_TEAM = "demo"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Credentials:
    """Vault address, access token and engine (team) name for one invocation."""

    url: str
    token: str = field(repr=False)
    engine_name: str
    verify: bool | str = True


@dataclass(frozen=True)
class VaultOpsConfig:
    """Environment-backed defaults for the CLI."""

    url: str = DEFAULT_URL
    token: str = field(default="", repr=False)
    team: str = ""
    verify: bool | str = True  # False, True, or a CA bundle path

    def credentials(
        self,
        url: str | None = None,
        token: str | None = None,
        team: str | None = None,
    ) -> Credentials:
        """Build Credentials, preferring explicit values over config defaults."""
        return Credentials(
            url=url if url is not None else self.url,
            token=token if token is not None else self.token,
            engine_name=team if team is not None else self.team,
            verify=self.verify,
        )


# Singleton
_config: VaultOpsConfig | None = None


def get_config() -> VaultOpsConfig:
    """Get or create the singleton config from environment variables."""
    global _config
    if _config is not None:
        return _config
    _config = _load_from_env()
    return _config


def _load_verify() -> bool | str:
    if os.environ.get("VAULT_SKIP_VERIFY", "").strip().lower() in _TRUTHY:
        return False
    cacert = os.environ.get("VAULT_CACERT", "")
    return cacert or True


def _load_from_env() -> VaultOpsConfig:
    """Load configuration from environment variables."""
    return VaultOpsConfig(
        url=os.environ.get("VAULT_ADDR", DEFAULT_URL),
        token=os.environ.get("VAULT_TOKEN", ""),
        team=os.environ.get("VAULTOPS_TEAM", ""),
        verify=_load_verify(),
    )


def reset_config() -> None:
    """Reset the singleton config (for testing)."""
    global _config
    _config = None
