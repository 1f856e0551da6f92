"""
Root-level shared test fixtures.

Provides an in-memory stand-in for the parts of hvac.Client that vaultops
uses, so the secret and engine operations can be exercised without a server.
"""

from __future__ import annotations

import uuid
from types import SimpleNamespace

import hvac.exceptions
import pytest

from vaultops.config import Credentials, reset_config


class FakeVault:
    """Mimics hvac.Client logical, sys and token calls against dicts."""

    def __init__(self) -> None:
        self.token = ""
        self.data: dict[str, dict] = {}
        self.mounts: dict[str, str] = {}
        self.policies: dict[str, str] = {}
        self.tokens: dict[str, list[str]] = {}
        self.sys = SimpleNamespace(
            enable_secrets_engine=self._enable_secrets_engine,
            create_or_update_policy=self._create_or_update_policy,
        )
        self.auth = SimpleNamespace(token=SimpleNamespace(create=self._create_token))

    def list(self, path):
        prefix = path.rstrip("/") + "/"
        keys = sorted({p[len(prefix):].split("/")[0] for p in self.data if p.startswith(prefix)})
        if not keys:
            return None
        return {"data": {"keys": keys}}

    def read(self, path):
        if path not in self.data:
            return None
        return {"data": dict(self.data[path])}

    def write_data(self, path, *, data=None, wrap_ttl=None):
        self.data[path] = dict(data or {})

    def delete(self, path):
        self.data.pop(path, None)

    def _enable_secrets_engine(self, backend_type, path=None, **kwargs):
        mount = (path or backend_type).strip("/")
        if mount in self.mounts:
            raise hvac.exceptions.InvalidRequest(
                f"path is already in use at {mount}/", errors=[f"path is already in use at {mount}/"]
            )
        self.mounts[mount] = backend_type

    def _create_or_update_policy(self, name, policy, pretty_print=True):
        self.policies[name] = policy

    def _create_token(self, policies=None, **kwargs):
        token = f"hvs.{uuid.uuid4().hex}"
        self.tokens[token] = list(policies or [])
        return {"auth": {"client_token": token, "policies": list(policies or [])}}


@pytest.fixture
def fake_vault(monkeypatch):
    """Route every vaultops client through one FakeVault instance."""
    fake = FakeVault()

    def _get_client(creds):
        fake.token = creds.token
        return fake

    monkeypatch.setattr("vaultops.vault.secrets.get_client", _get_client)
    monkeypatch.setattr("vaultops.vault.engine.get_client", _get_client)
    return fake


@pytest.fixture
def creds():
    return Credentials(url="http://vault.test:8200", token="s.root", engine_name="demo")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove env vars that feed the config defaults."""
    for key in ["VAULT_ADDR", "VAULT_TOKEN", "VAULTOPS_TEAM", "VAULT_SKIP_VERIFY", "VAULT_CACERT"]:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_config():
    """Reset config singleton between tests."""
    reset_config()
    yield
    reset_config()
