"""Tests for team engine setup."""

import hvac.exceptions
import pytest

from vaultops.vault.engine import CAPABILITIES, build_policy, enable_engine
from vaultops.vault.models import TeamEngine


class TestBuildPolicy:
    def test_policy_text(self):
        assert build_policy("demo") == (
            'path "demo/*" { capabilities = ["read", "create", "update", "list", "delete"] }'
        )

    def test_all_capabilities_present(self):
        policy = build_policy("team-a")
        for cap in CAPABILITIES:
            assert f'"{cap}"' in policy


class TestEnableEngine:
    def test_fresh_engine(self, fake_vault, creds):
        engine = enable_engine(creds)
        assert isinstance(engine, TeamEngine)
        assert engine.name == "demo"
        assert engine.token
        assert fake_vault.mounts == {"demo": "kv"}
        assert fake_vault.policies["demo"] == build_policy("demo")
        assert fake_vault.tokens[engine.token] == ["demo"]

    def test_existing_mount_fails(self, fake_vault, creds):
        enable_engine(creds)
        with pytest.raises(hvac.exceptions.InvalidRequest):
            enable_engine(creds)
        assert len(fake_vault.tokens) == 1
