"""Tests for core infrastructure modules."""

from unittest.mock import MagicMock
import logging
import pytest
from pydantic import ValidationError

from vault.base import ResourceData
from vault.base.config import VaultConfig, validate_config
from vault.base.client_cache import ClientCache
from vault.base.exceptions import ConfigurationError
from vault.base.logger import VaultjackLogger, StructuredFormatter
from vault.base.schema import (
    IdentityEntityAliasSchema,
    TerraformCloudRoleSchema,
    validate_schema,
)


# ══════════════════════════════════════════════════════════════════════
# Config
# ══════════════════════════════════════════════════════════════════════

class TestVaultConfig:
    def test_explicit_values(self):
        cfg = VaultConfig(url="https://vault:8200", token="s.token", namespace="admin")
        assert cfg.url == "https://vault:8200"
        assert cfg.token == "s.token"
        assert cfg.namespace == "admin"

    def test_env_fallback(self, monkeypatch):
        monkeypatch.setenv("VAULT_ADDR", "https://env-vault:8200")
        monkeypatch.setenv("VAULT_TOKEN", "env-token")
        monkeypatch.setenv("VAULT_SKIP_VERIFY", "true")
        monkeypatch.setenv("VAULT_CLIENT_TIMEOUT", "5")
        cfg = VaultConfig()
        assert cfg.url == "https://env-vault:8200"
        assert cfg.token == "env-token"
        assert cfg.verify is False
        assert cfg.timeout == 5

    def test_explicit_verify_wins_over_env(self, monkeypatch):
        monkeypatch.setenv("VAULT_SKIP_VERIFY", "1")
        cfg = VaultConfig(url="https://vault:8200", verify=True)
        assert cfg.verify is True

    def test_url_required(self, monkeypatch):
        monkeypatch.delenv("VAULT_ADDR", raising=False)
        with pytest.raises(ValidationError, match="url is required"):
            VaultConfig()

    def test_unknown_key(self):
        with pytest.raises(ValidationError):
            VaultConfig(url="https://vault:8200", region="us-east-1")


class TestValidateConfig:
    def test_valid(self):
        cfg = validate_config({"url": "https://vault:8200", "token": "t"})
        assert isinstance(cfg, VaultConfig)
        assert cfg.token == "t"


# ══════════════════════════════════════════════════════════════════════
# Schema
# ══════════════════════════════════════════════════════════════════════

class TestSchema:
    def test_role_defaults(self):
        model = validate_schema(
            "terraform_cloud_secret_backend_role",
            {"name": "ci", "backend": "tfc", "organization": "acme", "team_id": None},
        )
        assert isinstance(model, TerraformCloudRoleSchema)
        assert model.ttl == 0
        assert model.max_ttl == 0
        assert model.team_id is None

    def test_role_declarations(self):
        assert "backend" in TerraformCloudRoleSchema.FORCE_NEW
        assert TerraformCloudRoleSchema.DEPRECATED == {"path": "backend"}

    def test_alias_metadata_must_be_strings(self):
        with pytest.raises(ConfigurationError):
            validate_schema("identity_entity_alias", {
                "name": "alice",
                "mount_accessor": "auth_userpass_1234",
                "canonical_id": "entity-1",
                "custom_metadata": {"team": ["a", "b"]},
            })

    def test_alias_valid(self):
        model = validate_schema("identity_entity_alias", {
            "name": "alice",
            "mount_accessor": "auth_userpass_1234",
            "canonical_id": "entity-1",
        })
        assert isinstance(model, IdentityEntityAliasSchema)
        assert model.custom_metadata == {}

    def test_unknown_field(self):
        with pytest.raises(ConfigurationError):
            validate_schema("identity_entity_alias", {
                "name": "alice",
                "mount_accessor": "m",
                "canonical_id": "e",
                "policies": ["default"],
            })

    def test_unknown_resource(self):
        with pytest.raises(ValueError, match="No schema"):
            validate_schema("kv_secret", {})


# ══════════════════════════════════════════════════════════════════════
# Resource state
# ══════════════════════════════════════════════════════════════════════

class TestResourceData:
    def test_identity(self):
        data = ResourceData(id="tfc/role/ci")
        assert data.id == "tfc/role/ci"
        data.set_id("")
        assert data.id == ""

    @pytest.mark.parametrize("value", [None, "", 0, {}, []])
    def test_get_ok_zero_values(self, value):
        data = ResourceData({"ttl": value})
        assert data.get_ok("ttl") is None
        assert not data.is_set("ttl")

    def test_get_ok_set(self):
        data = ResourceData({"ttl": 300, "custom_metadata": {"a": "b"}})
        assert data.get_ok("ttl") == 300
        assert data.get_ok("custom_metadata") == {"a": "b"}

    def test_attributes_are_copied(self):
        attrs = {"name": "ci"}
        data = ResourceData(attrs)
        data.set("name", "other")
        assert attrs["name"] == "ci"

    def test_to_dict(self):
        data = ResourceData({"name": "ci"}, id="tfc/role/ci")
        assert data.to_dict() == {"id": "tfc/role/ci", "name": "ci"}


# ══════════════════════════════════════════════════════════════════════
# Client Cache
# ══════════════════════════════════════════════════════════════════════

class TestClientCache:
    def test_singleton(self):
        a = ClientCache()
        b = ClientCache()
        assert a is b

    def test_caches_client(self):
        cache = ClientCache()
        cache.clear()
        factory = MagicMock(return_value="client_instance")
        cfg = VaultConfig(url="https://vault:8200", token="t")
        c1 = cache.get_or_create(cfg, factory)
        c2 = cache.get_or_create(VaultConfig(url="https://vault:8200", token="t"), factory)
        assert c1 == c2
        factory.assert_called_once_with(cfg)

    def test_different_config_different_client(self):
        cache = ClientCache()
        cache.clear()
        factory = MagicMock(side_effect=["client_a", "client_b"])
        c1 = cache.get_or_create(VaultConfig(url="https://vault:8200", token="a"), factory)
        c2 = cache.get_or_create(VaultConfig(url="https://vault:8200", token="b"), factory)
        assert c1 != c2
        assert factory.call_count == 2

    def test_clear(self):
        cache = ClientCache()
        cache.clear()
        factory = MagicMock(side_effect=["v1", "v2"])
        cfg = VaultConfig(url="https://vault:8200")
        cache.get_or_create(cfg, factory)
        cache.clear()
        assert cache.get_or_create(cfg, factory) == "v2"


# ══════════════════════════════════════════════════════════════════════
# Logger
# ══════════════════════════════════════════════════════════════════════

class TestVaultjackLogger:
    def test_log_operation(self, capfd):
        logger = VaultjackLogger("test_vj")
        logger.logger.setLevel(logging.DEBUG)
        logger.warning(
            "test message",
            resource="identity_entity_alias",
            operation="create",
            path="/identity/entity-alias",
        )
        captured = capfd.readouterr()
        assert "test message" in captured.err
        assert "identity_entity_alias" in captured.err
        assert "request_id" in captured.err

    def test_structured_formatter(self):
        fmt = StructuredFormatter()
        record = logging.LogRecord(
            name="test", level=logging.INFO, pathname="", lineno=0,
            msg="hi", args=(), exc_info=None,
        )
        record.path = "tfc/role/ci"
        record.request_id = "abc"
        output = fmt.format(record)
        assert '"path": "tfc/role/ci"' in output
        assert '"request_id": "abc"' in output
