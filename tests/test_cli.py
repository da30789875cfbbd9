"""Tests for the vaultjack command line."""

import json
from unittest.mock import patch, MagicMock
import pytest

from vault.cli import main
from vault.base.exceptions import RemoteError


@pytest.fixture
def client():
    mock_client = MagicMock()
    with patch("vault.factory.ClientCache") as mock_cache:
        mock_cache.return_value.get_or_create.return_value = mock_client
        yield mock_client


CONFIG = json.dumps({"url": "http://vault:8200", "token": "root"})


class TestCli:
    def test_read_alias(self, client, capsys):
        client.read.return_value = {"data": {
            "id": "alias-1",
            "name": "alice",
            "mount_accessor": "auth_userpass_1234",
            "canonical_id": "entity-1",
            "custom_metadata": None,
        }}
        main(["-r", "identity_entity_alias", "-c", CONFIG, "--id", "alias-1", "read"])
        out = json.loads(capsys.readouterr().out)
        assert out["id"] == "alias-1"
        assert out["custom_metadata"] == {}

    def test_import_role(self, client, capsys):
        client.read.return_value = {"data": {"organization": "acme", "ttl": 300}}
        main([
            "-r", "terraform_cloud_secret_backend_role", "-c", CONFIG,
            "--id", "tfc/role/ci", "import",
        ])
        out = json.loads(capsys.readouterr().out)
        assert out["backend"] == "tfc"
        assert out["name"] == "ci"
        assert out["organization"] == "acme"

    def test_create_role(self, client, capsys):
        client.read.return_value = {"data": {"organization": "acme"}}
        attrs = json.dumps({"name": "ci", "backend": "tfc", "organization": "acme"})
        main(["-r", "terraform_cloud_secret_backend_role", "-c", CONFIG, "-a", attrs, "create"])
        client.write.assert_called_once_with("tfc/role/ci", {"organization": "acme"})
        assert json.loads(capsys.readouterr().out)["id"] == "tfc/role/ci"

    def test_exists(self, client, capsys):
        client.read.return_value = None
        main(["-r", "identity_entity_alias", "-c", CONFIG, "-a", '{"name": "alice"}', "exists"])
        assert capsys.readouterr().out.strip() == "false"

    def test_delete(self, client, capsys):
        main(["-r", "identity_entity_alias", "-c", CONFIG, "--id", "alias-1", "delete"])
        assert capsys.readouterr().out.strip() == "OK"
        client.delete.assert_called_once_with("/identity/entity-alias/id/alias-1")

    def test_operation_failure(self, client, capsys):
        client.delete.side_effect = RemoteError("permission denied")
        with pytest.raises(SystemExit) as exc_info:
            main(["-r", "identity_entity_alias", "-c", CONFIG, "--id", "alias-1", "delete"])
        assert exc_info.value.code == 1
        assert "Operation failed" in capsys.readouterr().err

    def test_invalid_config_json(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["-r", "identity_entity_alias", "-c", "{not json", "read"])
        assert exc_info.value.code == 1
        assert "Invalid --config JSON" in capsys.readouterr().err

    def test_invalid_config_value(self, capsys):
        with pytest.raises(SystemExit):
            main(["-r", "identity_entity_alias", "-c", '{"bogus": 1}', "read"])
        assert "Error:" in capsys.readouterr().err
