"""
Tests for hc_vault.config module.
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from hc_vault.config import RenewPolicy, VaultConfig, load_config


class TestVaultConfig:
    """Tests for VaultConfig class."""

    def test_config_defaults(self):
        """Test the defaults without any environment."""
        config = VaultConfig()
        assert config.vault_url == "http://localhost:8200"
        assert config.renew_policy == RenewPolicy.REAUTH
        assert config.renew_threshold == 0.75
        assert config.token is None
        assert config.timeout == 30.0
        assert config.verify_tls is True
        assert config.debug is False

    def test_config_with_all_options(self):
        """Test creating config with all options."""
        config = VaultConfig(
            vault_url="https://vault.example.com:8200",
            renew_policy="renew",
            renew_threshold=0.5,
            token="s.token",
            token_duration=60,
            timeout=5,
            verify_tls=False,
            debug=True,
        )
        assert config.renew_policy == RenewPolicy.RENEW
        assert config.renew_threshold == 0.5
        assert config.token == "s.token"
        assert config.token_duration == 60
        assert config.timeout == 5.0
        assert config.verify_tls is False
        assert config.debug is True

    def test_config_url_strips_trailing_slash(self):
        """Test trailing slashes are removed from the URL."""
        config = VaultConfig(vault_url="http://vault.test:8200/")
        assert config.vault_url == "http://vault.test:8200"
        assert config.api_url == "http://vault.test:8200/v1/"

    def test_config_url_validation_invalid(self):
        """Test URL validation with invalid URLs."""
        invalid_urls = [
            "ftp://vault.test",
            "vault.test:8200",  # Missing protocol
        ]
        for url in invalid_urls:
            with pytest.raises(ValidationError):
                VaultConfig(vault_url=url)

    def test_config_threshold_validation(self):
        """Test the renew threshold must leave a wait before renewing."""
        for threshold in (-0.1, 1.0, 1.5):
            with pytest.raises(ValidationError):
                VaultConfig(renew_threshold=threshold)

    def test_config_invalid_policy(self):
        with pytest.raises(ValidationError):
            VaultConfig(renew_policy="sometimes")

    @patch.dict(os.environ, {
        "VAULT_URL": "https://env.vault.test",
        "VAULT_TOKEN": "env-token",
        "VAULT_RENEW_POLICY": "nothing",
        "VAULT_TIMEOUT": "10",
    })
    def test_config_from_environment(self):
        """Test loading config from environment variables."""
        config = VaultConfig()
        assert config.vault_url == "https://env.vault.test"
        assert config.token == "env-token"
        assert config.renew_policy == RenewPolicy.NOTHING
        assert config.timeout == 10.0

    @patch.dict(os.environ, {"VAULT_ADDR": "https://addr.vault.test"})
    def test_config_from_vault_addr(self):
        """Test VAULT_ADDR, as used by the vault CLI, is understood."""
        config = VaultConfig()
        assert config.vault_url == "https://addr.vault.test"

    def test_config_kwargs_override_env(self):
        """Test that kwargs override environment variables."""
        with patch.dict(os.environ, {"VAULT_URL": "https://env.vault.test"}):
            config = VaultConfig(vault_url="https://override.vault.test")
            assert config.vault_url == "https://override.vault.test"

    def test_config_from_env_file(self, tmp_path, monkeypatch):
        """Test loading config from a .env file in the working directory."""
        (tmp_path / ".env").write_text("VAULT_URL=http://dotenv.vault.test\n")
        monkeypatch.chdir(tmp_path)

        config = VaultConfig()
        assert config.vault_url == "http://dotenv.vault.test"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_config_with_kwargs(self):
        """Test load_config with keyword arguments."""
        config = load_config(vault_url="http://vault.test")
        assert isinstance(config, VaultConfig)
        assert config.vault_url == "http://vault.test"

    @patch.dict(os.environ, {
        "VAULT_URL": "https://env.vault.test",
        "VAULT_TOKEN": "env-token",
    })
    def test_load_config_kwargs_override_env(self):
        """Test that load_config kwargs override environment."""
        config = load_config(vault_url="https://override.vault.test", debug=True)
        assert config.vault_url == "https://override.vault.test"
        assert config.debug is True
        # Should still use env for the token
        assert config.token == "env-token"
