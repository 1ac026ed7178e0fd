"""Unit tests for database configuration."""

import os
from unittest.mock import patch

import pytest

from src.storefront.runtime.config.config_data import DatabaseConfig


class TestDatabaseConfig:
    def test_sqlite_url_used_verbatim(self):
        config = DatabaseConfig(url="sqlite:///./storefront.db", environment_mode="production")

        assert config.is_sqlite
        assert config.connection_string == "sqlite:///./storefront.db"

    def test_development_password_from_url(self):
        config = DatabaseConfig(url="postgresql://app:pw@localhost/shop")

        assert config.password == "pw"
        assert config.connection_string == "postgresql://app:pw@localhost/shop"

    def test_production_password_from_env(self):
        config = DatabaseConfig(
            url="postgresql://app@db/shop",
            environment_mode="production",
            password_env_var="SHOP_DB_PASSWORD",
        )

        with patch.dict(os.environ, {"SHOP_DB_PASSWORD": "s3cret"}):
            assert config.connection_string == "postgresql://app:s3cret@db/shop"

    def test_production_password_from_file(self, tmp_path):
        secret = tmp_path / "db_password"
        secret.write_text("filepw\n")
        config = DatabaseConfig(
            url="postgresql://app@db/shop",
            environment_mode="production",
            password_file=str(secret),
        )

        assert config.password == "filepw"

    def test_production_missing_env_password(self):
        config = DatabaseConfig(
            url="postgresql://app@db/shop",
            environment_mode="production",
            password_env_var="UNSET_DB_PASSWORD",
        )

        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="UNSET_DB_PASSWORD not set"):
                _ = config.password

    def test_invalid_environment_mode(self):
        config = DatabaseConfig(url="postgresql://app@db/shop", environment_mode="staging")

        with pytest.raises(ValueError, match="Invalid environment_mode"):
            _ = config.password
