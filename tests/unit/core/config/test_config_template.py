"""Unit tests for config_template module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from src.storefront.runtime.config.config_template import (
    apply_environment_overrides,
    load_templated_yaml,
    substitute_env_vars,
)

REPO_CONFIG = Path(__file__).resolve().parents[4] / "config.yaml"


class TestSubstituteEnvVars:
    """Test cases for substitute_env_vars function."""

    def test_substitute_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert substitute_env_vars("${TEST_VAR}") == "test_value"

    def test_substitute_env_var_in_text(self):
        with patch.dict(os.environ, {"HOST": "localhost", "PORT": "8080"}):
            result = substitute_env_vars("Server running at http://${HOST}:${PORT}/api")
            assert result == "Server running at http://localhost:8080/api"

    def test_substitute_env_var_with_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-default_value}") == "default_value"

    def test_substitute_env_var_with_default_when_set(self):
        with patch.dict(os.environ, {"PRESENT_VAR": "actual_value"}):
            assert substitute_env_vars("${PRESENT_VAR:-default_value}") == "actual_value"

    def test_substitute_required_env_var_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(
                ValueError, match="Required environment variable MISSING_VAR not set"
            ):
                substitute_env_vars("${MISSING_VAR}")

    def test_substitute_env_var_with_custom_error(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(
                ValueError,
                match="Required environment variable MISSING_VAR: needed for the store",
            ):
                substitute_env_vars("${MISSING_VAR:?needed for the store}")


class TestEnvironmentOverrides:
    def test_prefixed_variable_promoted(self):
        with patch.dict(
            os.environ, {"PRODUCTION_DATABASE_URL": "postgresql://db/prod"}, clear=True
        ):
            apply_environment_overrides("production")
            assert os.environ["DATABASE_URL"] == "postgresql://db/prod"


class TestLoadTemplatedYaml:
    def test_load_repository_config(self):
        """The shipped config.yaml loads with the storefront routes."""
        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(REPO_CONFIG)

        routes = config.app.cors.routes
        assert set(routes) == {
            "/api/auth",
            "/api/categories",
            "/api/products",
            "/api/orders",
            "/api/review",
        }
        assert routes["/api/auth"].allowed_methods == ["POST", "OPTIONS"]
        assert routes["/api/orders"].allowed_methods == ["GET", "POST", "DELETE", "OPTIONS"]
        assert routes["/api/products"].allowed_origin == "http://localhost:3000"
        assert config.database.url == "sqlite:///./storefront.db"
        assert config.security.bcrypt_rounds == 10

    def test_env_values_flow_into_config(self):
        env = {
            "DATABASE_URL": "sqlite://",
            "CORS_ORIGIN": "https://shop.example.com",
            "LOG_FILE": "",
            "BCRYPT_ROUNDS": "6",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_templated_yaml(REPO_CONFIG)

        assert config.database.url == "sqlite://"
        assert config.app.cors.routes["/api/review"].allowed_origin == "https://shop.example.com"
        assert config.logging.file is None
        assert config.security.bcrypt_rounds == 6

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("config: [unclosed")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            load_templated_yaml(path)

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        with pytest.raises(ValueError, match="Failed to parse YAML"):
            load_templated_yaml(path)

    def test_invalid_values(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("config:\n  app:\n    port: not-a-port\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(path)
