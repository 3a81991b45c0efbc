"""Tests for configuration loading.

These tests verify:
- Values are read from config.yaml and the environment
- Missing credentials fail fast with ConfigurationError
- get_config caches the loaded configuration
"""

import pytest

from src.config import configuration
from src.config.configuration import ConfigurationError, get_config, load_config

REQUIRED_ENV = {
    "AWS_ACCESS_KEY_ID": "AKIA-test",
    "AWS_SECRET_ACCESS_KEY": "test-secret",
    "COSMOSDB_ENDPOINT": "https://test.documents.azure.com:443/",
    "COSMOSDB_KEY": "test-key",
}

YAML_CONTENT = {
    "object_storage": {
        "bucket_name": "test-images",
        "region": "eu-central-1",
        "image_prefix": "productImages",
        "multipart_threshold_mb": 16,
    },
    "cosmosdb": {"database_name": "test-catalog", "products_container": "products"},
    "product_form": {"currency_symbol": "₱"},
    "logging": {"level": "DEBUG"},
}


class TestLoadConfig:
    @pytest.fixture
    def yaml_config(self, monkeypatch):
        """Serve an in-memory config.yaml and reset the singleton around each test."""
        content = {section: dict(values) for section, values in YAML_CONTENT.items()}
        monkeypatch.setattr(configuration, "_load_yaml_config", lambda: content)
        monkeypatch.setattr(configuration, "load_dotenv", lambda: None)
        configuration._config = None
        yield content
        configuration._config = None

    @pytest.fixture
    def env(self, monkeypatch):
        for key, value in REQUIRED_ENV.items():
            monkeypatch.setenv(key, value)
        monkeypatch.delenv("S3_ENDPOINT_URL", raising=False)

    def test_loads_all_sections(self, yaml_config, env):
        config = load_config()

        assert config.object_storage.bucket_name == "test-images"
        assert config.object_storage.region == "eu-central-1"
        assert config.object_storage.access_key_id == "AKIA-test"
        assert config.object_storage.endpoint_url is None
        assert config.object_storage.multipart_threshold_mb == 16
        assert config.cosmosdb.endpoint == REQUIRED_ENV["COSMOSDB_ENDPOINT"]
        assert config.cosmosdb.database_name == "test-catalog"
        assert config.cosmosdb.partition_key_path == "/category"
        assert config.product_form.currency_symbol == "₱"
        assert config.logging.level == "DEBUG"

    def test_endpoint_override_from_environment(self, yaml_config, env, monkeypatch):
        monkeypatch.setenv("S3_ENDPOINT_URL", "http://localhost:9000")

        assert load_config().object_storage.endpoint_url == "http://localhost:9000"

    @pytest.mark.parametrize("missing", sorted(REQUIRED_ENV))
    def test_missing_credential_fails_fast(self, yaml_config, env, monkeypatch, missing):
        monkeypatch.delenv(missing)

        with pytest.raises(ConfigurationError, match=missing):
            load_config()

    def test_missing_bucket_fails_fast(self, yaml_config, env):
        del yaml_config["object_storage"]["bucket_name"]

        with pytest.raises(ConfigurationError, match="bucket_name"):
            load_config()

    def test_get_config_is_cached(self, yaml_config, env):
        assert get_config() is get_config()


class TestYamlFile:
    def test_missing_config_file(self, monkeypatch, tmp_path):
        monkeypatch.setattr(configuration, "_get_project_root", lambda: tmp_path)

        with pytest.raises(ConfigurationError, match="Configuration file not found"):
            configuration._load_yaml_config()

    def test_project_config_file_is_readable(self):
        content = configuration._load_yaml_config()

        assert content["object_storage"]["image_prefix"] == "productImages"
        assert content["cosmosdb"]["products_container"] == "products"
