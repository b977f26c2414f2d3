"""Tests for catalog configuration loading."""

import pytest
import yaml

from catalog.config import CatalogConfig


class TestCatalogConfig:
    def test_defaults(self):
        config = CatalogConfig()
        assert config.log_level == "WARNING"
        assert config.demos == []
        assert config.echo is True

    def test_log_level_is_normalized(self):
        assert CatalogConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            CatalogConfig(log_level="chatty")

    def test_yaml_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "catalog.yaml"
        original = CatalogConfig(log_level="INFO", demos=["observer", "proxy"], echo=False)

        original.to_yaml(path)
        loaded = CatalogConfig.from_yaml(path)

        assert loaded == original

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert CatalogConfig.from_yaml(path) == CatalogConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            CatalogConfig.from_yaml(tmp_path / "missing.yaml")

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValueError, match="Unknown config keys: colour"):
            CatalogConfig.from_dict({"colour": "blue"})

    def test_shipped_config_loads(self):
        config = CatalogConfig.from_yaml("config/catalog.yaml")
        assert config.demos == []

    def test_from_env(self):
        environ = {
            "CATALOG_LOG_LEVEL": "info",
            "CATALOG_JSON_LOGS": "yes",
            "CATALOG_DEMOS": "observer, strategy,",
            "CATALOG_LOG_FILE": "",
            "UNRELATED": "ignored",
        }
        config = CatalogConfig.from_env(environ)

        assert config.log_level == "INFO"
        assert config.json_logs is True
        assert config.demos == ["observer", "strategy"]
        assert config.log_file is None

    def test_env_overrides_base(self):
        base = CatalogConfig(log_level="ERROR", use_colors=False, demos=["proxy"])
        config = CatalogConfig.from_env({"CATALOG_USE_COLORS": "1"}, base=base)

        assert config.use_colors is True
        assert config.log_level == "ERROR"
        assert config.demos == ["proxy"]

    def test_invalid_env_boolean(self):
        with pytest.raises(ValueError, match="CATALOG_ECHO"):
            CatalogConfig.from_env({"CATALOG_ECHO": "maybe"})

    def test_to_yaml_is_plain_mapping(self, tmp_path):
        path = tmp_path / "out.yaml"
        CatalogConfig(demos=["state"]).to_yaml(path)

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        assert data["demos"] == ["state"]
        assert list(data) == ["log_level", "json_logs", "log_file", "use_colors", "demos", "echo"]
