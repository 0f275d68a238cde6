"""Tests for configuration loading and environment substitution."""

import json

import pytest
import yaml

from ruleknobs_config import ConfigError, FactoryBase, load_config, substitute_env_vars


class TestSubstituteEnvVars:
    """Test substitute_env_vars utility function."""

    def test_required_variable(self, monkeypatch):
        monkeypatch.setenv("RK_PATTERN", "^[a-z]+$")
        assert substitute_env_vars({"pattern": "${RK_PATTERN}"}) == {"pattern": "^[a-z]+$"}

    def test_default_value(self, monkeypatch):
        monkeypatch.delenv("RK_MISSING", raising=False)
        assert substitute_env_vars("${RK_MISSING:fallback}") == "fallback"
        assert substitute_env_vars("${RK_MISSING:}") == ""

    def test_nested_structures(self, monkeypatch):
        monkeypatch.setenv("RK_MIN", "4")
        data = {"fields": [{"rules": [{"value": "${RK_MIN}"}]}], "strict": True, "count": 3}
        assert substitute_env_vars(data) == {
            "fields": [{"rules": [{"value": "4"}]}],
            "strict": True,
            "count": 3,
        }

    def test_embedded_reference(self, monkeypatch):
        monkeypatch.setenv("RK_NAME", "signup")
        assert substitute_env_vars("schema-${RK_NAME}-v1") == "schema-signup-v1"

    def test_missing_required_variable(self, monkeypatch):
        monkeypatch.delenv("RK_MISSING", raising=False)
        with pytest.raises(ConfigError) as exc_info:
            substitute_env_vars({"key": "${RK_MISSING}"})
        assert exc_info.value.context == {"variable": "RK_MISSING"}


class TestLoadConfig:
    """Test load_config with YAML and JSON files."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "schema.yaml"
        path.write_text(yaml.safe_dump({"name": "signup", "fields": []}))
        assert load_config(path) == {"name": "signup", "fields": []}

    def test_load_yml_extension(self, tmp_path):
        path = tmp_path / "schema.yml"
        path.write_text("name: signup\n")
        assert load_config(str(path)) == {"name": "signup"}

    def test_load_json(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps({"name": "signup"}))
        assert load_config(path) == {"name": "signup"}

    def test_empty_files(self, tmp_path):
        yaml_path = tmp_path / "empty.yaml"
        yaml_path.write_text("")
        json_path = tmp_path / "empty.json"
        json_path.write_text("  \n")
        assert load_config(yaml_path) == {}
        assert load_config(json_path) == {}

    def test_env_substitution_applied(self, tmp_path, monkeypatch):
        monkeypatch.setenv("RK_SCHEMA_NAME", "orders")
        path = tmp_path / "schema.yaml"
        path.write_text("name: ${RK_SCHEMA_NAME}\n")
        assert load_config(path) == {"name": "orders"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "nope.yaml")
        assert "nope.yaml" in exc_info.value.context["path"]

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "schema.toml"
        path.write_text("name = 'x'\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_parse_error(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_non_mapping_document(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.context["got"] == "list"


class TestFactoryBase:
    """Test FactoryBase contract."""

    def test_create_not_implemented(self):
        with pytest.raises(NotImplementedError):
            FactoryBase().create(name="x")

    def test_subclass_create(self):
        class EchoFactory(FactoryBase):
            def create(self, **config):
                return config

        assert EchoFactory().create(a=1) == {"a": 1}
