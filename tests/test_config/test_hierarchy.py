"""Tests for config hierarchy."""

import pytest

from platefetch.config import hierarchy
from platefetch.config.hierarchy import (
    _coerce_env_value,
    _load_yaml_config,
    load_config_hierarchy,
)


@pytest.fixture(autouse=True)
def _isolated(tmp_path, monkeypatch):
    """Keep the user's real config and environment out of these tests."""
    monkeypatch.setattr(hierarchy, "_GLOBAL_CONFIG_PATH", tmp_path / "global" / "config.yaml")
    monkeypatch.chdir(tmp_path)
    for env_key in hierarchy._ENV_MAP:
        monkeypatch.delenv(env_key, raising=False)


class TestLoadConfigHierarchy:
    def test_returns_defaults(self):
        config = load_config_hierarchy()
        assert config["max_concurrency"] == 5
        assert config["timeout"] == 10.0
        assert config["follow_redirects"] is True

    def test_runtime_overrides(self):
        config = load_config_hierarchy(max_concurrency=10, timeout=2.5)
        assert config["max_concurrency"] == 10
        assert config["timeout"] == 2.5

    def test_none_overrides_ignored(self):
        config = load_config_hierarchy(max_concurrency=None)
        assert config["max_concurrency"] == 5

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("PLATEFETCH_USER_AGENT", "crawler/2.0")
        config = load_config_hierarchy()
        assert config["user_agent"] == "crawler/2.0"

    def test_runtime_beats_env(self, monkeypatch):
        monkeypatch.setenv("PLATEFETCH_MAX_CONCURRENCY", "3")
        config = load_config_hierarchy(max_concurrency=7)
        assert config["max_concurrency"] == 7

    def test_env_numeric_coercion(self, monkeypatch):
        monkeypatch.setenv("PLATEFETCH_MAX_CONCURRENCY", "10")
        config = load_config_hierarchy()
        assert config["max_concurrency"] == 10
        assert isinstance(config["max_concurrency"], int)

    def test_env_bool_coercion(self, monkeypatch):
        monkeypatch.setenv("PLATEFETCH_FOLLOW_REDIRECTS", "no")
        config = load_config_hierarchy()
        assert config["follow_redirects"] is False

    def test_project_config(self, tmp_path):
        (tmp_path / "platefetch.yaml").write_text("max_concurrency: 8\ntimeout: 30\n")
        config = load_config_hierarchy()
        assert config["max_concurrency"] == 8
        assert config["timeout"] == 30

    def test_project_config_found_from_subdir(self, tmp_path, monkeypatch):
        (tmp_path / "platefetch.yaml").write_text("max_concurrency: 4\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert load_config_hierarchy()["max_concurrency"] == 4

    def test_project_beats_global(self, tmp_path):
        global_path = tmp_path / "global" / "config.yaml"
        global_path.parent.mkdir()
        global_path.write_text("max_concurrency: 2\nuser_agent: global\n")
        (tmp_path / "platefetch.yaml").write_text("max_concurrency: 6\n")

        config = load_config_hierarchy()

        assert config["max_concurrency"] == 6
        assert config["user_agent"] == "global"


class TestLoadYamlConfig:
    def test_loads_valid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("key: value\n")
        assert _load_yaml_config(path) == {"key": "value"}

    def test_returns_none_for_missing(self, tmp_path):
        assert _load_yaml_config(tmp_path / "nonexistent.yaml") is None

    def test_returns_none_for_non_dict(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("- item1\n- item2\n")
        assert _load_yaml_config(path) is None

    def test_returns_none_for_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("key: [unclosed\n")
        assert _load_yaml_config(path) is None


class TestCoerceEnvValue:
    def test_bool_true(self):
        assert _coerce_env_value("follow_redirects", "true") is True
        assert _coerce_env_value("follow_redirects", "1") is True
        assert _coerce_env_value("follow_redirects", "yes") is True

    def test_bool_false(self):
        assert _coerce_env_value("follow_redirects", "false") is False
        assert _coerce_env_value("follow_redirects", "0") is False

    def test_int_coercion(self):
        assert _coerce_env_value("max_concurrency", "10") == 10

    def test_float_coercion(self):
        assert _coerce_env_value("timeout", "2.5") == 2.5

    def test_bad_number_passthrough(self):
        assert _coerce_env_value("max_concurrency", "many") == "many"

    def test_string_passthrough(self):
        assert _coerce_env_value("user_agent", "bot") == "bot"
