"""Tests for the settings configuration module."""

import json
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from arscript.config import (
    ArScriptSettings,
    clear_settings_cache,
    get_settings,
    get_settings_for_cli,
    set_settings,
)
from arscript.exceptions import ConfigurationError


class TestDefaults:
    """Test default values."""

    def test_default_values(self):
        settings = ArScriptSettings(_env_file=None)
        assert settings.debug is False
        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"
        assert settings.log_file is None
        assert settings.character_cue_max_words == 1
        assert settings.words_per_page == 250
        assert settings.history_limit == 20
        assert settings.watch_debounce_seconds == 0.5
        assert settings.llm_endpoint is None
        assert settings.llm_api_key is None
        assert settings.llm_model is None
        assert settings.llm_timeout == 60.0


class TestValidation:
    """Test field validation and normalization."""

    def test_log_level_case_insensitive(self):
        assert ArScriptSettings(_env_file=None, log_level=" debug ").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            ArScriptSettings(_env_file=None, log_level="LOUD")

    def test_log_format_normalized(self):
        assert ArScriptSettings(_env_file=None, log_format="JSON").log_format == "json"

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("character_cue_max_words", -1),
            ("words_per_page", 0),
            ("history_limit", 0),
            ("watch_debounce_seconds", -0.1),
            ("llm_timeout", 0),
        ],
    )
    def test_range_checks(self, field, value):
        with pytest.raises(ValidationError):
            ArScriptSettings(_env_file=None, **{field: value})

    @pytest.mark.parametrize("value", ["", "default", "AUTO", "none"])
    def test_model_sentinels(self, value):
        assert ArScriptSettings(_env_file=None, llm_model=value).llm_model is None

    def test_log_file_expanded(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOG_ROOT", str(tmp_path))
        settings = ArScriptSettings(_env_file=None, log_file="$LOG_ROOT/arscript.log")
        assert settings.log_file == (tmp_path / "arscript.log").resolve()

    def test_log_file_rejects_collections(self):
        with pytest.raises(ValidationError):
            ArScriptSettings(_env_file=None, log_file=["a.log"])


class TestEnvironment:
    """Test environment variable loading."""

    def test_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("ARSCRIPT_WORDS_PER_PAGE", "300")
        monkeypatch.setenv("ARSCRIPT_LLM_ENDPOINT", "http://localhost:1234/v1")
        settings = ArScriptSettings.from_env()
        assert settings.words_per_page == 300
        assert settings.llm_endpoint == "http://localhost:1234/v1"

    def test_dotenv_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("ARSCRIPT_HISTORY_LIMIT=5\n")
        settings = ArScriptSettings.from_multiple_sources(env_file=env_file)
        assert settings.history_limit == 5


class TestFromFile:
    """Test loading configuration files."""

    def test_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"words_per_page": 300, "log_level": "info"}))
        settings = ArScriptSettings.from_file(path)
        assert settings.words_per_page == 300
        assert settings.log_level == "INFO"

    def test_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('character_cue_max_words = 2\nllm_model = "local"\n')
        settings = ArScriptSettings.from_file(path)
        assert settings.character_cue_max_words == 2
        assert settings.llm_model == "local"

    def test_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"history_limit": 3}))
        assert ArScriptSettings.from_file(path).history_limit == 3

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert ArScriptSettings.from_file(path).words_per_page == 250

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ArScriptSettings.from_file(tmp_path / "missing.yaml")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "config.ini"
        path.write_text("[arscript]\n")
        with pytest.raises(ConfigurationError, match="Unsupported configuration"):
            ArScriptSettings.from_file(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- words_per_page\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            ArScriptSettings.from_file(path)

    def test_misspelled_key(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("api_key: secret\n")
        with pytest.raises(ConfigurationError) as exc_info:
            ArScriptSettings.from_file(path)
        assert "llm_api_key" in exc_info.value.hint


class TestPrecedence:
    """Test merging of configuration sources."""

    def test_later_files_win(self, tmp_path):
        first = tmp_path / "first.yaml"
        first.write_text("words_per_page: 100\nhistory_limit: 4\n")
        second = tmp_path / "second.json"
        second.write_text(json.dumps({"words_per_page": 200}))

        settings = ArScriptSettings.from_multiple_sources(config_files=[first, second])
        assert settings.words_per_page == 200
        assert settings.history_limit == 4

    def test_file_beats_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ARSCRIPT_WORDS_PER_PAGE", "111")
        monkeypatch.setenv("ARSCRIPT_HISTORY_LIMIT", "7")
        path = tmp_path / "config.yaml"
        path.write_text("words_per_page: 222\n")

        settings = ArScriptSettings.from_multiple_sources(config_files=[path])
        assert settings.words_per_page == 222
        # Keys absent from the file still come from the environment
        assert settings.history_limit == 7

    def test_cli_beats_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("words_per_page: 222\n")
        settings = ArScriptSettings.from_multiple_sources(
            config_files=[path],
            cli_args={"words_per_page": 333, "log_level": None},
        )
        assert settings.words_per_page == 333
        assert settings.log_level == "WARNING"

    def test_missing_file_is_skipped(self, tmp_path):
        settings = ArScriptSettings.from_multiple_sources(
            config_files=[tmp_path / "missing.yaml"]
        )
        assert settings.words_per_page == 250


class TestGlobalSettings:
    """Test the process-wide settings instance."""

    def test_set_and_get(self):
        custom = ArScriptSettings(_env_file=None, words_per_page=123)
        set_settings(custom)
        assert get_settings() is custom

    def test_clear_cache_reloads(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("ARSCRIPT_WORDS_PER_PAGE", "321")
        clear_settings_cache()
        assert get_settings().words_per_page == 321

    def test_project_config_file(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(Path, "home", lambda: tmp_path / "home")
        (tmp_path / "arscript.yaml").write_text("history_limit: 9\n")
        clear_settings_cache()
        assert get_settings().history_limit == 9

    def test_settings_for_cli_with_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("words_per_page: 400\n")
        settings = get_settings_for_cli(
            config_file=path, cli_overrides={"log_level": "DEBUG"}
        )
        assert settings.words_per_page == 400
        assert settings.log_level == "DEBUG"

    def test_settings_for_cli_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            get_settings_for_cli(config_file=tmp_path / "missing.yaml")

    def test_settings_for_cli_overrides_global(self):
        set_settings(ArScriptSettings(_env_file=None, words_per_page=123))
        settings = get_settings_for_cli(cli_overrides={"debug": True})
        assert settings.debug is True
        assert settings.words_per_page == 123
