"""Unit tests for SettingsManager."""

import os
from pathlib import Path

import pytest

from vocab_reader.services import SettingsManager

SETTINGS_KEYS = (
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "LEXICON_STRATEGY",
    "DICTIONARY_CSV_PATH",
    "DATABASE_PATH",
    "REQUEST_TIMEOUT_SECONDS",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env():
    """Remove settings variables before and after each test."""
    saved = {key: os.environ.pop(key, None) for key in SETTINGS_KEYS}
    yield
    for key, value in saved.items():
        os.environ.pop(key, None)
        if value is not None:
            os.environ[key] = value


def make_settings(root: Path, env_text: str) -> SettingsManager:
    (root / ".env").write_text(env_text)
    return SettingsManager(project_root=root)


class TestApiKey:
    def test_api_key_none_when_empty(self, tmp_path, clean_env):
        settings = make_settings(tmp_path, "GEMINI_API_KEY=\n")
        assert settings.get_gemini_api_key() is None

    def test_api_key_read_and_stripped(self, tmp_path, clean_env):
        settings = make_settings(tmp_path, "GEMINI_API_KEY=  test-key  \n")
        assert settings.get_gemini_api_key() == "test-key"


class TestDefaults:
    def test_defaults_without_env_file(self, tmp_path, clean_env):
        settings = SettingsManager(project_root=tmp_path)

        assert settings.get_gemini_model() == "gemini-2.0-flash"
        assert settings.get_lexicon_strategy() == "dataset"
        assert settings.get_dictionary_path() == tmp_path / "data" / "ecdict.csv"
        assert settings.get_database_path() == tmp_path / "vocab_reader.db"
        assert settings.get_request_timeout() == 60.0
        assert settings.get_log_level() == "INFO"


class TestOverrides:
    def test_values_from_env_file(self, tmp_path, clean_env):
        settings = make_settings(
            tmp_path,
            "GEMINI_MODEL=gemini-2.5-pro\n"
            "LEXICON_STRATEGY=Gemini\n"
            "DATABASE_PATH=store/reader.db\n"
            "REQUEST_TIMEOUT_SECONDS=12.5\n"
            "LOG_LEVEL=debug\n",
        )

        assert settings.get_gemini_model() == "gemini-2.5-pro"
        assert settings.get_lexicon_strategy() == "gemini"
        assert settings.get_database_path() == tmp_path / "store" / "reader.db"
        assert settings.get_request_timeout() == 12.5
        assert settings.get_log_level() == "DEBUG"

    def test_absolute_paths_kept(self, tmp_path, clean_env):
        target = tmp_path / "elsewhere" / "dict.csv"
        settings = make_settings(tmp_path, f"DICTIONARY_CSV_PATH={target}\n")
        assert settings.get_dictionary_path() == target

    @pytest.mark.parametrize("value", ["soon", "0", "-5"])
    def test_invalid_timeout_falls_back(self, tmp_path, clean_env, value):
        settings = make_settings(tmp_path, f"REQUEST_TIMEOUT_SECONDS={value}\n")
        assert settings.get_request_timeout() == 60.0

    def test_unknown_strategy_falls_back_to_dataset(self, tmp_path, clean_env):
        settings = make_settings(tmp_path, "LEXICON_STRATEGY=telepathy\n")
        assert settings.get_lexicon_strategy() == "dataset"
