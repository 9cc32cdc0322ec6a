"""Settings Manager - Handles API key and application configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

LEXICON_DATASET = "dataset"
LEXICON_GEMINI = "gemini"


class SettingsManager:
    """
    Manages settings read from a .env file in the project root.

    Blank values are treated as unset. Numeric settings that fail to parse
    fall back to their defaults.
    """

    DEFAULT_MODEL = "gemini-2.0-flash"
    DEFAULT_TIMEOUT_SECONDS = 60.0
    DEFAULT_LOG_LEVEL = "INFO"

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    @property
    def project_root(self) -> Path:
        return self._project_root

    def _get(self, name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None

    def _path(self, name: str, default: Path) -> Path:
        value = self._get(name)
        if value is None:
            return default
        path = Path(value).expanduser()
        return path if path.is_absolute() else self._project_root / path

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment."""
        return self._get("GEMINI_API_KEY")

    def get_gemini_model(self) -> str:
        return self._get("GEMINI_MODEL") or self.DEFAULT_MODEL

    def get_lexicon_strategy(self) -> str:
        """Return ``dataset`` or ``gemini``; unknown values fall back to ``dataset``."""
        value = (self._get("LEXICON_STRATEGY") or LEXICON_DATASET).lower()
        if value not in (LEXICON_DATASET, LEXICON_GEMINI):
            logger.warning("Unknown LEXICON_STRATEGY %r, using %r", value, LEXICON_DATASET)
            return LEXICON_DATASET
        return value

    def get_dictionary_path(self) -> Path:
        return self._path("DICTIONARY_CSV_PATH", self._project_root / "data" / "ecdict.csv")

    def get_database_path(self) -> Path:
        return self._path("DATABASE_PATH", self._project_root / "vocab_reader.db")

    def get_request_timeout(self) -> float:
        """Timeout in seconds applied to every generative call."""
        value = self._get("REQUEST_TIMEOUT_SECONDS")
        if value is None:
            return self.DEFAULT_TIMEOUT_SECONDS
        try:
            timeout = float(value)
        except ValueError:
            logger.warning("Invalid REQUEST_TIMEOUT_SECONDS %r, using default", value)
            return self.DEFAULT_TIMEOUT_SECONDS
        return timeout if timeout > 0 else self.DEFAULT_TIMEOUT_SECONDS

    def get_log_level(self) -> str:
        return (self._get("LOG_LEVEL") or self.DEFAULT_LOG_LEVEL).upper()
