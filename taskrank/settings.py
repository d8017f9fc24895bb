"""
Runtime settings

Loads settings from environment variables and provides defaults.
Supports loading from a .env file using python-dotenv.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from .models.config import DEFAULT_CONFIG, RankingConfig


@dataclass
class Settings:
    """Where task data and ranking overrides live, and how loudly to log."""

    tasks_csv_path: Optional[Path] = None
    ranking_config_path: Optional[Path] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "Settings":
        """Load settings from environment variables (and .env when present)."""
        env_path = env_file or Path.cwd() / ".env"
        if env_path.exists():
            load_dotenv(env_path)

        def _path_env(key: str) -> Optional[Path]:
            v = os.getenv(key, "").strip()
            return Path(v).expanduser() if v else None

        return cls(
            tasks_csv_path=_path_env("TASKRANK_TASKS_CSV"),
            ranking_config_path=_path_env("TASKRANK_CONFIG_JSON"),
            log_level=(os.getenv("TASKRANK_LOG_LEVEL") or "INFO").strip().upper(),
        )

    def validate(self) -> Tuple[bool, List[str]]:
        """
        Validate the settings.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.tasks_csv_path is not None and not self.tasks_csv_path.is_file():
            errors.append(f"Tasks CSV not found: {self.tasks_csv_path}")

        if self.ranking_config_path is not None and not self.ranking_config_path.is_file():
            errors.append(f"Ranking config not found: {self.ranking_config_path}")

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown log level: {self.log_level}")

        return len(errors) == 0, errors

    def load_ranking_config(self) -> RankingConfig:
        """RankingConfig from ranking_config_path, or the defaults."""
        if self.ranking_config_path is None:
            return DEFAULT_CONFIG
        return RankingConfig.from_json_file(self.ranking_config_path)


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings (used by tests)."""
    global _settings
    _settings = None
