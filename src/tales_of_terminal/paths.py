from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import PlatformDirs

logger = logging.getLogger(__name__)

APP_NAME = "Tales of Terminal"

# Environment variable overrides (useful for tests and power users)
ENV_CONFIG_DIR = "TALES_CONFIG_DIR"
ENV_DATA_DIR = "TALES_DATA_DIR"

RESULTS_FILENAME = "tales_result.txt"
CONFIG_FILENAME = "engine.yaml"


class AppPaths:
    """Resolve platform-appropriate directories for the engine.

    Provides:
    - config_dir: user configuration (an optional engine.yaml override)
    - data_dir: persistent data such as the appended result log

    Uses platformdirs for cross-platform correctness and honours environment
    variable overrides.
    """

    def __init__(self, app_name: str = APP_NAME) -> None:
        self._dirs = PlatformDirs(appname=app_name, appauthor=False)
        self._config_dir = self._compute_dir(ENV_CONFIG_DIR, Path(self._dirs.user_config_dir))
        self._data_dir = self._compute_dir(ENV_DATA_DIR, Path(self._dirs.user_data_dir))

    @staticmethod
    def _compute_dir(env_var: str, default: Path) -> Path:
        override = os.getenv(env_var)
        if override:
            return Path(override).expanduser().resolve()
        return Path(default).expanduser().resolve()

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    @property
    def results_file(self) -> Path:
        return self._data_dir / RESULTS_FILENAME

    @property
    def user_config_file(self) -> Path:
        return self._config_dir / CONFIG_FILENAME

    def ensure_dirs(self) -> None:
        for d in (self.config_dir, self.data_dir):
            d.mkdir(parents=True, exist_ok=True)
        logger.debug("Ensured app dirs config=%s data=%s", self.config_dir, self.data_dir)


__all__ = ["AppPaths", "APP_NAME", "ENV_CONFIG_DIR", "ENV_DATA_DIR"]
