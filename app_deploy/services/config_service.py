"""Configuration management service"""

import logging
import os
from pathlib import Path
from typing import List, Optional

import yaml

from ..api.exceptions import ConfigError, TargetNotFoundError
from ..constants import PROJECT_CONFIG_FILE, ENV_CONFIG_PATH
from ..models.config import Config, TargetSettings

logger = logging.getLogger(__name__)


def find_config_file(start: Optional[Path] = None) -> Optional[Path]:
    """Locate the project configuration file

    The APP_DEPLOY_CONFIG environment variable wins; otherwise the
    directory tree is searched upwards from ``start``.

    Args:
        start: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the configuration file or None
    """
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        return Path(env_path).expanduser()

    current = (start or Path.cwd()).resolve()
    for directory in [current, *current.parents]:
        candidate = directory / PROJECT_CONFIG_FILE
        if candidate.is_file():
            return candidate

    return None


class ConfigService:
    """Service for managing target configuration"""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize config service

        Args:
            config_path: Configuration file (searched for when omitted)
        """
        self.config_path = Path(config_path) if config_path else find_config_file()
        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get current configuration (lazy load)"""
        if self._config is None:
            self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file

        Returns:
            Loaded configuration

        Raises:
            ConfigError: If the file is missing or malformed
        """
        if self.config_path is None or not self.config_path.exists():
            raise ConfigError(
                f"Configuration file not found: {self.config_path or PROJECT_CONFIG_FILE}. "
                f"Create {PROJECT_CONFIG_FILE} or set {ENV_CONFIG_PATH}."
            )

        with open(self.config_path, 'r') as f:
            content = f.read()

        # Passwords are usually supplied as ${VAR}
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_path}: {e}")

        if data is not None and not isinstance(data, dict):
            raise ConfigError(f"Invalid configuration format in {self.config_path}")

        try:
            self._config = Config.from_dict(data)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration in {self.config_path}: {e}")

        logger.debug("Loaded %d target(s) from %s", len(self._config.targets), self.config_path)
        return self._config

    def get_target(self, name: str) -> TargetSettings:
        """Get target settings

        Raises:
            TargetNotFoundError: If the target is not configured
        """
        target = self.config.get_target(name)
        if target is None:
            raise TargetNotFoundError(name)
        return target

    def list_targets(self) -> List[TargetSettings]:
        """List configured targets"""
        return list(self.config.targets.values())
