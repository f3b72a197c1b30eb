"""
pkgresolve User Configuration

Hierarchical config system with global defaults + local overrides:
- Global: ~/.pkgresolve/config.json (cross-project settings)
- Local: .pkgresolve/config.json (project-specific overrides)

Config structure:
{
  "packages": {                 // Resolution table: import path -> package name
    "gopkg.in/yaml.v3": "yaml"
  },
  "strict": false               // Fail on unknown paths instead of guessing
}
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from pkgresolve.exceptions import ConfigError
from pkgresolve.logging_config import logger
from pkgresolve.paths import PkgResolvePaths


DEFAULT_CONFIG = {
    "packages": {},
    "strict": False,
}


def load_table_file(path: Path) -> Dict[str, str]:
    """
    Load a flat JSON object mapping import paths to package names.

    Raises:
        ConfigError: If the file can't be read or isn't a string -> string object
    """
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Failed to load resolution table from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Resolution table in {path} must be a JSON object")
    for key, value in data.items():
        if not isinstance(value, str):
            raise ConfigError(f"Package name for '{key}' in {path} must be a string")
    return data


class UserConfig:
    """
    Manages hierarchical user configuration.

    Load order (with override):
    1. Default config (hardcoded)
    2. Global config (~/.pkgresolve/config.json)
    3. Local config (.pkgresolve/config.json)
    """

    def __init__(self, project_root: Optional[Path] = None, home: Optional[Path] = None):
        """
        Initialize config manager.

        Args:
            project_root: Project root directory (defaults to CWD)
            home: Home directory holding the global config (defaults to ~)
        """
        paths = PkgResolvePaths(project_root or Path.cwd(), home)
        self.project_root = paths.project_root
        self.global_config_path = paths.global_config
        self.local_config_path = paths.local_config

        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration with hierarchical override.

        Returns:
            Merged configuration dictionary
        """
        config = self._deep_merge({}, DEFAULT_CONFIG)

        for label, path in (("global", self.global_config_path), ("local", self.local_config_path)):
            if not path.exists():
                continue
            try:
                with open(path, 'r') as f:
                    loaded = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Failed to load {label} config: {e}")
                continue
            if not isinstance(loaded, dict):
                logger.warning(f"Ignoring {label} config at {path}: not a JSON object")
                continue
            config = self._deep_merge(config, loaded)
            logger.debug(f"Loaded {label} config from {path}")

        return config

    def _deep_merge(self, base: Dict, override: Dict) -> Dict:
        """
        Deep merge two dictionaries, with override taking precedence.
        """
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            elif isinstance(value, dict):
                result[key] = self._deep_merge({}, value)
            else:
                result[key] = value

        return result

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a config value by dot-separated key.

        Examples:
            config.get("strict")  # False
            config.get("packages")  # {"gopkg.in/yaml.v3": "yaml"}
        """
        value = self._config

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def table(self) -> Dict[str, str]:
        """
        Get the merged resolution table.

        Entries whose name isn't a string are dropped with a warning.
        """
        packages = self.get("packages", {})
        if not isinstance(packages, dict):
            logger.warning("Ignoring 'packages' config: not a JSON object")
            return {}

        table = {}
        for path, name in packages.items():
            if isinstance(name, str) and name:
                table[path] = name
            else:
                logger.warning(f"Ignoring package entry '{path}': name must be a non-empty string")
        return table

    def is_strict(self) -> bool:
        return bool(self.get("strict", False))

    def reload(self) -> None:
        """Reload configuration from disk."""
        self._config = self._load_config()


# Global singleton
_config: Optional[UserConfig] = None


def get_user_config(project_root: Optional[Path] = None) -> UserConfig:
    """
    Get the user configuration singleton.

    Args:
        project_root: Optional project root override

    Returns:
        UserConfig instance
    """
    global _config
    if project_root is not None:
        return UserConfig(project_root)
    if _config is None:
        _config = UserConfig()
    return _config


def reset_user_config() -> None:
    """Reset the global config singleton (for testing)."""
    global _config
    _config = None
