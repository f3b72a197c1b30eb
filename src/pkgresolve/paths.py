"""
pkgresolve Path Configuration

Centralized path management for pkgresolve data files.

Directory Structure:
.pkgresolve/
├── config.json          # Resolution table and settings
└── logs/                # Log files (opt-in)
"""

from pathlib import Path
from typing import Optional


class PkgResolvePaths:
    """
    Centralized path configuration for pkgresolve.

    Local paths are resolved relative to project_root (defaults to CWD).
    """

    DATA_DIR = ".pkgresolve"
    CONFIG_NAME = "config.json"
    LOGS_DIR = "logs"

    def __init__(self, project_root: Optional[Path] = None, home: Optional[Path] = None):
        self._project_root = project_root
        self._home = home

    @property
    def project_root(self) -> Path:
        """Get the project root directory."""
        if self._project_root is None:
            return Path.cwd()
        return self._project_root

    @property
    def data_dir(self) -> Path:
        """Get the local .pkgresolve directory path."""
        return self.project_root / self.DATA_DIR

    @property
    def global_dir(self) -> Path:
        """Get the per-user ~/.pkgresolve directory path."""
        home = self._home if self._home is not None else Path.home()
        return home / self.DATA_DIR

    @property
    def local_config(self) -> Path:
        return self.data_dir / self.CONFIG_NAME

    @property
    def global_config(self) -> Path:
        return self.global_dir / self.CONFIG_NAME

    @property
    def logs_dir(self) -> Path:
        return self.global_dir / self.LOGS_DIR

    def ensure_dirs(self) -> None:
        """Create the directories that hold writable data."""
        self.logs_dir.mkdir(parents=True, exist_ok=True)


_paths: Optional[PkgResolvePaths] = None


def get_paths(project_root: Optional[Path] = None) -> PkgResolvePaths:
    """
    Get the paths singleton, or a fresh instance for an explicit project root.
    """
    global _paths
    if project_root is not None:
        return PkgResolvePaths(project_root)
    if _paths is None:
        _paths = PkgResolvePaths()
    return _paths
