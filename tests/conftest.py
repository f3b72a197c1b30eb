"""
Pytest configuration for the pkgresolve test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- Isolated config directories so tests never read the real ~/.pkgresolve
- Helpers for building syntax trees and type facts
"""

import ast
import os
from typing import List

import pytest

from pkgresolve.logging_config import setup_logging
from pkgresolve.cli.config import CLIConfig
from pkgresolve.user_config import reset_user_config


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    os.environ.setdefault("PKGRESOLVE_MACHINE_MODE", "1")


# ============================================================================
# LOGGING FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, force=True)


# ============================================================================
# CONFIG FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """
    Point HOME and CWD at a temporary directory and reset config singletons.

    Returns:
        Path of the temporary project root (also the CWD)
    """
    home = tmp_path / "home"
    home.mkdir()
    project = tmp_path / "project"
    project.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("PKGRESOLVE_HUMAN_MODE", raising=False)
    monkeypatch.chdir(project)
    reset_user_config()
    CLIConfig.set_machine_mode(None)

    yield project

    reset_user_config()
    CLIConfig.set_machine_mode(None)


@pytest.fixture
def home_dir(isolated_config):
    """The fake home directory holding the global config."""
    return isolated_config.parent / "home"


# ============================================================================
# SYNTAX TREE HELPERS
# ============================================================================

def find_names(module: ast.Module, name: str) -> List[ast.Name]:
    """Return every Name node spelled `name`, in source order."""
    nodes = [n for n in ast.walk(module) if isinstance(n, ast.Name) and n.id == name]
    return sorted(nodes, key=lambda n: (n.lineno, n.col_offset))


@pytest.fixture
def names():
    return find_names
