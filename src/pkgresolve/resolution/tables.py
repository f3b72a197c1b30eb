"""
Table-backed package-name resolvers.

Both resolvers copy the table they are given and never change it, so a single
instance can be shared freely between threads.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from pkgresolve.exceptions import PackageNotFoundError, TableError
from pkgresolve.logging_config import logger
from .config import PATH_SEPARATOR


def _freeze(table: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    """Validate a path -> name table and return a read-only copy."""
    frozen = {}
    for path, name in (table or {}).items():
        if not isinstance(path, str) or not path:
            raise TableError(f"Invalid import path in resolution table: {path!r}")
        if not isinstance(name, str) or not name:
            raise TableError(f"Invalid package name for '{path}': {name!r}")
        frozen[path] = name
    return MappingProxyType(frozen)


def _check_path(import_path: str) -> None:
    if not import_path:
        raise ValueError("import path must be a non-empty string")


class Guess:
    """
    Map of package path -> package name. Names are resolved from this map, and
    if a path isn't in the map the name is guessed from the last part of the
    path (after the last slash).
    """

    def __init__(self, table: Optional[Mapping[str, str]] = None):
        self.table = _freeze(table)

    def resolve_package(self, import_path: str, from_dir: str = ".") -> str:
        _check_path(import_path)
        name = self.table.get(import_path)
        if name is not None:
            return name
        guessed = import_path.rsplit(PATH_SEPARATOR, 1)[-1]
        logger.debug(f"Guessed package name '{guessed}' for {import_path}")
        return guessed

    def __repr__(self) -> str:
        return f"Guess({dict(self.table)!r})"


class Map:
    """
    Map of package path -> package name. Names are resolved from this map, and
    if a path isn't in the map PackageNotFoundError is raised.

    Map only resolves packages. It has no type facts, so it cannot tell which
    wildcard import declared an identifier; use InfoResolver for that.
    """

    def __init__(self, table: Optional[Mapping[str, str]] = None):
        self.table = _freeze(table)

    def resolve_package(self, import_path: str, from_dir: str = ".") -> str:
        _check_path(import_path)
        name = self.table.get(import_path)
        if name is None:
            logger.debug(f"Package not in table: {import_path}")
            raise PackageNotFoundError(import_path)
        return name

    def __repr__(self) -> str:
        return f"Map({dict(self.table)!r})"
