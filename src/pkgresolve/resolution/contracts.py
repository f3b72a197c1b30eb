"""
Capability contracts for resolution.

Consider this file:

    from a import *

    def main():
        B()
        C()

B and C could be local names declared elsewhere in this package, or names
injected by the wildcard import of "a". If only one of them comes from "a" and
that one is removed, the import must go too when the file is regenerated. So an
identifier resolver needs the full type facts, not the spelling of the name.
"""

import ast
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .ident import TypeInfo


@runtime_checkable
class PackageResolver(Protocol):
    """Resolves an import path to a package name."""

    def resolve_package(self, import_path: str, from_dir: str) -> str:
        ...


@runtime_checkable
class IdentResolver(Protocol):
    """
    Resolves an identifier to the import path that introduced it.

    Returns an empty string if the node is not an identifier or was not
    introduced by an import.
    """

    def resolve_ident(
        self,
        ident: ast.AST,
        info: "TypeInfo",
        file: ast.Module,
        from_dir: str,
    ) -> str:
        ...
