"""
Identifier provenance backed by externally computed type facts.
"""

import ast
from dataclasses import dataclass, field
from typing import Dict, Optional

from pkgresolve.exceptions import UnresolvedIdentError
from pkgresolve.logging_config import logger
from .config import DEFINITION_KINDS
from .imports import qualifier_of, wildcard_imports


@dataclass(frozen=True)
class Definition:
    """
    The declaration an identifier binds to.

    For kind "package" the package_path is the imported package the name
    refers to. Builtins have no package_path.
    """
    name: str
    kind: str
    package_path: Optional[str] = None

    def __post_init__(self):
        if self.kind not in DEFINITION_KINDS:
            raise ValueError(f"Unknown definition kind: {self.kind}")


@dataclass
class TypeInfo:
    """
    Type facts for one package, as produced by a type checker.

    uses maps identifier nodes (by identity) to their definitions.
    """
    package_path: str
    uses: Dict[ast.AST, Definition] = field(default_factory=dict)

    def definition_of(self, node: ast.AST) -> Optional[Definition]:
        return self.uses.get(node)

    def record(self, node: ast.AST, definition: Definition) -> None:
        """Bind an identifier node to its definition."""
        self.uses[node] = definition


class InfoResolver:
    """
    Resolves identifiers to the import path that declared them.

    Works purely from declaration facts in TypeInfo. A name injected by
    "from a import *" looks exactly like a local name, so spelling is never
    consulted.
    """

    def resolve_ident(
        self,
        ident: ast.AST,
        info: TypeInfo,
        file: ast.Module,
        from_dir: str = ".",
    ) -> str:
        """
        Resolve an identifier occurrence.

        Args:
            ident: Name node, or an Attribute whose value is a Name
            info: Type facts for the package the file belongs to
            file: Module the identifier occurs in
            from_dir: Directory context of the file

        Returns:
            Declaring import path, or "" for local names, builtins and non-identifiers

        Raises:
            UnresolvedIdentError: If there are no facts for a referenced
                identifier and wildcard imports could have introduced it
        """
        name = qualifier_of(ident)
        if name is None:
            return ""

        definition = info.definition_of(name)
        if definition is None:
            # Assignment and del targets bind in this file, never through an import
            if isinstance(name.ctx, (ast.Store, ast.Del)):
                return ""
            candidates = wildcard_imports(file)
            if candidates:
                logger.debug(f"No type facts for '{name.id}' with wildcard imports {candidates}")
                raise UnresolvedIdentError(name.id, candidates)
            return ""

        if definition.kind == "builtin" or definition.package_path is None:
            return ""
        if definition.kind == "package":
            return definition.package_path
        if definition.package_path == info.package_path:
            return ""
        return definition.package_path
