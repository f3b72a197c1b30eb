"""
Resolution package: package names for import paths and import provenance
for identifiers.
"""

from .facade import (
    build_resolver,
    resolve_import_names,
    import_provenance,
)
from .contracts import PackageResolver, IdentResolver
from .tables import Guess, Map
from .ident import Definition, TypeInfo, InfoResolver
from .imports import parse_source, collect_imports, wildcard_imports, qualifier_of
from .config import PATH_SEPARATOR, WILDCARD, DEFINITION_KINDS, RESOLUTION_CONFIG

__all__ = [
    "build_resolver",
    "resolve_import_names",
    "import_provenance",
    "PackageResolver",
    "IdentResolver",
    "Guess",
    "Map",
    "Definition",
    "TypeInfo",
    "InfoResolver",
    "parse_source",
    "collect_imports",
    "wildcard_imports",
    "qualifier_of",
    "PATH_SEPARATOR",
    "WILDCARD",
    "DEFINITION_KINDS",
    "RESOLUTION_CONFIG",
]
