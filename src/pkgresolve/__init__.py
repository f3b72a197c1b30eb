"""
pkgresolve - package names and import provenance for source rewriting tools.
"""

__version__ = "0.1.0"

from pkgresolve.exceptions import (
    PkgResolveError,
    PackageNotFoundError,
    UnresolvedIdentError,
)
from pkgresolve.resolution import (
    PackageResolver,
    IdentResolver,
    Guess,
    Map,
    Definition,
    TypeInfo,
    InfoResolver,
    build_resolver,
)

__all__ = [
    "__version__",
    "PkgResolveError",
    "PackageNotFoundError",
    "UnresolvedIdentError",
    "PackageResolver",
    "IdentResolver",
    "Guess",
    "Map",
    "Definition",
    "TypeInfo",
    "InfoResolver",
    "build_resolver",
]
