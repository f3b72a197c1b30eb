"""
Public API for package and identifier resolution.

Provides high-level functions that run the resolvers over a whole file.
"""

import ast
from typing import Iterable, List, Mapping, Optional

from pkgresolve.exceptions import PackageNotFoundError, UnresolvedIdentError
from pkgresolve.logging_config import logger
from pkgresolve.schemas import ImportSpec, ProvenanceReport, ResolvedImport, UnresolvedIdent
from .config import RESOLUTION_CONFIG
from .contracts import IdentResolver, PackageResolver
from .ident import TypeInfo
from .tables import Guess, Map


def build_resolver(
    table: Optional[Mapping[str, str]] = None,
    strict: Optional[bool] = None,
) -> PackageResolver:
    """
    Create a package-name resolver for a table.

    Args:
        table: Import path -> package name
        strict: Raise on misses (Map) instead of guessing (Guess).
            Defaults to RESOLUTION_CONFIG["strict_mode"].

    Returns:
        Map if strict, else Guess
    """
    if strict is None:
        strict = RESOLUTION_CONFIG["strict_mode"]
    return Map(table) if strict else Guess(table)


def resolve_import_names(
    imports: Iterable[ImportSpec],
    resolver: PackageResolver,
    from_dir: str = ".",
) -> List[ResolvedImport]:
    """
    Resolve the package name of every import.

    A miss from a strict resolver is recorded on the entry rather than raised,
    so one unknown package doesn't hide the rest.

    Args:
        imports: Imports of a file
        resolver: Package-name resolver to use
        from_dir: Directory context of the importing file

    Returns:
        One ResolvedImport per import, in the same order
    """
    resolved = []
    missing = 0

    for spec in imports:
        entry = ResolvedImport(
            path=spec.path,
            alias=spec.alias,
            is_wildcard=spec.is_wildcard,
            line=spec.line,
        )
        try:
            entry.name = resolver.resolve_package(spec.path, from_dir)
        except PackageNotFoundError as e:
            entry.error = str(e)
            missing += 1
        resolved.append(entry)

    if missing:
        logger.info(f"Resolved {len(resolved) - missing}/{len(resolved)} imports ({missing} not found)")
    return resolved


def import_provenance(
    module: ast.Module,
    info: TypeInfo,
    resolver: IdentResolver,
    from_dir: str = ".",
    file_path: str = "",
) -> ProvenanceReport:
    """
    Work out which import introduced each identifier in a file.

    Every Name node is resolved. Identifiers whose provenance is unknown are
    collected on the report instead of stopping the walk.

    Args:
        module: Parsed file
        info: Type facts for the file's package
        resolver: Identifier resolver to use
        from_dir: Directory context of the file
        file_path: Path recorded on the report

    Returns:
        ProvenanceReport
    """
    report = ProvenanceReport(file_path=file_path)

    for node in ast.walk(module):
        if not isinstance(node, ast.Name):
            continue
        try:
            import_path = resolver.resolve_ident(node, info, module, from_dir)
        except UnresolvedIdentError as e:
            report.unresolved.append(UnresolvedIdent(
                name=e.name,
                line=node.lineno,
                candidates=e.candidates,
            ))
            continue

        if not import_path:
            continue
        names = report.used.setdefault(import_path, [])
        if node.id not in names:
            names.append(node.id)

    logger.info(
        f"Provenance for {file_path or '<module>'}: "
        f"{len(report.used)} imports used, {len(report.unresolved)} unresolved identifiers"
    )
    return report
