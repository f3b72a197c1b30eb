"""
Import extraction from Python syntax trees.
"""

import ast
from typing import List, Optional, Union

from pkgresolve.exceptions import ParserError
from pkgresolve.schemas import ImportSpec


def parse_source(source: Union[str, bytes], filename: str = "<unknown>") -> ast.Module:
    """
    Parse source into a module tree.

    Bytes are decoded by the parser, honouring PEP 263 encoding declarations.

    Raises:
        ParserError: If the source has a syntax error or can't be decoded.
    """
    try:
        return ast.parse(source, filename=filename)
    except SyntaxError as e:
        raise ParserError(filename, f"line {e.lineno}: {e.msg}") from e
    except ValueError as e:
        # Undecodable bytes, or null bytes on older interpreters
        raise ParserError(filename, str(e)) from e


def _from_path(node: ast.ImportFrom) -> str:
    # "from . import x" has no module; "from ..pkg import x" keeps both dots
    return "." * (node.level or 0) + (node.module or "")


def collect_imports(module: ast.Module) -> List[ImportSpec]:
    """
    Collect every import in a file, in source order.

    "import a.b as c" yields one spec per alias. "from a import x, y" yields a
    single spec listing both names.

    Args:
        module: Parsed module

    Returns:
        List of ImportSpec objects
    """
    specs: List[ImportSpec] = []

    for node in ast.walk(module):
        if isinstance(node, ast.Import):
            for alias in node.names:
                specs.append(ImportSpec(
                    path=alias.name,
                    alias=alias.asname,
                    line=node.lineno,
                ))
        elif isinstance(node, ast.ImportFrom):
            specs.append(ImportSpec(
                path=_from_path(node),
                names=[alias.name for alias in node.names],
                line=node.lineno,
            ))

    specs.sort(key=lambda spec: spec.line)
    return specs


def wildcard_imports(module: ast.Module) -> List[str]:
    """Return the paths of all wildcard imports in a file, in source order."""
    paths: List[str] = []
    for spec in collect_imports(module):
        if spec.is_wildcard and spec.path not in paths:
            paths.append(spec.path)
    return paths


def qualifier_of(node: ast.AST) -> Optional[ast.Name]:
    """
    Return the identifier a reference is resolved through.

    A bare Name is its own qualifier; for "pkg.attr" it is the "pkg" Name.
    Anything else has none.
    """
    if isinstance(node, ast.Name):
        return node
    if isinstance(node, ast.Attribute) and isinstance(node.value, ast.Name):
        return node.value
    return None
