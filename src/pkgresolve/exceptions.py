# Custom exceptions for pkgresolve

from typing import List, Optional


class PkgResolveError(Exception):
    """Base exception for all application-specific errors."""
    pass


class PackageNotFoundError(PkgResolveError):
    """Raised by strict resolvers when an import path is missing from the table."""
    def __init__(self, import_path: str):
        self.import_path = import_path
        super().__init__(f"package not found: {import_path}")


class UnresolvedIdentError(PkgResolveError):
    """
    Raised when type facts do not pin an identifier to a single declaring package.

    Callers should treat this as unknown provenance and keep every candidate import.
    """
    def __init__(self, name: str, candidates: Optional[List[str]] = None):
        self.name = name
        self.candidates = list(candidates or [])
        message = f"Cannot determine which import declares '{name}'"
        if self.candidates:
            message += f" (candidates: {', '.join(self.candidates)})"
        super().__init__(message)


class ParserError(PkgResolveError):
    """Raised when a source file cannot be parsed."""
    def __init__(self, file_path: str, message: str):
        self.file_path = file_path
        self.message = message
        super().__init__(f"Failed to parse {file_path}: {message}")


class ConfigError(PkgResolveError):
    """Raised for configuration-related problems."""
    pass


class TableError(PkgResolveError):
    """Raised when a resolution table holds an invalid entry."""
    pass
