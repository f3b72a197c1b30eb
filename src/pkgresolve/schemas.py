from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class ImportSpec(BaseModel):
    """
    Represents a single import statement target in a file.
    """
    path: str  # Import path as written, relative imports keep their leading dots
    alias: Optional[str] = None  # "as" name, if any
    names: List[str] = Field(default_factory=list)  # Names pulled in by a from-import, ["*"] for wildcards
    line: int = 0

    @property
    def is_wildcard(self) -> bool:
        from pkgresolve.resolution.config import WILDCARD
        return WILDCARD in self.names


class ResolvedImport(BaseModel):
    """
    An import paired with the package name it resolves to.
    """
    path: str
    name: Optional[str] = None  # None when the resolver could not find the package
    alias: Optional[str] = None
    is_wildcard: bool = False
    line: int = 0
    error: Optional[str] = None

    @property
    def local_name(self) -> Optional[str]:
        """Name the package is referenced by in the importing file."""
        return self.alias or self.name


class UnresolvedIdent(BaseModel):
    """
    An identifier whose declaring import could not be determined.
    """
    name: str
    line: int
    candidates: List[str] = Field(default_factory=list)


class ProvenanceReport(BaseModel):
    """
    Which identifiers in a file were introduced by which import path.
    """
    file_path: str = ""
    used: Dict[str, List[str]] = Field(default_factory=dict)  # import path -> identifier names, in first-use order
    unresolved: List[UnresolvedIdent] = Field(default_factory=list)

    def is_used(self, import_path: str) -> bool:
        """True when at least one identifier resolved to the import path."""
        return bool(self.used.get(import_path))
