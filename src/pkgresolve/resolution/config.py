"""
Configuration constants for package and identifier resolution.
"""

# Separator between import path segments
PATH_SEPARATOR = "/"

# Name list marking a wildcard ("from x import *") import
WILDCARD = "*"

# Kinds of declaration a Definition may describe
DEFINITION_KINDS = (
    "package",    # the identifier names an imported package itself
    "function",
    "class",
    "variable",
    "constant",
    "builtin",    # universe scope, never import-introduced
)

RESOLUTION_CONFIG = {
    "strict_mode": False,   # Fail on table misses vs. guess from the path
}
