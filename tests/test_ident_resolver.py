"""
Unit tests for identifier provenance resolution.

Type facts are built by hand here, standing in for a type checker.
"""

import ast

import pytest

from pkgresolve.exceptions import UnresolvedIdentError
from pkgresolve.resolution import (
    Definition,
    IdentResolver,
    InfoResolver,
    PackageResolver,
    TypeInfo,
    parse_source,
)


DOT_IMPORT_SOURCE = """
from a import *

def bar():
    pass

def main():
    Foo()
    bar()
"""


@pytest.fixture
def resolver():
    return InfoResolver()


class TestWildcardProvenance:
    """Names injected by wildcard imports are resolved from declaration facts."""

    def test_wildcard_name_resolves_to_import(self, resolver, names):
        module = parse_source(DOT_IMPORT_SOURCE)
        foo = names(module, "Foo")[0]
        info = TypeInfo(package_path="main")
        info.record(foo, Definition("Foo", "function", "a"))

        assert resolver.resolve_ident(foo, info, module, ".") == "a"

    def test_local_function_resolves_to_empty(self, resolver, names):
        module = parse_source(DOT_IMPORT_SOURCE)
        bar = names(module, "bar")[0]
        info = TypeInfo(package_path="main")
        info.record(bar, Definition("bar", "function", "main"))

        assert resolver.resolve_ident(bar, info, module, ".") == ""

    def test_same_spelling_different_provenance(self, resolver, names):
        """Two occurrences spelled alike resolve by their facts, not their text."""
        module = parse_source("from a import *\nB()\nB()\n")
        first, second = names(module, "B")
        info = TypeInfo(package_path="main")
        info.record(first, Definition("B", "function", "a"))
        info.record(second, Definition("B", "function", "main"))

        assert resolver.resolve_ident(first, info, module, ".") == "a"
        assert resolver.resolve_ident(second, info, module, ".") == ""

    def test_two_wildcards_facts_pick_one(self, resolver, names):
        module = parse_source("from a import *\nfrom b import *\nC()\n")
        c = names(module, "C")[0]
        info = TypeInfo(package_path="main")
        info.record(c, Definition("C", "class", "b"))

        assert resolver.resolve_ident(c, info, module, ".") == "b"


class TestMissingFacts:
    """Behaviour when the type checker left an identifier unresolved."""

    def test_ambiguous_wildcards_raise(self, resolver, names):
        module = parse_source("from a import *\nfrom b import *\nC()\n")
        c = names(module, "C")[0]

        with pytest.raises(UnresolvedIdentError) as exc_info:
            resolver.resolve_ident(c, TypeInfo(package_path="main"), module, ".")

        assert exc_info.value.name == "C"
        assert exc_info.value.candidates == ["a", "b"]

    def test_single_wildcard_without_facts_raises(self, resolver, names):
        """A local declaration and a wildcard name look identical without facts."""
        module = parse_source("from a import *\nB()\n")
        b = names(module, "B")[0]

        with pytest.raises(UnresolvedIdentError) as exc_info:
            resolver.resolve_ident(b, TypeInfo(package_path="main"), module, ".")

        assert exc_info.value.candidates == ["a"]

    def test_no_wildcards_without_facts_is_local(self, resolver, names):
        module = parse_source("import os\nx = 1\nprint(x)\n")
        x = names(module, "x")[1]

        assert resolver.resolve_ident(x, TypeInfo(package_path="main"), module, ".") == ""


class TestBindingTargets:
    """Names bound in the file itself need no facts, even under wildcard imports."""

    SOURCE = "from a import *\nx = 1\nfor i in range(3):\n    pass\ndel x\n"

    def test_assignment_target_is_local(self, resolver, names):
        module = parse_source(self.SOURCE)
        x = names(module, "x")[0]

        assert resolver.resolve_ident(x, TypeInfo(package_path="main"), module, ".") == ""

    def test_loop_target_is_local(self, resolver, names):
        module = parse_source(self.SOURCE)
        i = names(module, "i")[0]

        assert resolver.resolve_ident(i, TypeInfo(package_path="main"), module, ".") == ""

    def test_del_target_is_local(self, resolver, names):
        module = parse_source(self.SOURCE)
        deleted = names(module, "x")[1]

        assert isinstance(deleted.ctx, ast.Del)
        assert resolver.resolve_ident(deleted, TypeInfo(package_path="main"), module, ".") == ""

    def test_reference_still_needs_facts(self, resolver, names):
        module = parse_source(self.SOURCE)
        range_name = names(module, "range")[0]

        with pytest.raises(UnresolvedIdentError):
            resolver.resolve_ident(range_name, TypeInfo(package_path="main"), module, ".")


class TestQualifiedAndSpecialNames:
    """Qualified references, builtins and non-identifiers."""

    def test_package_name_resolves_to_its_path(self, resolver, names):
        module = parse_source("import encoding.json as json\njson.dumps({})\n")
        json_name = names(module, "json")[0]
        info = TypeInfo(package_path="main")
        info.record(json_name, Definition("json", "package", "encoding/json"))

        assert resolver.resolve_ident(json_name, info, module, ".") == "encoding/json"

    def test_attribute_resolves_through_qualifier(self, resolver, names):
        module = parse_source("import encoding.json as json\njson.dumps({})\n")
        json_name = names(module, "json")[0]
        attribute = next(n for n in ast.walk(module) if isinstance(n, ast.Attribute))
        info = TypeInfo(package_path="main")
        info.record(json_name, Definition("json", "package", "encoding/json"))

        assert resolver.resolve_ident(attribute, info, module, ".") == "encoding/json"

    def test_builtin_is_not_import_introduced(self, resolver, names):
        module = parse_source("from a import *\nprint(1)\n")
        print_name = names(module, "print")[0]
        info = TypeInfo(package_path="main")
        info.record(print_name, Definition("print", "builtin"))

        assert resolver.resolve_ident(print_name, info, module, ".") == ""

    def test_non_identifier_is_empty(self, resolver):
        module = parse_source("from a import *\nx = 1 + 2\n")
        constant = next(n for n in ast.walk(module) if isinstance(n, ast.Constant))

        assert resolver.resolve_ident(constant, TypeInfo(package_path="main"), module, ".") == ""

    def test_idempotent(self, resolver, names):
        module = parse_source(DOT_IMPORT_SOURCE)
        foo = names(module, "Foo")[0]
        info = TypeInfo(package_path="main")
        info.record(foo, Definition("Foo", "function", "a"))

        first = resolver.resolve_ident(foo, info, module, ".")
        assert resolver.resolve_ident(foo, info, module, ".") == first
        assert len(info.uses) == 1


class TestContracts:

    def test_info_resolver_is_ident_resolver(self, resolver):
        assert isinstance(resolver, IdentResolver)
        assert not isinstance(resolver, PackageResolver)

    def test_unknown_definition_kind_rejected(self):
        with pytest.raises(ValueError):
            Definition("x", "macro", "a")
