# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the declaration index shared by both front-ends."""

import pytest

from fixturegen.frontend.extract import DeclarationIndex, is_exported
from fixturegen.generator.classifier import DeclarationKind
from fixturegen.parser import parse


def _index(body: str) -> DeclarationIndex:
    return DeclarationIndex([parse("package p\n\n" + body)])


class TestIsExported:
    @pytest.mark.parametrize(("name", "expected"), [("User", True), ("user", False), ("_X", False), ("", False)])
    def test_is_exported(self, name: str, expected: bool) -> None:
        assert is_exported(name) is expected


class TestDeclarationIndex:
    def test_kinds(self) -> None:
        index = _index(
            "type R struct{}\ntype I interface{}\ntype E int\nconst X E = 1\ntype A string\ntype M map[string]int\n"
        )
        assert index.kind_of("R") == DeclarationKind.RECORD
        assert index.kind_of("I") == DeclarationKind.INTERFACE
        assert index.kind_of("E") == DeclarationKind.ENUMERATION
        assert index.kind_of("A") == DeclarationKind.ALIAS
        assert index.kind_of("M") is None
        assert index.kind_of("Missing") is None

    def test_unexported_declarations_have_no_kind(self) -> None:
        index = _index("type r struct{}\ntype e int\nconst x e = 1\ntype a string\ntype isR_K interface{}\n")
        assert index.kind_of("r") is None
        assert index.kind_of("e") is None
        assert index.kind_of("a") is None
        assert index.kind_of("isR_K") == DeclarationKind.INTERFACE

    def test_generic_declaration_has_no_kind(self) -> None:
        index = _index("type G[T any] struct{}\n")
        assert index.kind_of("G") is None
        assert [spec.name for spec in index.generic_specs()] == ["G"]

    def test_underlying_primitive_follows_chain(self) -> None:
        index = _index("type A B\ntype B C\ntype C uint8\n")
        assert index.underlying_primitive("A") == "uint8"

    def test_underlying_primitive_cycle(self) -> None:
        index = _index("type A B\ntype B A\n")
        assert index.underlying_primitive("A") is None

    def test_enum_values_across_groups(self) -> None:
        index = _index("type E int\nconst (\n\tE_A E = iota\n\tE_B\n)\nconst E_C E = 9\nconst Untyped = 1\n")
        assert index.enum_values == {"E": ["E_A", "E_B", "E_C"]}

    def test_untyped_line_resets_repetition(self) -> None:
        index = _index("type E int\nconst (\n\tE_A E = 0\n\tRaw = 1\n\tNext\n)\n")
        assert index.enum_values == {"E": ["E_A"]}
