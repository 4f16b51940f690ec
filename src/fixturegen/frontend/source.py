# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Syntax-only front-end working on a single source text.

Without a package-wide symbol table, names that are not declared in the text
itself are classified by their spelling alone.
"""

from __future__ import annotations

from fixturegen.frontend.extract import DeclarationIndex, ExtractionError, build_model, is_exported
from fixturegen.generator.classifier import DeclarationKind
from fixturegen.generator.grouping import is_sum_type_name
from fixturegen.generator.registry import DEFAULT_REGISTRY, ExternalTypeRegistry
from fixturegen.model.entities import TypeModel
from fixturegen.parser import LexerError, ParseError, parse

# ###############
# Public Interface
# ###############

# Predeclared non-primitive identifiers; never fixture-able.
PREDECLARED_TYPE_NAMES: frozenset[str] = frozenset({"any", "error", "comparable"})


class LexicalScope:
    """Resolves names declared in one source text, guessing the rest by spelling."""

    def __init__(self, index: DeclarationIndex) -> None:
        self._index = index

    def lookup(self, name: str) -> DeclarationKind | None:
        if name in self._index.type_specs:
            return self._index.kind_of(name)
        if is_sum_type_name(name):
            return DeclarationKind.INTERFACE
        if name in PREDECLARED_TYPE_NAMES:
            return None
        if is_exported(name):
            return DeclarationKind.RECORD
        return None


def parse_source(source: str, registry: ExternalTypeRegistry = DEFAULT_REGISTRY) -> TypeModel:
    """Build a TypeModel from the text of a single Go file.

    Args:
        source: Go source text, including its package clause.
        registry: External types used for field classification.

    Returns:
        The populated model.

    Raises:
        ExtractionError: If the text cannot be tokenized or parsed.
    """
    try:
        source_file = parse(source)
    except (LexerError, ParseError) as exc:
        raise ExtractionError(f"parse error: {exc}") from exc

    index = DeclarationIndex([source_file])
    return build_model(index, LexicalScope(index), registry)
