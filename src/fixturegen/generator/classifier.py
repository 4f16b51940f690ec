# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Classification of raw type expressions into type references.

The classifier is pure: the result depends only on the expression, the scope
that answers "what kind of declaration does this name denote", and the
external type registry.
"""

from __future__ import annotations

import enum
from typing import Protocol

from fixturegen.generator.grouping import is_sum_type_name
from fixturegen.generator.registry import DEFAULT_REGISTRY, ExternalTypeRegistry
from fixturegen.model.types import (
    AliasTypeRef,
    EnumerationTypeRef,
    ExternalTypeRef,
    PointerTypeRef,
    PrimitiveTypeRef,
    RecordTypeRef,
    SequenceTypeRef,
    SumTypeRef,
    TypeRef,
    UnresolvedTypeRef,
    is_primitive_name,
)
from fixturegen.parser.syntax import IdentExpr, PointerExpr, QualifiedExpr, SliceExpr, TypeExpr, spell

# ###############
# Public Interface
# ###############


class DeclarationKind(enum.Enum):
    """What a named, non-primitive type denotes."""

    RECORD = "record"
    ENUMERATION = "enumeration"
    ALIAS = "alias"
    INTERFACE = "interface"


class Scope(Protocol):
    """Name lookup supplied by a front-end."""

    def lookup(self, name: str) -> DeclarationKind | None:
        """Return the declaration kind of *name*, or None if it is unknown."""
        ...


def classify(
    expr: TypeExpr,
    scope: Scope,
    registry: ExternalTypeRegistry = DEFAULT_REGISTRY,
) -> TypeRef:
    """Classify a raw type expression into exactly one TypeRef variant.

    Args:
        expr: Type expression produced by the parser.
        scope: Resolves bare type names to their declaration kind.
        registry: External types, matched by simple name before the scope is
            consulted.

    Returns:
        The classified reference. Shapes with no fixture rule (maps, channels,
        functions, fixed arrays, inline structs, foreign types without a
        registry entry...) become an UnresolvedTypeRef.
    """
    if isinstance(expr, IdentExpr):
        return _classify_name(expr.name, scope, registry)
    if isinstance(expr, QualifiedExpr):
        if expr.name in registry:
            return ExternalTypeRef(name=expr.name)
        return UnresolvedTypeRef(spelling=spell(expr))
    if isinstance(expr, PointerExpr):
        return PointerTypeRef(element=classify(expr.element, scope, registry))
    if isinstance(expr, SliceExpr):
        return SequenceTypeRef(element=classify(expr.element, scope, registry))
    return UnresolvedTypeRef(spelling=spell(expr))


# ################
# Implementation
# ################


def _classify_name(name: str, scope: Scope, registry: ExternalTypeRegistry) -> TypeRef:
    if is_primitive_name(name):
        return PrimitiveTypeRef(name=name)
    if name in registry:
        return ExternalTypeRef(name=name)
    kind = scope.lookup(name)
    if kind == DeclarationKind.RECORD:
        return RecordTypeRef(name=name)
    if kind == DeclarationKind.ENUMERATION:
        return EnumerationTypeRef(name=name)
    if kind == DeclarationKind.ALIAS:
        return AliasTypeRef(name=name)
    if kind == DeclarationKind.INTERFACE and is_sum_type_name(name):
        return SumTypeRef(name=name)
    return UnresolvedTypeRef(spelling=name)
