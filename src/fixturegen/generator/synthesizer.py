# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Placeholder value synthesis for type references.

:func:`synthesize` turns any TypeRef into a Go expression. It never fails:
every shape without a better rule degrades to ``nil``, which stays visible
(and greppable) in the generated file.
"""

from __future__ import annotations

from dataclasses import dataclass

from fixturegen.generator.registry import DEFAULT_REGISTRY, ExternalTypeRegistry
from fixturegen.model.entities import TypeModel
from fixturegen.model.types import (
    BOOLEAN_PRIMITIVES,
    NUMERIC_PRIMITIVES,
    STRING_PRIMITIVES,
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
)

# ###############
# Public Interface
# ###############

NIL = "nil"

# Field names whose string value becomes "<Type>ID".
IDENTIFIER_FIELD_NAMES: frozenset[str] = frozenset({"ID", "Id"})


@dataclass(frozen=True)
class GenerateOptions:
    """Settings shared by the synthesizer and the emitter.

    Attributes:
        type_name_prefix: Package qualifier for emitted type names
            (``"account"`` turns ``User`` into ``account.User``).
        function_name_infix: Inserted into fixture names
            (``"PB"`` turns ``FixtureUser`` into ``FixturePBUser``).
        mod_style: Emit reference-returning fixtures that accept mutators
            instead of plain value-returning ones.
    """

    type_name_prefix: str = ""
    function_name_infix: str = ""
    mod_style: bool = True

    def qualify(self, name: str) -> str:
        """Return *name* with the type prefix applied."""
        if self.type_name_prefix:
            return f"{self.type_name_prefix}.{name}"
        return name

    def fixture_name(self, type_name: str) -> str:
        return f"Fixture{self.function_name_infix}{type_name}"


def synthesize(
    model: TypeModel,
    type_ref: TypeRef,
    field_name: str,
    enclosing_type_name: str,
    options: GenerateOptions | None = None,
    registry: ExternalTypeRegistry = DEFAULT_REGISTRY,
) -> str:
    """Return a placeholder expression for a value of *type_ref*.

    Args:
        model: Declarations used to expand sum types.
        type_ref: The reference to synthesize a value for.
        field_name: Name of the field being populated; string placeholders
            are derived from it.
        enclosing_type_name: Name of the record owning the field; used for
            identifier fields (``ID``/``Id``).
        options: Emission style and naming. Defaults to mod style, no prefix.
        registry: External type literals.

    Returns:
        A non-empty Go expression.
    """
    if options is None:
        options = GenerateOptions()

    if isinstance(type_ref, PrimitiveTypeRef):
        return primitive_value(type_ref.name, field_name, enclosing_type_name)
    if isinstance(type_ref, (RecordTypeRef, EnumerationTypeRef, AliasTypeRef)):
        return _fixture_call(type_ref.name, options)
    if isinstance(type_ref, SumTypeRef):
        return _sum_type_value(model, type_ref.name, options, registry)
    if isinstance(type_ref, PointerTypeRef):
        return _pointer_value(model, type_ref.element, field_name, enclosing_type_name, options, registry)
    if isinstance(type_ref, SequenceTypeRef):
        element = synthesize(model, type_ref.element, field_name, enclosing_type_name, options, registry)
        return f"[]{type_name(type_ref.element, options, registry)}{{{element}}}"
    if isinstance(type_ref, ExternalTypeRef):
        external = registry.get(type_ref.name)
        return external.value if external is not None else NIL
    return NIL


def primitive_value(primitive_name: str, field_name: str, enclosing_type_name: str) -> str:
    """Return the literal for a primitive field.

    Strings carry the field name, except identifier fields which read like a
    synthetic primary key of the enclosing type.
    """
    if primitive_name in STRING_PRIMITIVES:
        if field_name in IDENTIFIER_FIELD_NAMES:
            return f'"{enclosing_type_name}ID"'
        return f'"{field_name}"'
    if primitive_name in BOOLEAN_PRIMITIVES:
        return "true"
    if primitive_name in NUMERIC_PRIMITIVES:
        return "1"
    return NIL


def type_name(
    type_ref: TypeRef,
    options: GenerateOptions | None = None,
    registry: ExternalTypeRegistry = DEFAULT_REGISTRY,
) -> str:
    """Return the Go spelling of *type_ref* as used in composite literals."""
    if options is None:
        options = GenerateOptions()
    if isinstance(type_ref, PointerTypeRef):
        return "*" + type_name(type_ref.element, options, registry)
    if isinstance(type_ref, SequenceTypeRef):
        return "[]" + type_name(type_ref.element, options, registry)
    if isinstance(type_ref, (RecordTypeRef, EnumerationTypeRef, AliasTypeRef)):
        return options.qualify(type_ref.name)
    if isinstance(type_ref, ExternalTypeRef):
        external = registry.get(type_ref.name)
        if external is not None and external.type_expression:
            return external.type_expression
        return type_ref.name
    if isinstance(type_ref, (PrimitiveTypeRef, SumTypeRef)):
        return type_ref.name
    return "interface{}"


# ################
# Implementation
# ################


def _fixture_call(name: str, options: GenerateOptions) -> str:
    call = f"{options.fixture_name(name)}()"
    # Mod-style fixtures return a pointer; fields hold the value.
    if options.mod_style:
        return "*" + call
    return call


def _sum_type_value(
    model: TypeModel,
    sum_type_name: str,
    options: GenerateOptions,
    registry: ExternalTypeRegistry,
) -> str:
    member_name = model.sum_types.get(sum_type_name)
    if not member_name:
        return NIL
    qualified = options.qualify(member_name)
    member = model.record(member_name)
    if member is None or not member.fields:
        return f"&{qualified}{{}}"
    entries = [
        f"{f.name}: {synthesize(model, f.type, f.name, member_name, options, registry)}" for f in member.fields
    ]
    body = ",\n\t\t\t".join(entries)
    return f"&{qualified}{{\n\t\t\t{body},\n\t\t}}"


def _pointer_value(
    model: TypeModel,
    element: TypeRef,
    field_name: str,
    enclosing_type_name: str,
    options: GenerateOptions,
    registry: ExternalTypeRegistry,
) -> str:
    if isinstance(element, UnresolvedTypeRef):
        return NIL
    if isinstance(element, ExternalTypeRef):
        external = registry.get(element.name)
        if external is not None:
            return external.value
    value = synthesize(model, element, field_name, enclosing_type_name, options, registry)
    # Mod style leaves record, enumeration and alias elements unwrapped.
    if options.mod_style and isinstance(element, (RecordTypeRef, EnumerationTypeRef, AliasTypeRef)):
        return value
    return f"ptr({value})"
