# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Model building shared by the package and source front-ends.

Both front-ends parse Go files into SourceFile declarations, index them, and
hand the index to :func:`build_model` together with their own Scope. The
scope decides how field types are classified; everything else (which
declarations become records, enumerations, aliases or sum types, and which
fields are dropped) is identical for both.
"""

from __future__ import annotations

from fixturegen.generator.classifier import DeclarationKind, Scope, classify
from fixturegen.generator.grouping import assign_member, is_sum_type_name, register_sum_type
from fixturegen.generator.registry import DEFAULT_REGISTRY, RESERVED_FIELDS, ExternalTypeRegistry
from fixturegen.model.entities import Alias, Enumeration, Record, TypeModel
from fixturegen.model.types import Field, PrimitiveTypeRef, is_primitive_name
from fixturegen.parser.syntax import ConstSpec, IdentExpr, InterfaceExpr, SourceFile, StructExpr, TypeExpr, TypeSpec

# ###############
# Public Interface
# ###############


class ExtractionError(Exception):
    """Raised when a front-end cannot build a type model from its input.

    Covers unreadable files, lexer and parser errors, and missing packages.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


def is_exported(name: str) -> bool:
    """Return True if *name* is visible outside its package (starts upper-case)."""
    return name[:1].isupper()


class DeclarationIndex:
    """Type and typed-constant declarations of one or more files.

    Attributes:
        specs: Every type declaration in file and source order, duplicates included.
        type_specs: Type declarations by name; a later declaration replaces an earlier one.
        enum_values: Names of typed constants per type name, in declaration order.
    """

    def __init__(self, files: list[SourceFile]) -> None:
        self.specs: list[TypeSpec] = [spec for source_file in files for spec in source_file.types]
        self.type_specs: dict[str, TypeSpec] = {spec.name: spec for spec in self.specs}
        self.enum_values: dict[str, list[str]] = {}
        for source_file in files:
            for group in source_file.const_groups:
                self._index_const_group(group)

    def generic_specs(self) -> list[TypeSpec]:
        return [spec for spec in self.specs if spec.is_generic]

    def kind_of(self, name: str) -> DeclarationKind | None:
        """Return the declaration kind of a type declared in this index, or None.

        Unexported records, enumerations and aliases have no kind: no fixture
        is emitted for them, so fields of those types must fall back to nil.
        """
        spec = self.type_specs.get(name)
        if spec is None or spec.is_generic:
            return None
        if isinstance(spec.type, InterfaceExpr):
            return DeclarationKind.INTERFACE
        if not is_exported(name):
            return None
        if isinstance(spec.type, StructExpr):
            return DeclarationKind.RECORD
        if self.underlying_primitive(name) is None:
            return None
        if name in self.enum_values:
            return DeclarationKind.ENUMERATION
        return DeclarationKind.ALIAS

    def underlying_primitive(self, name: str) -> str | None:
        """Follow ``type A B`` chains of local declarations down to a primitive name."""
        seen: set[str] = set()
        current = name
        while current not in seen:
            seen.add(current)
            spec = self.type_specs.get(current)
            if spec is None or not isinstance(spec.type, IdentExpr):
                return None
            target = spec.type.name
            if is_primitive_name(target):
                return target
            current = target
        return None

    def _index_const_group(self, group: list[ConstSpec]) -> None:
        # Within a group, a line without type and values repeats the previous line's type.
        current_type: TypeExpr | None = None
        for spec in group:
            if spec.has_values or spec.type is not None:
                current_type = spec.type
            if isinstance(current_type, IdentExpr):
                self.enum_values.setdefault(current_type.name, []).extend(spec.names)


def build_model(
    index: DeclarationIndex,
    scope: Scope,
    registry: ExternalTypeRegistry = DEFAULT_REGISTRY,
) -> TypeModel:
    """Build a TypeModel from indexed declarations.

    Sum-type interfaces are registered first so that records, visited in
    declaration order, can be matched against all of them.

    Args:
        index: Declarations of the files making up the input.
        scope: Resolves field type names to declaration kinds.
        registry: External types for field classification.

    Returns:
        The populated model.
    """
    model = TypeModel()

    for spec in index.specs:
        if not spec.is_generic and isinstance(spec.type, InterfaceExpr) and is_sum_type_name(spec.name):
            register_sum_type(model, spec.name)

    for spec in index.specs:
        if spec.is_generic or not is_exported(spec.name):
            continue
        if isinstance(spec.type, StructExpr):
            model.add_record(Record(name=spec.name, fields=_record_fields(spec.type, scope, registry)))
            assign_member(model, spec.name)
            continue
        kind = index.kind_of(spec.name)
        primitive = index.underlying_primitive(spec.name)
        if primitive is None:
            continue
        if kind == DeclarationKind.ENUMERATION:
            model.add_enumeration(Enumeration(name=spec.name, values=list(index.enum_values[spec.name])))
        elif kind == DeclarationKind.ALIAS:
            model.add_alias(Alias(name=spec.name, underlying=PrimitiveTypeRef(name=primitive)))

    return model


# ################
# Implementation
# ################


def _record_fields(struct: StructExpr, scope: Scope, registry: ExternalTypeRegistry) -> list[Field]:
    """Classify the named, exported, non-reserved fields of *struct* in declaration order."""
    fields: list[Field] = []
    for decl in struct.fields:
        if decl.is_embedded:
            continue
        type_ref = classify(decl.type, scope, registry)
        for name in decl.names:
            if name in RESERVED_FIELDS or not is_exported(name):
                continue
            fields.append(Field(name=name, type=type_ref))
    return fields
