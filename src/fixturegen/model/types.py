# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type reference representations for the fixturegen type model."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

STRING_PRIMITIVES: frozenset[str] = frozenset({"string"})

BOOLEAN_PRIMITIVES: frozenset[str] = frozenset({"bool"})

NUMERIC_PRIMITIVES: frozenset[str] = frozenset(
    {
        "int",
        "int8",
        "int16",
        "int32",
        "int64",
        "uint",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "uintptr",
        "float32",
        "float64",
        "complex64",
        "complex128",
        "byte",
        "rune",
    }
)

PRIMITIVE_NAMES: frozenset[str] = STRING_PRIMITIVES | BOOLEAN_PRIMITIVES | NUMERIC_PRIMITIVES


def is_primitive_name(name: str) -> bool:
    """Return True if *name* spells one of the supported primitive types."""
    return name in PRIMITIVE_NAMES


class PrimitiveTypeRef(BaseModel):
    """Reference to a string, boolean, or numeric primitive."""

    kind: Literal["primitive"] = "primitive"
    name: str


class RecordTypeRef(BaseModel):
    """Reference to a record (struct-shaped) declaration by name."""

    kind: Literal["record"] = "record"
    name: str


class EnumerationTypeRef(BaseModel):
    """Reference to an enumeration declaration by name."""

    kind: Literal["enumeration"] = "enumeration"
    name: str


class AliasTypeRef(BaseModel):
    """Reference to a named type declared over a primitive."""

    kind: Literal["alias"] = "alias"
    name: str


class SumTypeRef(BaseModel):
    """Reference to an inferred sum-type grouping (an ``is``-prefixed interface)."""

    kind: Literal["sum_type"] = "sum_type"
    name: str


class PointerTypeRef(BaseModel):
    """Reference to an optional/nullable wrapper around another type."""

    kind: Literal["pointer"] = "pointer"
    element: TypeRef


class SequenceTypeRef(BaseModel):
    """Reference to an ordered, repeatable collection of another type."""

    kind: Literal["sequence"] = "sequence"
    element: TypeRef


class ExternalTypeRef(BaseModel):
    """Reference to a type known only by name through the external type registry."""

    kind: Literal["external"] = "external"
    name: str


class UnresolvedTypeRef(BaseModel):
    """Reference the classifier could not place in any other kind.

    The raw spelling is kept for diagnostics only and never affects output.
    """

    kind: Literal["unresolved"] = "unresolved"
    spelling: str = ""


# A field type reference. The `kind` discriminator keeps (de)serialization unambiguous.
TypeRef = Annotated[
    PrimitiveTypeRef
    | RecordTypeRef
    | EnumerationTypeRef
    | AliasTypeRef
    | SumTypeRef
    | PointerTypeRef
    | SequenceTypeRef
    | ExternalTypeRef
    | UnresolvedTypeRef,
    _Field(discriminator="kind"),
]


class Field(BaseModel):
    """A named, typed field of a record."""

    name: str
    type: TypeRef


# Resolve forward references for models that use TypeRef.
PointerTypeRef.model_rebuild()
SequenceTypeRef.model_rebuild()
Field.model_rebuild()
