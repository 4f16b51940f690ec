# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type model for fixturegen (records, enumerations, aliases, sum types)."""

from fixturegen.model.entities import Alias, Enumeration, Record, TypeModel
from fixturegen.model.types import (
    AliasTypeRef,
    EnumerationTypeRef,
    ExternalTypeRef,
    Field,
    PointerTypeRef,
    PrimitiveTypeRef,
    RecordTypeRef,
    SequenceTypeRef,
    SumTypeRef,
    TypeRef,
    UnresolvedTypeRef,
    is_primitive_name,
)

__all__ = [
    # Type references
    "PrimitiveTypeRef",
    "RecordTypeRef",
    "EnumerationTypeRef",
    "AliasTypeRef",
    "SumTypeRef",
    "PointerTypeRef",
    "SequenceTypeRef",
    "ExternalTypeRef",
    "UnresolvedTypeRef",
    "TypeRef",
    "Field",
    "is_primitive_name",
    # Declarations
    "Record",
    "Enumeration",
    "Alias",
    "TypeModel",
]
