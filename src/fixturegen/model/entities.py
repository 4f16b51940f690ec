# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declared types and the name-indexed type model."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import Field as _Field

from fixturegen.model.types import Field, PrimitiveTypeRef

# ###############
# Public Interface
# ###############


class Record(BaseModel):
    """A named, field-bearing declared type. Fields keep declaration order."""

    name: str
    fields: list[Field] = _Field(default_factory=list)


class Enumeration(BaseModel):
    """A named type whose values are a fixed, ordered set of identifiers."""

    name: str
    values: list[str] = _Field(default_factory=list)


class Alias(BaseModel):
    """A named type whose representation is a primitive (e.g. ``type TenantID string``)."""

    name: str
    underlying: PrimitiveTypeRef


class TypeModel(BaseModel):
    """The flat declaration graph handed from a front-end to the generator.

    All cross references are by name and resolved lazily, which lets record
    declarations refer to each other recursively. Adding a declaration whose
    name is already present overwrites the earlier one.

    Attributes:
        records: Record declarations keyed by name.
        enumerations: Enumeration declarations keyed by name.
        aliases: Alias declarations keyed by name.
        sum_types: Sum-type name mapped to its canonical member record, or
            ``None`` while no member has been found.
    """

    records: dict[str, Record] = _Field(default_factory=dict)
    enumerations: dict[str, Enumeration] = _Field(default_factory=dict)
    aliases: dict[str, Alias] = _Field(default_factory=dict)
    sum_types: dict[str, str | None] = _Field(default_factory=dict)

    def add_record(self, record: Record) -> None:
        self.records[record.name] = record

    def add_enumeration(self, enumeration: Enumeration) -> None:
        self.enumerations[enumeration.name] = enumeration

    def add_alias(self, alias: Alias) -> None:
        self.aliases[alias.name] = alias

    def record(self, name: str) -> Record | None:
        return self.records.get(name)

    def enumeration(self, name: str) -> Enumeration | None:
        return self.enumerations.get(name)

    def alias(self, name: str) -> Alias | None:
        return self.aliases.get(name)

    def sorted_records(self) -> list[Record]:
        """Return all records ordered by name."""
        return [self.records[name] for name in sorted(self.records)]

    def sorted_enumerations(self) -> list[Enumeration]:
        """Return all enumerations ordered by name."""
        return [self.enumerations[name] for name in sorted(self.enumerations)]

    def sorted_aliases(self) -> list[Alias]:
        """Return all aliases ordered by name."""
        return [self.aliases[name] for name in sorted(self.aliases)]
