# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""External type registry and reserved name sets.

External types are types the generator knows only by name: each carries the
import it needs and a literal expression used as its default value. A
registry is built once and shared read-only by every generation call.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# ###############
# Public Interface
# ###############

# Storage fields injected by protobuf-generated structs. Never part of a fixture.
RESERVED_FIELDS: frozenset[str] = frozenset({"state", "unknownFields", "sizeCache", "EnforceVersion"})

# Enum values that must never be chosen as an enumeration's default.
RESERVED_ENUM_VALUES: frozenset[str] = frozenset({"_", "EnforceVersion"})


@dataclass(frozen=True)
class ExternalType:
    """A registered external type.

    Attributes:
        import_spec: The import line entry, e.g. ``"time"`` or
            ``timestamppb "google.golang.org/protobuf/types/known/timestamppb"``.
        value: Literal expression emitted wherever the type needs a value.
        type_expression: Spelling of the type in generated code. Falls back
            to the registered name when empty.
    """

    import_spec: str
    value: str
    type_expression: str = ""


@dataclass(frozen=True)
class ExternalTypeRegistry:
    """Immutable mapping from external type name to its synthesis rule.

    Attributes:
        types: Registered external types keyed by simple type name.
        required_imports: Imports added whenever any external type is used.
    """

    types: Mapping[str, ExternalType] = field(default_factory=dict)
    required_imports: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "types", MappingProxyType(dict(self.types)))
        object.__setattr__(self, "required_imports", tuple(self.required_imports))

    def __contains__(self, name: object) -> bool:
        return name in self.types

    def __iter__(self) -> Iterator[str]:
        return iter(self.types)

    def get(self, name: str) -> ExternalType | None:
        return self.types.get(name)

    def with_types(self, extra: Mapping[str, ExternalType]) -> ExternalTypeRegistry:
        """Return a new registry with *extra* added; entries in *extra* win on conflict."""
        merged = dict(self.types)
        merged.update(extra)
        return ExternalTypeRegistry(types=merged, required_imports=self.required_imports)


DEFAULT_REGISTRY = ExternalTypeRegistry(
    types={
        "Timestamp": ExternalType(
            import_spec='timestamppb "google.golang.org/protobuf/types/known/timestamppb"',
            value="timestamppb.New(time.Date(2000, 1, 1, 0, 0, 0, 0, time.UTC))",
            type_expression="timestamppb.Timestamp",
        ),
        "Time": ExternalType(
            import_spec='"time"',
            value="time.Date(2000, 1, 1, 0, 0, 0, 0, time.UTC)",
            type_expression="time.Time",
        ),
    },
    required_imports=('"time"',),
)
