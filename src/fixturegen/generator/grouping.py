# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sum-type membership inferred from naming.

Protobuf ``oneof`` fields surface as an unexported interface such as
``isUserReference_Id`` plus one struct per alternative
(``UserReference_EmailId``, ``UserReference_Phone``...). Nothing lists the
alternatives explicitly, so membership is read from the names: strip the
``is`` prefix and look for a record whose name starts with the part before
an underscore of the remaining parent name.

Only one alternative is needed for a fixture, so each sum type keeps the
first matching record and ignores the rest. A parent name that is a prefix of
another sum type's parent name can bind a record to the wrong sum type.
"""

from __future__ import annotations

from collections.abc import Iterable

from fixturegen.model.entities import TypeModel

# ###############
# Public Interface
# ###############

SUM_TYPE_PREFIX = "is"


def is_sum_type_name(name: str) -> bool:
    """Return True if *name* follows the sum-type marker naming convention."""
    return len(name) > len(SUM_TYPE_PREFIX) and name.startswith(SUM_TYPE_PREFIX)


def matches_member(sum_type_name: str, record_name: str) -> bool:
    """Return True if *record_name* looks like an alternative of *sum_type_name*.

    Underscore separators of the parent name are tried right to left; the
    record matches when it starts with the text before a separator followed
    by an underscore.
    """
    parent = sum_type_name[len(SUM_TYPE_PREFIX) :]
    for index in range(len(parent) - 1, -1, -1):
        if parent[index] != "_":
            continue
        stem = parent[:index]
        if len(record_name) > len(stem) and record_name.startswith(stem) and record_name[len(stem)] == "_":
            return True
    return False


def register_sum_type(model: TypeModel, name: str) -> None:
    """Register *name* as a sum type with no member yet. Existing entries are kept."""
    model.sum_types.setdefault(name, None)


def assign_member(model: TypeModel, record_name: str) -> list[str]:
    """Bind *record_name* to every still-unresolved sum type it matches.

    Returns:
        The sum-type names that received *record_name* as canonical member.
    """
    assigned: list[str] = []
    for sum_type_name, member in model.sum_types.items():
        if member is not None:
            continue
        if matches_member(sum_type_name, record_name):
            model.sum_types[sum_type_name] = record_name
            assigned.append(sum_type_name)
    return assigned


def resolve_sum_types(model: TypeModel, record_names: Iterable[str]) -> None:
    """Run :func:`assign_member` for each record name in traversal order."""
    for record_name in record_names:
        assign_member(model, record_name)
