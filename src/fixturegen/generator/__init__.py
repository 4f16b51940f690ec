# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Fixture generation: classification, sum-type grouping, value synthesis and emission."""

from fixturegen.generator.classifier import DeclarationKind, Scope, classify
from fixturegen.generator.emitter import collect_imports, default_enum_value, generate, generate_formatted
from fixturegen.generator.formatter import FormatterError, format_source
from fixturegen.generator.grouping import (
    SUM_TYPE_PREFIX,
    assign_member,
    is_sum_type_name,
    matches_member,
    register_sum_type,
    resolve_sum_types,
)
from fixturegen.generator.registry import (
    DEFAULT_REGISTRY,
    RESERVED_ENUM_VALUES,
    RESERVED_FIELDS,
    ExternalType,
    ExternalTypeRegistry,
)
from fixturegen.generator.synthesizer import GenerateOptions, synthesize, type_name

__all__ = [
    # Registry
    "DEFAULT_REGISTRY",
    "ExternalType",
    "ExternalTypeRegistry",
    "RESERVED_ENUM_VALUES",
    "RESERVED_FIELDS",
    # Classification
    "DeclarationKind",
    "Scope",
    "classify",
    # Sum types
    "SUM_TYPE_PREFIX",
    "assign_member",
    "is_sum_type_name",
    "matches_member",
    "register_sum_type",
    "resolve_sum_types",
    # Synthesis and emission
    "GenerateOptions",
    "synthesize",
    "type_name",
    "generate",
    "generate_formatted",
    "collect_imports",
    "default_enum_value",
    "format_source",
    "FormatterError",
]
