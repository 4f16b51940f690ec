# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Emission of a complete fixtures file from a type model.

One fixture function is written per alias, enumeration and record, in that
order, each group sorted by type name so that the same model always yields
byte-identical output. Two shapes are supported:

* **mod style** (default), ``FixtureX(mods ...func(*X)) *X``, builds the
  default, applies every mutator in order, returns a pointer.
* **classic style**, ``FixtureX() X``, returns the default value.
"""

from __future__ import annotations

from fixturegen.generator.formatter import format_source
from fixturegen.generator.registry import DEFAULT_REGISTRY, RESERVED_ENUM_VALUES, ExternalTypeRegistry
from fixturegen.generator.synthesizer import GenerateOptions, primitive_value, synthesize
from fixturegen.model.entities import Alias, Enumeration, Record, TypeModel
from fixturegen.model.types import ExternalTypeRef, PointerTypeRef, SequenceTypeRef, TypeRef

# ###############
# Public Interface
# ###############

PTR_HELPER = "func ptr[T any](v T) *T { return &v }"


def generate(
    model: TypeModel,
    package: str,
    options: GenerateOptions | None = None,
    registry: ExternalTypeRegistry = DEFAULT_REGISTRY,
) -> str:
    """Render the fixtures file for *model* without formatting.

    Args:
        model: The populated type model.
        package: Package name written in the package clause.
        options: Naming and style settings. Defaults to mod style.
        registry: External types used for literals and imports.

    Returns:
        The Go source text.
    """
    if options is None:
        options = GenerateOptions()

    parts: list[str] = [f"package {package}\n\n"]

    imports = collect_imports(model, registry)
    if imports:
        parts.append("import (\n")
        parts.extend(f"\t{imp}\n" for imp in imports)
        parts.append(")\n\n")

    parts.append(PTR_HELPER + "\n\n")

    for alias in model.sorted_aliases():
        parts.append(_alias_fixture(alias, options))
    for enumeration in model.sorted_enumerations():
        fixture = _enumeration_fixture(enumeration, options)
        if fixture is not None:
            parts.append(fixture)
    for record in model.sorted_records():
        parts.append(_record_fixture(model, record, options, registry))

    return "".join(parts)


def generate_formatted(
    model: TypeModel,
    package: str,
    options: GenerateOptions | None = None,
    registry: ExternalTypeRegistry = DEFAULT_REGISTRY,
) -> str:
    """Render the fixtures file and run it through gofmt when possible.

    Formatting is best effort: if gofmt is missing or fails, the unformatted
    text is returned.
    """
    return format_source(generate(model, package, options, registry))


def default_enum_value(enumeration: Enumeration) -> str | None:
    """Return the first declared value that is not reserved, or None."""
    for value in enumeration.values:
        if value not in RESERVED_ENUM_VALUES:
            return value
    return None


def collect_imports(model: TypeModel, registry: ExternalTypeRegistry = DEFAULT_REGISTRY) -> list[str]:
    """Return the sorted, de-duplicated imports needed by external types used in *model*.

    Nothing is imported when no record field references an external type.
    Otherwise the registry's required imports are added as well.
    """
    used: set[str] = set()
    for record in model.records.values():
        for f in record.fields:
            _collect_external_names(f.type, used)
    if not used:
        return []

    imports: set[str] = set(registry.required_imports)
    for name in used:
        external = registry.get(name)
        if external is not None:
            imports.add(external.import_spec)
    return sorted(imports)


# ################
# Implementation
# ################


def _collect_external_names(type_ref: TypeRef, used: set[str]) -> None:
    if isinstance(type_ref, ExternalTypeRef):
        used.add(type_ref.name)
    elif isinstance(type_ref, (PointerTypeRef, SequenceTypeRef)):
        _collect_external_names(type_ref.element, used)


def _mod_signature(name: str, options: GenerateOptions) -> str:
    qualified = options.qualify(name)
    return f"func {options.fixture_name(name)}(mods ...func(*{qualified})) *{qualified} {{\n"


def _classic_signature(name: str, options: GenerateOptions) -> str:
    return f"func {options.fixture_name(name)}() {options.qualify(name)} {{\n"


def _value_fixture_body(value: str) -> str:
    """Body shared by alias and enumeration fixtures in mod style."""
    return (
        f"\tvalue := {value}\n"
        "\tfor _, mod := range mods {\n"
        "\t\tmod(&value)\n"
        "\t}\n"
        "\treturn &value\n"
    )


def _alias_fixture(alias: Alias, options: GenerateOptions) -> str:
    inner = primitive_value(alias.underlying.name, alias.name, alias.name)
    value = f"{options.qualify(alias.name)}({inner})"
    if options.mod_style:
        return _mod_signature(alias.name, options) + _value_fixture_body(value) + "}\n\n"
    return _classic_signature(alias.name, options) + f"\treturn {value}\n" + "}\n\n"


def _enumeration_fixture(enumeration: Enumeration, options: GenerateOptions) -> str | None:
    first_value = default_enum_value(enumeration)
    if first_value is None:
        return None
    value = options.qualify(first_value)
    if options.mod_style:
        return _mod_signature(enumeration.name, options) + _value_fixture_body(value) + "}\n\n"
    return _classic_signature(enumeration.name, options) + f"\treturn {value}\n" + "}\n\n"


def _record_fixture(
    model: TypeModel,
    record: Record,
    options: GenerateOptions,
    registry: ExternalTypeRegistry,
) -> str:
    qualified = options.qualify(record.name)
    lines = "".join(
        f"\t\t{f.name}: {synthesize(model, f.type, f.name, record.name, options, registry)},\n" for f in record.fields
    )
    if options.mod_style:
        return (
            _mod_signature(record.name, options)
            + f"\tvalue := &{qualified}{{\n"
            + lines
            + "\t}\n"
            + "\tfor _, mod := range mods {\n"
            + "\t\tmod(value)\n"
            + "\t}\n"
            + "\treturn value\n"
            + "}\n\n"
        )
    return _classic_signature(record.name, options) + f"\treturn {qualified}{{\n" + lines + "\t}\n" + "}\n\n"
