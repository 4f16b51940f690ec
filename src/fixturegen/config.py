# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the ``.fixturegen.yaml`` configuration file."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fixturegen.generator.registry import DEFAULT_REGISTRY, ExternalType, ExternalTypeRegistry
from fixturegen.generator.synthesizer import GenerateOptions

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".fixturegen.yaml"

DEFAULT_PACKAGE = "fixtures"


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


class ExternalTypeEntry(BaseModel):
    """An external type added to (or overriding one of) the built-in registry."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    import_spec: str = Field(alias="import")
    value: str
    type_expression: str = Field(alias="type", default="")


class GeneratorConfig(BaseModel):
    """The parsed generator configuration.

    Attributes:
        package: Package name of the generated file.
        type_prefix: Qualifier prepended to emitted type names.
        function_infix: Inserted between ``Fixture`` and the type name.
        mod_style: Emit mutator-accepting fixtures returning pointers.
        output: Output file, relative to the directory holding the config.
        external_types: Registry additions.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    package: str = DEFAULT_PACKAGE
    type_prefix: str = Field(alias="type-prefix", default="")
    function_infix: str = Field(alias="function-infix", default="")
    mod_style: bool = Field(alias="mod-style", default=True)
    output: str | None = None
    external_types: list[ExternalTypeEntry] = Field(alias="external-types", default_factory=list)

    def options(self) -> GenerateOptions:
        return GenerateOptions(
            type_name_prefix=self.type_prefix,
            function_name_infix=self.function_infix,
            mod_style=self.mod_style,
        )

    def registry(self, base: ExternalTypeRegistry = DEFAULT_REGISTRY) -> ExternalTypeRegistry:
        """Return *base* extended with the configured external types."""
        if not self.external_types:
            return base
        extra = {
            entry.name: ExternalType(
                import_spec=entry.import_spec,
                value=entry.value,
                type_expression=entry.type_expression,
            )
            for entry in self.external_types
        }
        return base.with_types(extra)


def load_config(path: Path) -> GeneratorConfig:
    """Load and validate a generator configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the ``.fixturegen.yaml`` file.

    Returns:
        A validated GeneratorConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML, or
            does not conform to the expected schema.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    return _parse_config(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_config(text: str, source_label: str = "<string>") -> GeneratorConfig:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config '{source_label}': {exc}") from exc
