# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for generator configuration loading."""

from pathlib import Path

import pytest

from fixturegen.config import DEFAULT_PACKAGE, ConfigError, GeneratorConfig, load_config
from fixturegen.generator import DEFAULT_REGISTRY, ExternalType, GenerateOptions

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    path = tmp_path / ".fixturegen.yaml"
    path.write_text(content, encoding="utf-8")
    return path


# ###############
# Valid Configurations
# ###############


class TestLoadConfig:
    def test_full_config(self, tmp_path: Path) -> None:
        path = _write_config(
            tmp_path,
            "package: testdata\n"
            "type-prefix: account\n"
            "function-infix: Account\n"
            "mod-style: false\n"
            "output: fixtures_gen.go\n"
            "external-types:\n"
            "  - name: Duration\n"
            '    import: durationpb "google.golang.org/protobuf/types/known/durationpb"\n'
            "    value: durationpb.New(time.Second)\n"
            "    type: durationpb.Duration\n",
        )
        config = load_config(path)
        assert config.package == "testdata"
        assert config.type_prefix == "account"
        assert config.function_infix == "Account"
        assert config.mod_style is False
        assert config.output == "fixtures_gen.go"
        assert len(config.external_types) == 1
        entry = config.external_types[0]
        assert entry.name == "Duration"
        assert entry.import_spec == 'durationpb "google.golang.org/protobuf/types/known/durationpb"'
        assert entry.type_expression == "durationpb.Duration"

    def test_empty_file_yields_defaults(self, tmp_path: Path) -> None:
        config = load_config(_write_config(tmp_path, ""))
        assert config == GeneratorConfig()
        assert config.package == DEFAULT_PACKAGE
        assert config.mod_style is True
        assert config.output is None

    def test_partial_config(self, tmp_path: Path) -> None:
        config = load_config(_write_config(tmp_path, "function-infix: PB\n"))
        assert config.function_infix == "PB"
        assert config.type_prefix == ""


class TestDerivedSettings:
    def test_options(self) -> None:
        config = GeneratorConfig.model_validate({"type-prefix": "p", "function-infix": "X", "mod-style": False})
        assert config.options() == GenerateOptions(type_name_prefix="p", function_name_infix="X", mod_style=False)

    def test_default_options(self) -> None:
        assert GeneratorConfig().options() == GenerateOptions()

    def test_registry_without_additions_is_base(self) -> None:
        assert GeneratorConfig().registry() is DEFAULT_REGISTRY

    def test_registry_with_additions(self) -> None:
        config = GeneratorConfig.model_validate(
            {"external-types": [{"name": "UUID", "import": '"github.com/google/uuid"', "value": "uuid.Nil"}]}
        )
        registry = config.registry()
        assert registry.get("UUID") == ExternalType(import_spec='"github.com/google/uuid"', value="uuid.Nil")
        assert "Timestamp" in registry
        assert "UUID" not in DEFAULT_REGISTRY


# ###############
# Errors
# ###############


class TestConfigErrors:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / ".fixturegen.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(_write_config(tmp_path, "package: [unclosed\n"))

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="must be a YAML mapping"):
            load_config(_write_config(tmp_path, "- a\n- b\n"))

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Invalid config"):
            load_config(_write_config(tmp_path, "colour: blue\n"))

    def test_wrong_type_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            load_config(_write_config(tmp_path, "mod-style: [1, 2]\n"))

    def test_external_type_missing_value(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            load_config(_write_config(tmp_path, "external-types:\n  - name: UUID\n    import: '\"uuid\"'\n"))
