# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Package front-end: loads every Go file of a directory as one package.

All type declarations of the package share one symbol table, so field types
are resolved to what they actually denote regardless of the file they are
declared in. Names the package does not declare stay unresolved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from fixturegen.frontend.extract import DeclarationIndex, ExtractionError, build_model
from fixturegen.generator.classifier import DeclarationKind
from fixturegen.generator.registry import DEFAULT_REGISTRY, ExternalTypeRegistry
from fixturegen.model.entities import TypeModel
from fixturegen.parser import LexerError, ParseError, parse
from fixturegen.parser.syntax import SourceFile

# ###############
# Public Interface
# ###############

GO_SUFFIX = ".go"
TEST_FILE_SUFFIX = "_test.go"


@dataclass
class LoadedPackage:
    """Result of loading a package directory.

    Attributes:
        name: Package name from the first file's package clause.
        model: Type model built from the package's declarations.
        files: Files that contributed to the model, in load order.
        warnings: Non-fatal findings (skipped files, skipped generic types).
    """

    name: str
    model: TypeModel
    files: list[Path] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class PackageScope:
    """Resolves names against the package-wide symbol table."""

    def __init__(self, index: DeclarationIndex) -> None:
        self._index = index

    def lookup(self, name: str) -> DeclarationKind | None:
        return self._index.kind_of(name)


def load_package(directory: Path, registry: ExternalTypeRegistry = DEFAULT_REGISTRY) -> LoadedPackage:
    """Load the Go package in *directory* and build its type model.

    Test files (``*_test.go``) are ignored. Files whose package clause differs
    from the first file's are skipped with a warning, as are generic type
    declarations.

    Args:
        directory: Directory containing the package's .go files.
        registry: External types used for field classification.

    Returns:
        The loaded package.

    Raises:
        ExtractionError: If the directory does not exist, contains no Go
            files, or a file cannot be read or parsed.
    """
    if not directory.is_dir():
        raise ExtractionError(f"Package directory not found: {directory}")

    paths = sorted(
        path
        for path in directory.iterdir()
        if path.name.endswith(GO_SUFFIX) and not path.name.endswith(TEST_FILE_SUFFIX)
    )
    if not paths:
        raise ExtractionError(f"No Go source files found in '{directory}'")

    warnings: list[str] = []
    package_name = ""
    files: list[SourceFile] = []
    loaded: list[Path] = []
    for path in paths:
        source_file = _parse_file(path)
        if not package_name:
            package_name = source_file.package
        elif source_file.package != package_name:
            warnings.append(f"Skipping '{path.name}': package '{source_file.package}' is not '{package_name}'")
            continue
        files.append(source_file)
        loaded.append(path)

    index = DeclarationIndex(files)
    for spec in index.generic_specs():
        warnings.append(f"Skipping generic type '{spec.name}' (line {spec.line})")

    model = build_model(index, PackageScope(index), registry)
    return LoadedPackage(name=package_name, model=model, files=loaded, warnings=warnings)


# ################
# Implementation
# ################


def _parse_file(path: Path) -> SourceFile:
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ExtractionError(f"Cannot read source file '{path}': {exc}") from exc
    try:
        return parse(source)
    except (LexerError, ParseError) as exc:
        raise ExtractionError(f"Parse error in '{path}': {exc}") from exc
