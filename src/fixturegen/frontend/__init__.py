# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Front-ends turning Go source into a TypeModel."""

from fixturegen.frontend.extract import DeclarationIndex, ExtractionError, build_model, is_exported
from fixturegen.frontend.package import LoadedPackage, PackageScope, load_package
from fixturegen.frontend.source import LexicalScope, parse_source

__all__ = [
    "DeclarationIndex",
    "ExtractionError",
    "LexicalScope",
    "LoadedPackage",
    "PackageScope",
    "build_model",
    "is_exported",
    "load_package",
    "parse_source",
]
