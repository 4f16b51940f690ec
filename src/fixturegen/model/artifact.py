# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of type model artifacts.

An artifact is a compact JSON document holding one TypeModel. It lets a
front-end other than the bundled ones hand a model to the generator. The
format is versioned so future schema changes can be detected.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from fixturegen.model.entities import TypeModel

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"


def serialize(model: TypeModel) -> str:
    """Serialize a TypeModel to a compact JSON string."""
    return json.dumps(_model_to_dict(model), separators=(",", ":"))


def deserialize(data: str) -> TypeModel:
    """Deserialize a TypeModel from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`TypeModel`.

    Raises:
        ValueError: If the text is not JSON, the artifact format version is
            not recognised, or the payload does not describe a valid model.
    """
    try:
        obj = json.loads(data)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Artifact is not valid JSON: {exc}") from exc
    if not isinstance(obj, dict):
        raise ValueError("Artifact must be a JSON object")
    version = obj.get("v")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    try:
        return TypeModel.model_validate(obj.get("model", {}))
    except ValidationError as exc:
        raise ValueError(f"Invalid model artifact: {exc}") from exc


def write_artifact(model: TypeModel, path: Path) -> None:
    """Write a model artifact to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(model), encoding="utf-8")


def read_artifact(path: Path) -> TypeModel:
    """Read and deserialize a model artifact from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################


def _model_to_dict(model: TypeModel) -> dict[str, Any]:
    return {
        "v": ARTIFACT_FORMAT_VERSION,
        "model": model.model_dump(mode="json"),
    }
