"""Descriptor file loading.

Reads a class description from a JSON or YAML document and validates it into
a :class:`~csgen.model.models.ClassModel`.  This is the non-interactive
stand-in for the dialogs that collect class details from a user.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import ClassModel

_YAML_SUFFIXES = {".yaml", ".yml"}


class DescriptorError(Exception):
    """Raised when a descriptor cannot be read or does not validate."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


def parse_class_model(data: Any, path: Path | None = None) -> ClassModel:
    """Validate an in-memory mapping into a ``ClassModel``.

    Both snake_case field names and the camelCase aliases
    (``identifier``, ``accessModifier``, ``typeName``, ``returnType``) are
    accepted.

    Raises:
        DescriptorError: If *data* is not a mapping or fails validation.
    """
    if not isinstance(data, dict):
        raise DescriptorError(
            f"Descriptor root must be a mapping, got {type(data).__name__}", path
        )
    try:
        return ClassModel.model_validate(data)
    except ValidationError as exc:
        where = f" in {path}" if path else ""
        raise DescriptorError(
            f"Invalid class descriptor{where}: {exc.error_count()} error(s)\n{exc}", path
        ) from exc


def load_class_model(path: str | Path) -> ClassModel:
    """Load a ``ClassModel`` from a ``.json``, ``.yaml`` or ``.yml`` file.

    Raises:
        DescriptorError: If the file is missing, unparsable, or invalid.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise DescriptorError(f"Descriptor file not found: {file_path}", file_path)

    try:
        raw = file_path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as exc:
        raise DescriptorError(f"Could not read {file_path}: {exc}", file_path) from exc

    try:
        if file_path.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(raw)
        else:
            data = json.loads(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DescriptorError(f"Could not parse {file_path}: {exc}", file_path) from exc

    return parse_class_model(data, file_path)
