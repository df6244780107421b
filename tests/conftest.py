"""Shared pytest fixtures for the csgen test suite.

Provides reusable fixtures for:
- Sample class descriptors (empty, the canonical ``Animal`` class, a wide one)
- Descriptor files on disk in JSON and YAML form
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import yaml

from csgen.model import ClassModel


# ---------------------------------------------------------------------------
# Raw descriptor payloads
# ---------------------------------------------------------------------------

@pytest.fixture
def animal_data() -> dict[str, Any]:
    """The ``Animal`` example using the camelCase field names."""
    return {
        "identifier": "Animal",
        "accessModifier": "Public",
        "variables": [
            {"accessModifier": "Private", "typeName": "string", "identifier": "name"},
        ],
        "methods": [
            {
                "accessModifier": "Public",
                "returnType": "void",
                "identifier": "Speak",
                "parameters": [],
            },
        ],
    }


@pytest.fixture
def shop_data() -> dict[str, Any]:
    """A class with several members of mixed visibility, in snake_case."""
    return {
        "name": "ShoppingCart",
        "access_modifier": "Internal",
        "variables": [
            {"access_modifier": "Private", "type_name": "List<Item>", "name": "items"},
            {"access_modifier": "Protected", "type_name": "decimal", "name": "discount"},
            {"access_modifier": "PrivateProtected", "type_name": "int", "name": "revision"},
        ],
        "methods": [
            {
                "access_modifier": "Public",
                "return_type": "void",
                "name": "Add",
                "parameters": [
                    {"type_name": "Item", "name": "item"},
                    {"type_name": "int", "name": "quantity"},
                ],
            },
            {
                "access_modifier": "ProtectedInternal",
                "return_type": "decimal",
                "name": "Total",
                "parameters": [],
            },
            {
                "access_modifier": "Private",
                "return_type": "Dictionary<string, int>",
                "name": "CountByCategory",
                "parameters": [["bool", "includeEmpty"]],
            },
        ],
    }


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

@pytest.fixture
def empty_model() -> ClassModel:
    """A public class with no members."""
    return ClassModel(name="Empty")


@pytest.fixture
def animal_model(animal_data: dict[str, Any]) -> ClassModel:
    return ClassModel.model_validate(animal_data)


@pytest.fixture
def shop_model(shop_data: dict[str, Any]) -> ClassModel:
    return ClassModel.model_validate(shop_data)


# ---------------------------------------------------------------------------
# Descriptor files
# ---------------------------------------------------------------------------

@pytest.fixture
def animal_json(tmp_path: Path, animal_data: dict[str, Any]) -> Path:
    """``animal.json`` written to a temporary directory."""
    path = tmp_path / "animal.json"
    path.write_text(json.dumps(animal_data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def shop_yaml(tmp_path: Path, shop_data: dict[str, Any]) -> Path:
    """``shop.yaml`` written to a temporary directory."""
    path = tmp_path / "shop.yaml"
    path.write_text(yaml.safe_dump(shop_data, sort_keys=False), encoding="utf-8")
    return path
