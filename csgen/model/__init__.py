"""Descriptor models for csgen.

Usage::

    from csgen.model import ClassModel, VariableModel, AccessModifier

    model = ClassModel(
        name="Animal",
        variables=[VariableModel(access_modifier="Private", type_name="string", name="name")],
    )
"""

from csgen.model.loader import DescriptorError, load_class_model, parse_class_model
from csgen.model.models import (
    AccessModifier,
    ArtifactKind,
    ClassModel,
    FileModel,
    MethodModel,
    ParameterModel,
    VariableModel,
)

__all__ = [
    "AccessModifier",
    "ArtifactKind",
    "ClassModel",
    "DescriptorError",
    "FileModel",
    "MethodModel",
    "ParameterModel",
    "VariableModel",
    "load_class_model",
    "parse_class_model",
]
