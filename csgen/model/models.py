"""Pydantic v2 models describing a C# source artifact.

Defines the descriptor hierarchy handed to the builders: access modifiers,
artifact kinds, and the variable / method / class records.  Models are frozen
once constructed; member sequences are tuples that keep insertion order and
are never deduplicated.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StringConstraints, field_validator


# Letters (any script) or underscore, then letters, digits or underscores.
IDENTIFIER_PATTERN = r"^@?[^\W\d]\w*$"


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class AccessModifier(str, Enum):
    """Visibility of a class or member.

    Values are the display names offered to the user.  Lookup is lenient:
    ``"private"``, ``"private protected"`` and ``"private_protected"`` all
    resolve to their member.
    """
    PUBLIC = "Public"
    PRIVATE = "Private"
    PROTECTED = "Protected"
    INTERNAL = "Internal"
    PRIVATE_PROTECTED = "PrivateProtected"
    PROTECTED_INTERNAL = "ProtectedInternal"

    @classmethod
    def _missing_(cls, value: object) -> AccessModifier | None:
        if isinstance(value, str):
            key = _normalise_key(value)
            for member in cls:
                if _normalise_key(member.value) == key:
                    return member
        return None


class ArtifactKind(str, Enum):
    """Kind of source file that can be requested. Only CLASS has a builder."""
    CLASS = "Class"
    INTERFACE = "Interface"
    ENUM = "Enum"
    STRUCT = "Struct"
    EMPTY_FILE = "EmptyFile"

    @classmethod
    def _missing_(cls, value: object) -> ArtifactKind | None:
        if isinstance(value, str):
            key = _normalise_key(value)
            for member in cls:
                if _normalise_key(member.value) == key:
                    return member
        return None


def _normalise_key(value: str) -> str:
    return value.replace(" ", "").replace("_", "").replace("-", "").lower()


def _coerce_modifier(value: Any) -> Any:
    if isinstance(value, str):
        return AccessModifier(value)
    return value


# ---------------------------------------------------------------------------
# Field types
# ---------------------------------------------------------------------------

Identifier = Annotated[
    str, StringConstraints(strip_whitespace=True, pattern=IDENTIFIER_PATTERN)
]
TypeName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, pattern=r"^[^\r\n]+$")
]
Modifier = Annotated[AccessModifier, BeforeValidator(_coerce_modifier)]


# ---------------------------------------------------------------------------
# Member models
# ---------------------------------------------------------------------------

class _Descriptor(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class VariableModel(_Descriptor):
    """A field declared on a class."""
    access_modifier: Modifier = Field(
        ..., alias="accessModifier", description="Field visibility"
    )
    type_name: TypeName = Field(..., alias="typeName", description="C# type, e.g. 'string'")
    name: Identifier = Field(..., alias="identifier", description="Field identifier")

    def __str__(self) -> str:
        return f"{self.access_modifier.value} {self.type_name} {self.name}"


class ParameterModel(_Descriptor):
    """A single method parameter."""
    type_name: TypeName = Field(..., alias="typeName", description="Parameter type")
    name: Identifier = Field(..., alias="identifier", description="Parameter identifier")

    def __str__(self) -> str:
        return f"{self.type_name} {self.name}"


class MethodModel(_Descriptor):
    """A method declared on a class. Bodies are always rendered empty."""
    access_modifier: Modifier = Field(
        ..., alias="accessModifier", description="Method visibility"
    )
    return_type: TypeName = Field(
        ..., alias="returnType", description="Return type; 'void' for none"
    )
    name: Identifier = Field(..., alias="identifier", description="Method identifier")
    parameters: tuple[ParameterModel, ...] = Field(
        default=(), description="Parameters in declaration order"
    )

    @field_validator("parameters", mode="before")
    @classmethod
    def _pairs_to_parameters(cls, value: Any) -> Any:
        # Accept ``["int", "count"]`` pairs alongside full mappings.
        if isinstance(value, (list, tuple)):
            return [
                {"type_name": item[0], "name": item[1]}
                if isinstance(item, (list, tuple)) and len(item) == 2
                else item
                for item in value
            ]
        return value

    def __str__(self) -> str:
        params = ", ".join(str(p) for p in self.parameters)
        return f"{self.access_modifier.value} {self.return_type} {self.name}({params})"


# ---------------------------------------------------------------------------
# File-level models
# ---------------------------------------------------------------------------

class FileModel(_Descriptor):
    """Fields shared by every artifact kind.

    ``name`` is both the declared type name and the base of the output file
    name.
    """
    name: Identifier = Field(..., alias="identifier", description="Type name")
    access_modifier: Modifier = Field(
        default=AccessModifier.PUBLIC, alias="accessModifier", description="Type visibility"
    )


class ClassModel(FileModel):
    """Complete description of a class to render."""
    variables: tuple[VariableModel, ...] = Field(
        default=(), description="Fields in declaration order"
    )
    methods: tuple[MethodModel, ...] = Field(
        default=(), description="Methods in declaration order"
    )
