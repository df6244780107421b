"""Artifact-kind dispatch.

Selects the builder for a requested :class:`ArtifactKind`.  Only classes are
implemented; the other kinds are accepted and yield no lines.
"""

from __future__ import annotations

from csgen.builder import DEFAULT_INDENT, ClassBuilder
from csgen.model.models import ArtifactKind, ClassModel, FileModel

SUPPORTED_KINDS: frozenset[ArtifactKind] = frozenset({ArtifactKind.CLASS})


def is_supported(kind: ArtifactKind) -> bool:
    """Return ``True`` if *kind* has a builder."""
    return ArtifactKind(kind) in SUPPORTED_KINDS


def generate(
    kind: ArtifactKind,
    descriptor: FileModel,
    *,
    indent: str = DEFAULT_INDENT,
) -> list[str]:
    """Render *descriptor* as the source lines of a *kind* artifact.

    Args:
        kind: Which artifact to produce.
        descriptor: The model to render.  Must be a ``ClassModel`` when
            *kind* is ``ArtifactKind.CLASS``.
        indent: Indentation unit applied per nesting level.

    Returns:
        The rendered lines.  An empty list for kinds that have no builder
        yet (interface, enum, struct, empty file); this is not an error.
    """
    kind = ArtifactKind(kind)
    if kind is ArtifactKind.CLASS:
        if not isinstance(descriptor, ClassModel):
            raise TypeError(
                f"ArtifactKind.CLASS requires a ClassModel, got {type(descriptor).__name__}"
            )
        return ClassBuilder(descriptor, indent).get_lines()
    else:
        # Interface, Enum, Struct, EmptyFile: not implemented yet.
        return []
