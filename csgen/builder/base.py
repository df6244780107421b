"""Abstract base for artifact builders."""

from __future__ import annotations

from abc import ABC, abstractmethod

from csgen.model.models import FileModel

DEFAULT_INDENT = "    "


def join_lines(lines: list[str]) -> str:
    """Join *lines* into file content with a trailing newline; empty for no lines."""
    return "\n".join(lines) + "\n" if lines else ""


class FileBuilder(ABC):
    """Turns a descriptor into the lines of one source file.

    Builders are stateless beyond their constructor arguments: calling
    :meth:`get_lines` twice returns equal, independent lists.
    """

    def __init__(self, model: FileModel, indent: str = DEFAULT_INDENT) -> None:
        self.model = model
        self.indent = indent

    @abstractmethod
    def get_lines(self) -> list[str]:
        """Return the file content as an ordered list of lines (no newlines)."""

    def render(self) -> str:
        """Return the file content as a single newline-terminated string."""
        return join_lines(self.get_lines())
