"""Persisting generated files.

Derives the output file name from a descriptor and writes rendered lines to
disk.  Writes run in a worker thread so callers inside an event loop are not
blocked.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from csgen.builder import join_lines
from csgen.config import Config
from csgen.dispatch import generate, is_supported
from csgen.model.models import ArtifactKind, FileModel


def suggest_file_name(model: FileModel, extension: str = ".cs") -> str:
    """Return the file name for *model*, e.g. ``"Animal.cs"``.

    The extension is appended once; a verbatim ``@`` prefix is dropped.
    """
    if extension and not extension.startswith("."):
        extension = "." + extension
    return f"{model.name.lstrip('@')}{extension}"


async def write_lines(
    lines: list[str],
    path: str | Path,
    encoding: str = "utf-8",
) -> Path:
    """Write *lines* to *path*, one per line with a trailing newline.

    Parent directories are created automatically.  Returns the output path.
    """
    out = Path(path)
    content = join_lines(lines)
    await asyncio.to_thread(_write_file, out, content, encoding)
    return out


async def write_artifact(
    kind: ArtifactKind,
    model: FileModel,
    output_dir: str | Path,
    config: Config | None = None,
) -> Path | None:
    """Render *model* as a *kind* artifact and write it under *output_dir*.

    Returns:
        The written path, or ``None`` when *kind* has no builder yet (nothing
        is written in that case).
    """
    config = config or Config()
    if not is_supported(kind):
        return None
    lines = generate(kind, model, indent=config.indent)
    target = Path(output_dir) / suggest_file_name(model, config.file_extension)
    return await write_lines(lines, target, config.encoding)


def _write_file(path: Path, content: str, encoding: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding=encoding)
