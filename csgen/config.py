"""csgen configuration.

Typed settings for rendering and writing generated files.  Uses a Pydantic v2
model so values are validated at construction time and can be serialised
to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


class Config(BaseModel):
    """Global csgen configuration.

    Created once by the CLI (or by a caller embedding the engine) and passed
    to the writer.
    """

    output_dir: Path = Field(default=Path("./output"))
    indent_size: int = Field(
        default=4, ge=1, le=16, description="Spaces per nesting level"
    )
    use_tabs: bool = Field(default=False, description="Indent with one tab per level")
    file_extension: str = Field(default=".cs")
    encoding: str = Field(default="utf-8")

    @field_validator("file_extension")
    @classmethod
    def _dotted_extension(cls, value: str) -> str:
        value = value.strip()
        if value and not value.startswith("."):
            value = "." + value
        return value

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def indent(self) -> str:
        """The indentation unit for one nesting level."""
        return "\t" if self.use_tabs else " " * self.indent_size

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to ``<output_dir>/csgen.json``.

        Returns:
            The path where the file was written.
        """
        target = path or (self.output_dir / "csgen.json")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CSGEN_OUTPUT_DIR, CSGEN_INDENT_SIZE, CSGEN_USE_TABS,
            CSGEN_FILE_EXTENSION, CSGEN_ENCODING.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CSGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["CSGEN_OUTPUT_DIR"])
        if os.environ.get("CSGEN_INDENT_SIZE"):
            kwargs["indent_size"] = int(os.environ["CSGEN_INDENT_SIZE"])
        if os.environ.get("CSGEN_USE_TABS"):
            kwargs["use_tabs"] = os.environ["CSGEN_USE_TABS"].strip().lower() in (
                "1", "true", "yes", "on",
            )
        if os.environ.get("CSGEN_FILE_EXTENSION"):
            kwargs["file_extension"] = os.environ["CSGEN_FILE_EXTENSION"]
        if os.environ.get("CSGEN_ENCODING"):
            kwargs["encoding"] = os.environ["CSGEN_ENCODING"]
        return cls(**kwargs)
