"""csgen command-line entry point.

Reads a class descriptor (JSON or YAML) and writes the generated C# file.

Usage::

    python -m csgen.cli animal.json
    python -m csgen.cli animal.yaml -o ./Models --indent-size 2
    python -m csgen.cli animal.json --stdout
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from csgen.config import Config
from csgen.dispatch import generate, is_supported
from csgen.model import ArtifactKind, DescriptorError, load_class_model
from csgen.utils import (
    ensure_dir,
    print_error,
    print_source,
    print_success,
    print_summary_table,
    print_warning,
)
from csgen.writer import write_artifact


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csgen",
        description="csgen -- generate C# class skeletons from a descriptor file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m csgen.cli animal.json\n"
            "  python -m csgen.cli animal.yaml -o ./Models --indent-size 2\n"
            "  python -m csgen.cli animal.json --stdout\n"
        ),
    )
    parser.add_argument(
        "descriptor",
        help="Path to the class descriptor (.json, .yaml or .yml)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory (default: CSGEN_OUTPUT_DIR or ./output)",
    )
    parser.add_argument(
        "--kind",
        default=ArtifactKind.CLASS.value,
        help="Artifact kind: " + ", ".join(k.value for k in ArtifactKind) + " (default: Class)",
    )
    parser.add_argument(
        "--indent-size",
        type=int,
        default=None,
        help="Spaces per indentation level (default: 4)",
    )
    parser.add_argument(
        "--tabs",
        action="store_true",
        help="Indent with tabs instead of spaces",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the generated source instead of writing a file",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``python -m csgen.cli``. Returns the exit code."""
    args = build_parser().parse_args(argv)

    try:
        kind = ArtifactKind(args.kind)
    except ValueError:
        print_error(f"Error: unknown artifact kind: {args.kind}")
        return 1

    overrides: dict[str, object] = {}
    if args.output:
        overrides["output_dir"] = Path(args.output)
    if args.indent_size is not None:
        overrides["indent_size"] = args.indent_size
    if args.tabs:
        overrides["use_tabs"] = True
    try:
        config = Config.from_env()
        if overrides:
            config = Config(**{**config.model_dump(), **overrides})
    except (ValidationError, ValueError) as exc:
        print_error(f"Error: invalid option: {exc}")
        return 1

    try:
        model = load_class_model(args.descriptor)
    except DescriptorError as exc:
        print_error(f"Error: {exc}")
        return 1

    if not is_supported(kind):
        print_warning(f"{kind.value} generation is not implemented yet; nothing written.")
        return 0

    if args.stdout:
        print_source(generate(kind, model, indent=config.indent))
        return 0

    output_dir = ensure_dir(config.output_dir)
    path = asyncio.run(write_artifact(kind, model, output_dir, config))
    print_summary_table(
        {
            "Class": model.name,
            "Fields": str(len(model.variables)),
            "Methods": str(len(model.methods)),
            "File": str(path),
        },
        title="Generated",
    )
    print_success(f"Wrote {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
