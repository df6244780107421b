"""Builders that turn descriptors into C# source lines."""

from csgen.builder.base import DEFAULT_INDENT, FileBuilder, join_lines
from csgen.builder.class_builder import ClassBuilder
from csgen.builder.keywords import ACCESS_MODIFIER_KEYWORDS, keyword_for

__all__ = [
    "ACCESS_MODIFIER_KEYWORDS",
    "ClassBuilder",
    "DEFAULT_INDENT",
    "FileBuilder",
    "join_lines",
    "keyword_for",
]
