"""Class declaration builder.

Emits a C# class skeleton in brace-on-new-line style::

    public class Animal
    {
        private string name;
        public void Speak()
        {
        }
    }

Fields come first, then methods, each in the order they were declared.
Method bodies are always empty.  No blank separator lines are emitted.
"""

from __future__ import annotations

from csgen.model.models import ClassModel, MethodModel, VariableModel

from .base import DEFAULT_INDENT, FileBuilder
from .keywords import keyword_for


class ClassBuilder(FileBuilder):
    """Builds the source lines for a :class:`ClassModel`."""

    model: ClassModel

    def __init__(self, model: ClassModel, indent: str = DEFAULT_INDENT) -> None:
        super().__init__(model, indent)

    def get_lines(self) -> list[str]:
        lines = [
            f"{keyword_for(self.model.access_modifier)} class {self.model.name}",
            "{",
        ]
        for variable in self.model.variables:
            lines.append(self._field_line(variable))
        for method in self.model.methods:
            lines.extend(self._method_lines(method))
        lines.append("}")
        return lines

    # -- Members -----------------------------------------------------------

    def _field_line(self, variable: VariableModel) -> str:
        return (
            f"{self.indent}{keyword_for(variable.access_modifier)} "
            f"{variable.type_name} {variable.name};"
        )

    def _method_lines(self, method: MethodModel) -> list[str]:
        params = ", ".join(f"{p.type_name} {p.name}" for p in method.parameters)
        return [
            f"{self.indent}{keyword_for(method.access_modifier)} "
            f"{method.return_type} {method.name}({params})",
            f"{self.indent}{{",
            f"{self.indent}}}",
        ]
