"""Open generic type definitions and their methods.

A method on ``Repository<Widget>`` carries closed parameter types such as
``Widget``; its documentation is keyed by the open ``Repository`1`` method
whose parameter is `` `0 ``. The catalog holds the open definitions so the
two can be matched.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel

from openapi_xmldoc.symbols.base import MethodRef, ParameterRef, TypeRef
from openapi_xmldoc.symbols.names import parameter_type_name, qualified_name


class MethodDefinition(BaseModel):
    """A method as listed under its declaring type."""

    name: str
    parameters: list[ParameterRef] = []
    generic_arity: int = 0


class TypeDefinition(BaseModel):
    """An open generic type and the methods it declares."""

    type: TypeRef
    methods: list[MethodDefinition] = []

    def method_refs(self) -> list[MethodRef]:
        return [MethodRef(declaring_type=self.type, **m.model_dump()) for m in self.methods]


class TypeCatalog:
    """Read-only lookup of type definitions by qualified name."""

    def __init__(self, definitions: list[TypeDefinition] | None = None):
        self._methods: dict[str, list[MethodRef]] = {}
        for definition in definitions or []:
            key = qualified_name(definition.type)
            self._methods.setdefault(key, []).extend(definition.method_refs())

    @classmethod
    def load(cls, file_path: Path) -> "TypeCatalog":
        """Load a catalog from a YAML or JSON file with a top-level ``types`` list."""
        data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
        return cls([TypeDefinition(**item) for item in data.get("types", [])])

    def __len__(self) -> int:
        return len(self._methods)

    def methods_of(self, type_ref: TypeRef) -> list[MethodRef]:
        return list(self._methods.get(qualified_name(type_ref), []))

    def underlying_generic_method(self, method: MethodRef) -> MethodRef | None:
        """Map a method of a closed generic type to the open definition's method.

        Candidates share the name, method generic arity and parameter count;
        the first whose parameter types, by-ref included, match after
        substituting the closed type's arguments wins. Returns None when
        nothing matches.
        """
        closed_type = method.declaring_type
        if not closed_type.is_constructed_generic:
            return None

        expected = [parameter_type_name(p.type) for p in method.parameters]
        for candidate in self.methods_of(closed_type):
            if (
                candidate.name != method.name
                or candidate.generic_arity != method.generic_arity
                or len(candidate.parameters) != len(method.parameters)
            ):
                continue
            actual = [
                parameter_type_name(_substitute(p.type, closed_type.generic_arguments))
                for p in candidate.parameters
            ]
            if actual == expected:
                return candidate
        return None


def _substitute(type_ref: TypeRef, arguments: list[TypeRef]) -> TypeRef:
    """Replace type-level generic parameters with the given arguments."""
    position = type_ref.generic_parameter
    if position is not None and position < len(arguments):
        argument = arguments[position]
        return argument.model_copy(update={"by_ref": True}) if type_ref.by_ref else argument
    if type_ref.element_type is not None:
        return type_ref.model_copy(update={"element_type": _substitute(type_ref.element_type, arguments)})
    if type_ref.generic_arguments:
        return type_ref.model_copy(
            update={"generic_arguments": [_substitute(arg, arguments) for arg in type_ref.generic_arguments]}
        )
    return type_ref
