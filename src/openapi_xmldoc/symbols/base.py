"""Symbol descriptors for the source members behind an API document.

The generator that produced the OpenAPI document describes each element's
origin with one of these models. They are plain data: nothing here
inspects a running program.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class TypeRef(BaseModel):
    """A reference to a type, possibly generic, nested, an array or a generic parameter."""

    name: str  # simple name without arity suffix: "List", "Widget", "T"
    namespace: str = ""
    declaring_type: "TypeRef | None" = None  # enclosing type for nested types
    generic_parameters: list[str] = []  # open definition: ["TKey", "TValue"]
    generic_arguments: list["TypeRef"] = []  # closed instantiation
    generic_parameter: int | None = None  # position when this is a type-level parameter
    method_generic_parameter: int | None = None  # position when this is a method-level parameter
    element_type: "TypeRef | None" = None  # set for arrays
    by_ref: bool = False

    @property
    def arity(self) -> int:
        return len(self.generic_arguments) or len(self.generic_parameters)

    @property
    def is_constructed_generic(self) -> bool:
        return bool(self.generic_arguments)

    @property
    def is_generic_parameter(self) -> bool:
        return self.generic_parameter is not None or self.method_generic_parameter is not None


class ParameterRef(BaseModel):
    """A single method parameter."""

    name: str
    type: TypeRef


class MethodRef(BaseModel):
    """A method together with the type that declares it."""

    name: str  # "GetWidget", "#ctor"
    declaring_type: TypeRef
    parameters: list[ParameterRef] = []
    generic_arity: int = 0


class TypeSymbol(BaseModel):
    kind: Literal["type"] = "type"
    type: TypeRef


class MethodSymbol(BaseModel):
    kind: Literal["method"] = "method"
    method: MethodRef


class FieldOrPropertySymbol(BaseModel):
    kind: Literal["field", "property"] = "property"
    declaring_type: TypeRef
    name: str

    @property
    def is_field(self) -> bool:
        return self.kind == "field"


class ParameterSymbol(BaseModel):
    kind: Literal["parameter"] = "parameter"
    method: MethodRef
    name: str


Symbol = Annotated[
    Union[TypeSymbol, MethodSymbol, FieldOrPropertySymbol, ParameterSymbol],
    Field(discriminator="kind"),
]
