"""Canonical member names, as written into XML documentation files.

The compiler that emits the documentation file decides the format; these
helpers only replicate it:

    T:Acme.Widgets.WidgetController
    T:Acme.Widgets.Repository`1
    M:Acme.Widgets.WidgetController.Get(System.Int32)
    M:Acme.Widgets.Repository`1.Find(`0,System.Collections.Generic.List{System.String})
    M:Acme.Widgets.Mapper.Map``1(``0)
    P:Acme.Widgets.Widget.Name
"""

from openapi_xmldoc.symbols.base import MethodRef, TypeRef


def qualified_name(type_ref: TypeRef, expand_generic_args: bool = False) -> str:
    """Return the dotted name of a type.

    With ``expand_generic_args`` the arguments of a closed generic type are
    spelled out in braces, the form used inside method parameter lists.
    """
    if type_ref.element_type is not None:
        return qualified_name(type_ref.element_type, expand_generic_args) + "[]"
    if type_ref.generic_parameter is not None:
        return f"`{type_ref.generic_parameter}"
    if type_ref.method_generic_parameter is not None:
        return f"``{type_ref.method_generic_parameter}"

    parts = []
    namespace = _namespace_of(type_ref)
    if namespace:
        parts.append(namespace)
    parts.extend(_type_name(outer) for outer in _enclosing_types(type_ref))

    if type_ref.is_constructed_generic and expand_generic_args:
        args = ",".join(qualified_name(arg, True) for arg in type_ref.generic_arguments)
        parts.append(f"{type_ref.name}{{{args}}}")
    else:
        parts.append(_type_name(type_ref))
    return ".".join(parts)


def member_name_for_type(type_ref: TypeRef) -> str:
    return f"T:{qualified_name(type_ref)}"


def member_name_for_method(method: MethodRef) -> str:
    name = f"M:{qualified_name(method.declaring_type)}.{method.name}"
    if method.generic_arity:
        name += f"``{method.generic_arity}"
    if method.parameters:
        params = ",".join(parameter_type_name(p.type) for p in method.parameters)
        name += f"({params})"
    return name


def member_name_for_field_or_property(declaring_type: TypeRef, member: str, is_field: bool) -> str:
    prefix = "F" if is_field else "P"
    return f"{prefix}:{qualified_name(declaring_type)}.{member}"


def parameter_type_name(type_ref: TypeRef) -> str:
    """A parameter type as written in a method member name, by-ref marked with `@`."""
    name = qualified_name(type_ref, expand_generic_args=True)
    return name + "@" if type_ref.by_ref else name


def _type_name(type_ref: TypeRef) -> str:
    return f"{type_ref.name}`{type_ref.arity}" if type_ref.arity else type_ref.name


def _enclosing_types(type_ref: TypeRef) -> list[TypeRef]:
    """Enclosing types of a nested type, outermost first."""
    chain = []
    outer = type_ref.declaring_type
    while outer is not None:
        chain.append(outer)
        outer = outer.declaring_type
    return list(reversed(chain))


def _namespace_of(type_ref: TypeRef) -> str:
    current: TypeRef | None = type_ref
    while current is not None:
        if current.namespace:
            return current.namespace
        current = current.declaring_type
    return ""
