from openapi_xmldoc.symbols.base import MethodRef, ParameterRef, TypeRef
from openapi_xmldoc.symbols.names import (
    member_name_for_field_or_property,
    member_name_for_method,
    member_name_for_type,
    qualified_name,
)

INT32 = TypeRef(namespace="System", name="Int32")
STRING = TypeRef(namespace="System", name="String")
CONTROLLER = TypeRef(namespace="Acme.Widgets", name="WidgetController")


def _method(name: str, *params: tuple[str, TypeRef], declaring_type: TypeRef = CONTROLLER, generic_arity: int = 0):
    return MethodRef(
        name=name,
        declaring_type=declaring_type,
        parameters=[ParameterRef(name=n, type=t) for n, t in params],
        generic_arity=generic_arity,
    )


class TestTypeNames:
    def test_simple_type(self):
        assert member_name_for_type(CONTROLLER) == "T:Acme.Widgets.WidgetController"

    def test_type_without_namespace(self):
        assert member_name_for_type(TypeRef(name="Program")) == "T:Program"

    def test_generic_definition_has_arity_suffix(self):
        repo = TypeRef(namespace="Acme.Data", name="Repository", generic_parameters=["TKey", "TValue"])
        assert member_name_for_type(repo) == "T:Acme.Data.Repository`2"

    def test_closed_generic_type_uses_definition_name(self):
        closed = TypeRef(namespace="Acme.Data", name="Repository", generic_arguments=[INT32, STRING])
        assert member_name_for_type(closed) == "T:Acme.Data.Repository`2"

    def test_nested_type(self):
        outer = TypeRef(namespace="Acme.Widgets", name="Outer", generic_parameters=["T"])
        inner = TypeRef(name="Inner", declaring_type=outer)
        assert member_name_for_type(inner) == "T:Acme.Widgets.Outer`1.Inner"

    def test_expanded_generic_arguments(self):
        list_of_strings = TypeRef(namespace="System.Collections.Generic", name="List", generic_arguments=[STRING])
        assert qualified_name(list_of_strings, True) == "System.Collections.Generic.List{System.String}"

    def test_array_type(self):
        assert qualified_name(TypeRef(name="Int32[]", element_type=INT32)) == "System.Int32[]"


class TestMethodNames:
    def test_method_without_parameters_has_no_parentheses(self):
        assert member_name_for_method(_method("List")) == "M:Acme.Widgets.WidgetController.List"

    def test_method_with_parameters(self):
        method = _method("Rename", ("id", INT32), ("newName", STRING))
        assert member_name_for_method(method) == "M:Acme.Widgets.WidgetController.Rename(System.Int32,System.String)"

    def test_overloads_are_distinct(self):
        by_id = member_name_for_method(_method("Get", ("id", INT32)))
        by_name = member_name_for_method(_method("Get", ("name", STRING)))
        both = member_name_for_method(_method("Get", ("id", INT32), ("name", STRING)))
        assert len({by_id, by_name, both}) == 3

    def test_type_generic_parameter(self):
        crud = TypeRef(namespace="Acme.Widgets", name="CrudController", generic_parameters=["TEntity"])
        method = _method("Find", ("probe", TypeRef(name="TEntity", generic_parameter=0)), declaring_type=crud)
        assert member_name_for_method(method) == "M:Acme.Widgets.CrudController`1.Find(`0)"

    def test_generic_method(self):
        mapper = TypeRef(namespace="Acme.Widgets", name="Mapper")
        method = _method("Map", ("source", TypeRef(name="TSource", method_generic_parameter=0)), declaring_type=mapper, generic_arity=1)
        assert member_name_for_method(method) == "M:Acme.Widgets.Mapper.Map``1(``0)"

    def test_generic_parameter_type(self):
        dictionary = TypeRef(
            namespace="System.Collections.Generic",
            name="Dictionary",
            generic_arguments=[STRING, TypeRef(name="T", generic_parameter=0)],
        )
        method = _method("Merge", ("values", dictionary))
        assert member_name_for_method(method) == (
            "M:Acme.Widgets.WidgetController.Merge(System.Collections.Generic.Dictionary{System.String,`0})"
        )

    def test_by_ref_and_array_parameters(self):
        ints = TypeRef(name="Int32[]", element_type=INT32)
        counter = TypeRef(namespace="System", name="Int32", by_ref=True)
        method = _method("Count", ("ids", ints), ("total", counter))
        assert member_name_for_method(method) == "M:Acme.Widgets.WidgetController.Count(System.Int32[],System.Int32@)"


class TestMemberNames:
    def test_property(self):
        widget = TypeRef(namespace="Acme.Widgets", name="Widget")
        assert member_name_for_field_or_property(widget, "Name", is_field=False) == "P:Acme.Widgets.Widget.Name"

    def test_field(self):
        query = TypeRef(namespace="Acme.Widgets", name="WidgetQuery")
        assert member_name_for_field_or_property(query, "PageSize", is_field=True) == "F:Acme.Widgets.WidgetQuery.PageSize"
