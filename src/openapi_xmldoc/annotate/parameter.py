"""Query, path, header and cookie parameter descriptions and examples."""

from openapi_xmldoc.annotate.base import DocAnnotator
from openapi_xmldoc.annotate.examples import coerce_example
from openapi_xmldoc.document.models import Parameter
from openapi_xmldoc.document.repository import SchemaRepository
from openapi_xmldoc.symbols.base import FieldOrPropertySymbol, ParameterSymbol


class ParameterAnnotator(DocAnnotator):
    """Documents a non-body parameter from its property or ``<param>`` element."""

    def annotate(
        self,
        parameter: Parameter,
        symbol: FieldOrPropertySymbol | ParameterSymbol | None,
        repository: SchemaRepository | None = None,
    ) -> None:
        if symbol is None:
            return
        if not isinstance(symbol, (FieldOrPropertySymbol, ParameterSymbol)):
            raise TypeError(f"Parameters are bound to properties or parameters, not {symbol.kind}")
        node = self.member(symbol)
        if node is None:
            return

        if isinstance(symbol, FieldOrPropertySymbol):
            description_node = node.child("summary")
            example_node = node.child("example")
            example = example_node.text if example_node is not None else ""
        else:
            description_node = node.find_child("param", "name", symbol.name)
            example = description_node.attribute("example") if description_node is not None else ""

        if description_node is not None:
            parameter.description = description_node.humanized()

        if example:
            repository = repository or SchemaRepository()
            is_string = repository.resolve_type(parameter.schema_) == "string"
            parameter.example = coerce_example(example, is_string)
