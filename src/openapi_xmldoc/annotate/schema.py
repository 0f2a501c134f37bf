"""Schema descriptions and examples from type and member documentation."""

from openapi_xmldoc.annotate.base import DocAnnotator
from openapi_xmldoc.annotate.examples import coerce_example
from openapi_xmldoc.document.models import Schema
from openapi_xmldoc.document.repository import SchemaRepository
from openapi_xmldoc.symbols.base import FieldOrPropertySymbol, TypeSymbol


class SchemaAnnotator(DocAnnotator):
    def annotate(
        self,
        schema: Schema,
        symbol: TypeSymbol | FieldOrPropertySymbol,
        repository: SchemaRepository | None = None,
    ) -> None:
        node = self.member(symbol)
        if node is None:
            return

        summary_node = node.child("summary")
        if summary_node is not None:
            schema.description = summary_node.humanized()

        if isinstance(symbol, TypeSymbol):
            return

        example_node = node.child("example")
        if example_node is not None:
            repository = repository or SchemaRepository()
            is_string = repository.resolve_type(schema) == "string"
            schema.example = coerce_example(example_node.text, is_string)
