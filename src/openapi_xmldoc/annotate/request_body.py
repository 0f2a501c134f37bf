"""Request body descriptions and examples.

A body is bound either to a property (form models flattened by the
generator) or to an action parameter, documented by ``<param>``.
"""

from openapi_xmldoc.annotate.base import DocAnnotator
from openapi_xmldoc.annotate.examples import coerce_example
from openapi_xmldoc.document.models import RequestBody
from openapi_xmldoc.document.repository import SchemaRepository
from openapi_xmldoc.symbols.base import FieldOrPropertySymbol, ParameterSymbol


class RequestBodyAnnotator(DocAnnotator):
    def annotate(
        self,
        request_body: RequestBody,
        symbol: FieldOrPropertySymbol | ParameterSymbol | None,
        repository: SchemaRepository | None = None,
    ) -> None:
        if symbol is None:
            return
        repository = repository or SchemaRepository()
        if isinstance(symbol, FieldOrPropertySymbol):
            self._apply_property_tags(request_body, symbol, repository)
        elif isinstance(symbol, ParameterSymbol):
            self._apply_param_tags(request_body, symbol, repository)
        else:
            raise TypeError(f"Request bodies are bound to properties or parameters, not {symbol.kind}")

    def _apply_property_tags(
        self, request_body: RequestBody, symbol: FieldOrPropertySymbol, repository: SchemaRepository
    ) -> None:
        node = self.member(symbol)
        if node is None:
            return

        summary_node = node.child("summary")
        if summary_node is not None:
            request_body.description = summary_node.humanized()

        example_node = node.child("example")
        if example_node is not None:
            set_media_type_examples(request_body, example_node.text, repository)

    def _apply_param_tags(self, request_body: RequestBody, symbol: ParameterSymbol, repository: SchemaRepository) -> None:
        node = self.member(symbol)
        if node is None:
            return

        param_node = node.find_child("param", "name", symbol.name)
        if param_node is None:
            return

        request_body.description = param_node.humanized()
        example = param_node.attribute("example")
        if example:
            set_media_type_examples(request_body, example, repository)


def set_media_type_examples(request_body: RequestBody, raw: str, repository: SchemaRepository) -> None:
    """Coerce ``raw`` separately for each media type, against that media type's schema."""
    for media_type in request_body.content.values():
        is_string = repository.resolve_type(media_type.schema_) == "string"
        media_type.example = coerce_example(raw, is_string)
