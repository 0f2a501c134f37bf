"""Tag descriptions from controller summaries."""

from openapi_xmldoc.annotate.base import DocAnnotator
from openapi_xmldoc.document.models import Tag
from openapi_xmldoc.document.repository import SchemaRepository
from openapi_xmldoc.symbols.base import TypeSymbol


class TagAnnotator(DocAnnotator):
    def annotate(self, tag: Tag, symbol: TypeSymbol, repository: SchemaRepository | None = None) -> None:
        node = self.member(symbol)
        if node is None:
            return
        summary_node = node.child("summary")
        if summary_node is not None:
            tag.description = summary_node.humanized()
