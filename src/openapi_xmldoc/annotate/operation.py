"""Operation summaries, descriptions and response descriptions."""

from loguru import logger

from openapi_xmldoc.annotate.base import DocAnnotator
from openapi_xmldoc.annotate.responses import merge_responses
from openapi_xmldoc.document.models import Operation
from openapi_xmldoc.document.repository import SchemaRepository
from openapi_xmldoc.symbols.base import MethodSymbol
from openapi_xmldoc.symbols.names import member_name_for_method, member_name_for_type


class OperationAnnotator(DocAnnotator):
    """Applies controller and action documentation to an operation.

    Responses documented on the controller type apply to every action; the
    action's own ``<response>`` elements are merged afterwards and win.
    """

    def annotate(
        self,
        operation: Operation,
        symbol: MethodSymbol | None,
        repository: SchemaRepository | None = None,
    ) -> None:
        if symbol is None:
            return

        method = self.resolver.target_method(symbol.method)
        if method is None:
            logger.debug("Skipping operation for unresolved method {}", symbol.method.name)
            return

        controller_node = self.index.lookup(member_name_for_type(method.declaring_type))
        if controller_node is not None:
            merge_responses(operation, controller_node.children("response"))

        method_node = self.index.lookup(member_name_for_method(method))
        if method_node is None:
            return

        summary_node = method_node.child("summary")
        if summary_node is not None:
            operation.summary = summary_node.humanized()

        remarks_node = method_node.child("remarks")
        if remarks_node is not None:
            operation.description = remarks_node.humanized()

        merge_responses(operation, method_node.children("response"))
