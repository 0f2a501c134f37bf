"""Copies ``<response code="...">`` descriptions onto an operation."""

from typing import Iterable

from openapi_xmldoc.docs.index import DocNode
from openapi_xmldoc.document.models import Operation


def merge_responses(operation: Operation, response_nodes: Iterable[DocNode]) -> None:
    """Set the description of each documented status code, creating responses as needed.

    Nodes are applied in order, so a later node for the same code wins.
    """
    for node in response_nodes:
        code = node.attribute("code")
        operation.response(code).description = node.humanized()
