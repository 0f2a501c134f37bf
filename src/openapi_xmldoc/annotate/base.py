"""Common plumbing for annotators."""

from abc import ABC, abstractmethod
from typing import Any

from openapi_xmldoc.docs.index import DocIndex, DocNode
from openapi_xmldoc.document.repository import SchemaRepository
from openapi_xmldoc.symbols.base import Symbol
from openapi_xmldoc.symbols.resolver import NameResolver


class DocAnnotator(ABC):
    """Copies documentation for a symbol onto one document element.

    The index and resolver are shared, read-only, by every call.
    """

    def __init__(self, index: DocIndex, resolver: NameResolver | None = None):
        self.index = index
        self.resolver = resolver or NameResolver()

    @abstractmethod
    def annotate(self, target: Any, symbol: Any, repository: SchemaRepository | None = None) -> None: ...

    def member(self, symbol: Symbol) -> DocNode | None:
        return self.index.lookup(self.resolver.resolve(symbol))
