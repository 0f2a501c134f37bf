"""Applies XML documentation to a whole OpenAPI document.

The generator records where each element came from in an ``x-symbol``
vendor extension holding a symbol descriptor::

    paths:
      /widgets/{id}:
        get:
          x-symbol:
            kind: method
            method:
              name: Get
              declaring_type: {namespace: Acme.Widgets, name: WidgetController}
              parameters:
                - name: id
                  type: {namespace: System, name: Int32}

Operations, their parameters and request bodies, component schemas and
their properties are annotated. Elements without ``x-symbol`` are left alone.
"""

import copy
from typing import Any

from loguru import logger
from pydantic import TypeAdapter

from openapi_xmldoc.annotate.operation import OperationAnnotator
from openapi_xmldoc.annotate.parameter import ParameterAnnotator
from openapi_xmldoc.annotate.request_body import RequestBodyAnnotator
from openapi_xmldoc.annotate.schema import SchemaAnnotator
from openapi_xmldoc.annotate.tags import TagAnnotator
from openapi_xmldoc.docs.index import DocIndex
from openapi_xmldoc.document.models import OpenApiModel, Operation, Schema, Tag
from openapi_xmldoc.document.repository import SchemaRepository
from openapi_xmldoc.symbols.base import MethodSymbol, Symbol, TypeRef, TypeSymbol
from openapi_xmldoc.symbols.catalog import TypeCatalog
from openapi_xmldoc.symbols.resolver import NameResolver

SYMBOL_KEY = "x-symbol"

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")

_symbol_adapter = TypeAdapter(Symbol)


def parse_symbol(raw: dict | None) -> Symbol | None:
    """Validate an ``x-symbol`` value into a symbol descriptor."""
    if raw is None:
        return None
    return _symbol_adapter.validate_python(raw)


class DocumentEnricher:
    """Runs every annotator over the elements of a document."""

    def __init__(self, index: DocIndex, catalog: TypeCatalog | None = None):
        resolver = NameResolver(catalog)
        self.operations = OperationAnnotator(index, resolver)
        self.parameters = ParameterAnnotator(index, resolver)
        self.request_bodies = RequestBodyAnnotator(index, resolver)
        self.schemas = SchemaAnnotator(index, resolver)
        self.tags = TagAnnotator(index, resolver)

    def enrich(self, document: dict, keep_symbols: bool = False) -> dict:
        """Return an annotated copy of ``document``."""
        doc = copy.deepcopy(document)
        repository = SchemaRepository.from_document(doc)

        schemas = (doc.get("components") or {}).get("schemas") or {}
        for schema_id, raw_schema in schemas.items():
            schemas[schema_id] = self._enrich_schema(raw_schema, repository)

        count = 0
        for path_item in (doc.get("paths") or {}).values():
            for method, raw_operation in path_item.items():
                if method.lower() not in HTTP_METHODS or not isinstance(raw_operation, dict):
                    continue
                path_item[method] = self._enrich_operation(doc, raw_operation, repository)
                count += 1
        logger.info("Processed {} operations and {} schemas", count, len(schemas))

        if not keep_symbols:
            _strip_symbols(doc)
        return doc

    def _enrich_schema(self, raw_schema: dict, repository: SchemaRepository) -> dict:
        schema = Schema(**raw_schema)
        symbol = _symbol_of(schema)
        if isinstance(symbol, TypeSymbol):
            self.schemas.annotate(schema, symbol, repository)
        for prop in schema.properties.values():
            prop_symbol = _symbol_of(prop)
            if prop_symbol is not None:
                self.schemas.annotate(prop, prop_symbol, repository)
        return schema.dump()

    def _enrich_operation(self, doc: dict, raw_operation: dict, repository: SchemaRepository) -> dict:
        operation = Operation(**raw_operation)
        symbol = _symbol_of(operation)
        if isinstance(symbol, MethodSymbol):
            self.operations.annotate(operation, symbol, repository)
            if operation.tags:
                self._enrich_tag(doc, operation.tags[0], symbol.method.declaring_type)

        for parameter in operation.parameters:
            self.parameters.annotate(parameter, _symbol_of(parameter), repository)
        if operation.request_body is not None:
            self.request_bodies.annotate(operation.request_body, _symbol_of(operation.request_body), repository)
        return operation.dump()

    def _enrich_tag(self, doc: dict, name: str, controller: TypeRef) -> None:
        existing = next((t for t in doc.get("tags") or [] if t.get("name") == name), None)
        tag = Tag(**existing) if existing is not None else Tag(name=name)
        self.tags.annotate(tag, TypeSymbol(type=controller))
        if tag.description is None:
            return
        if existing is not None:
            existing.update(tag.dump())
        else:
            doc.setdefault("tags", []).append(tag.dump())


def enrich_document(
    document: dict,
    index: DocIndex,
    catalog: TypeCatalog | None = None,
    keep_symbols: bool = False,
) -> dict:
    """Return a copy of ``document`` with XML documentation applied."""
    return DocumentEnricher(index, catalog).enrich(document, keep_symbols=keep_symbols)


def _symbol_of(model: OpenApiModel) -> Symbol | None:
    return parse_symbol((model.model_extra or {}).get(SYMBOL_KEY))


def _strip_symbols(value: Any) -> None:
    if isinstance(value, dict):
        value.pop(SYMBOL_KEY, None)
        for item in value.values():
            _strip_symbols(item)
    elif isinstance(value, list):
        for item in value:
            _strip_symbols(item)
