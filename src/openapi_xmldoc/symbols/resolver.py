"""Symbol descriptor -> documentation member name."""

from loguru import logger

from openapi_xmldoc.symbols.base import (
    FieldOrPropertySymbol,
    MethodRef,
    MethodSymbol,
    ParameterSymbol,
    Symbol,
    TypeSymbol,
)
from openapi_xmldoc.symbols.catalog import TypeCatalog
from openapi_xmldoc.symbols.names import (
    member_name_for_field_or_property,
    member_name_for_method,
    member_name_for_type,
    qualified_name,
)


class NameResolver:
    """Maps symbol descriptors to the member names used as documentation keys."""

    def __init__(self, catalog: TypeCatalog | None = None):
        self.catalog = catalog or TypeCatalog()

    def resolve(self, symbol: Symbol) -> str | None:
        """Return the canonical identifier for ``symbol``, or None if it cannot be resolved.

        Parameters resolve to their owning method; the parameter name is
        used afterwards to pick the matching ``<param>`` element.
        """
        if isinstance(symbol, TypeSymbol):
            return member_name_for_type(symbol.type)
        if isinstance(symbol, FieldOrPropertySymbol):
            return member_name_for_field_or_property(symbol.declaring_type, symbol.name, symbol.is_field)
        if isinstance(symbol, (MethodSymbol, ParameterSymbol)):
            method = self.target_method(symbol.method)
            return member_name_for_method(method) if method is not None else None
        raise TypeError(f"Unsupported symbol descriptor: {type(symbol).__name__}")

    def target_method(self, method: MethodRef) -> MethodRef | None:
        """Return the method whose documentation applies to ``method``.

        Documentation is written against the open generic definition, so a
        method of a closed generic type is mapped back to it.
        """
        if not method.declaring_type.is_constructed_generic:
            return method

        target = self.catalog.underlying_generic_method(method)
        if target is None:
            logger.debug(
                "No generic definition found for {}.{}",
                qualified_name(method.declaring_type, True),
                method.name,
            )
        return target
