"""Component schemas, used to find the primitive type behind a ``$ref``."""

from openapi_xmldoc.document.models import Schema

REF_PREFIX = "#/components/schemas/"


class SchemaRepository:
    """The ``components.schemas`` section of a document, by schema id."""

    def __init__(self, schemas: dict[str, Schema] | None = None):
        self.schemas = schemas or {}

    @classmethod
    def from_document(cls, document: dict) -> "SchemaRepository":
        raw = (document.get("components") or {}).get("schemas") or {}
        return cls({schema_id: Schema(**schema) for schema_id, schema in raw.items()})

    def resolve_type(self, schema: Schema | None) -> str | None:
        """Return the effective type name of ``schema``, following ``$ref`` chains."""
        seen: set[str] = set()
        while schema is not None and schema.ref:
            if not schema.ref.startswith(REF_PREFIX) or schema.ref in seen:
                return None
            seen.add(schema.ref)
            schema = self.schemas.get(schema.ref[len(REF_PREFIX):])
        if schema is None:
            return None
        if isinstance(schema.type, list):
            return next((t for t in schema.type if t != "null"), None)
        return schema.type
