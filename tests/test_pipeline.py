from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from openapi_xmldoc.docs.index import DocIndex
from openapi_xmldoc.pipeline import enrich_document, parse_symbol
from openapi_xmldoc.symbols.base import MethodSymbol
from openapi_xmldoc.symbols.catalog import TypeCatalog

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def document():
    return yaml.safe_load((FIXTURES / "widgets.yaml").read_text(encoding="utf-8"))


@pytest.fixture
def index():
    return DocIndex.load(FIXTURES / "widgets.xml")


@pytest.fixture
def catalog():
    return TypeCatalog.load(FIXTURES / "types.yaml")


class TestParseSymbol:
    def test_method_symbol(self):
        symbol = parse_symbol({"kind": "method", "method": {"name": "Get", "declaring_type": {"name": "C"}}})
        assert isinstance(symbol, MethodSymbol)

    def test_missing(self):
        assert parse_symbol(None) is None

    def test_unknown_kind(self):
        with pytest.raises(ValidationError):
            parse_symbol({"kind": "event", "name": "Changed"})


class TestEnrichDocument:
    def test_operation_summary_and_responses(self, document, index, catalog):
        result = enrich_document(document, index, catalog)
        get_widget = result["paths"]["/widgets/{id}"]["get"]
        assert get_widget["summary"] == "Gets a widget"
        assert get_widget["description"] == "Returns the widget with the given id."
        assert get_widget["responses"]["404"]["description"] == "Widget not found"
        assert get_widget["responses"]["200"]["description"] == "The widget"
        assert get_widget["responses"]["200"]["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/Widget"
        }

    def test_unrelated_operation_untouched(self, document, index, catalog):
        result = enrich_document(document, index, catalog)
        health = result["paths"]["/health"]["get"]
        assert health == {"operationId": "Ping", "responses": {"200": {"description": "Success"}}}

    def test_parameters(self, document, index, catalog):
        result = enrich_document(document, index, catalog)
        id_param = result["paths"]["/widgets/{id}"]["get"]["parameters"][0]
        assert id_param["description"] == "The widget id"
        assert id_param["example"] == 42
        page_size = result["paths"]["/widgets"]["get"]["parameters"][0]
        assert page_size["example"] == 25

    def test_request_bodies(self, document, index, catalog):
        result = enrich_document(document, index, catalog)
        create = result["paths"]["/widgets"]["post"]["requestBody"]
        assert create["description"] == "The widget to create"
        assert create["content"]["application/json"]["example"] == {"name": "Sprocket"}
        rename = result["paths"]["/widgets/{id}/name"]["put"]["requestBody"]
        assert rename["content"]["text/plain"]["example"] == "Gizmo"

    def test_closed_generic_operation(self, document, index, catalog):
        result = enrich_document(document, index, catalog)
        delete = result["paths"]["/gadgets/{id}"]["delete"]
        assert delete["summary"] == "Deletes an entity"
        assert delete["responses"]["500"]["description"] == "Unexpected failure"

    def test_closed_generic_operation_without_catalog(self, document, index):
        result = enrich_document(document, index)
        delete = result["paths"]["/gadgets/{id}"]["delete"]
        assert "summary" not in delete
        assert list(delete["responses"]) == ["200"]

    def test_schemas(self, document, index, catalog):
        result = enrich_document(document, index, catalog)
        widget = result["components"]["schemas"]["Widget"]
        assert widget["description"].startswith("A widget")
        assert widget["properties"]["name"] == {"type": "string", "description": "The widget name", "example": "Sprocket"}
        assert widget["properties"]["weight"]["example"] == 12.5
        assert widget["additionalProperties"] is False

    def test_tags(self, document, index, catalog):
        result = enrich_document(document, index, catalog)
        assert {"name": "Widget", "description": "Manages widgets"} in result["tags"]
        assert {"name": "Gadget", "description": "Generic CRUD endpoints"} in result["tags"]

    def test_symbols_removed(self, document, index, catalog):
        result = enrich_document(document, index, catalog)
        assert "x-symbol" not in yaml.safe_dump(result)

    def test_keep_symbols(self, document, index, catalog):
        result = enrich_document(document, index, catalog, keep_symbols=True)
        assert result["paths"]["/widgets/{id}"]["get"]["x-symbol"]["kind"] == "method"

    def test_input_not_mutated(self, document, index, catalog):
        original = yaml.safe_dump(document)
        enrich_document(document, index, catalog)
        assert yaml.safe_dump(document) == original

    def test_deterministic(self, document, index, catalog):
        assert enrich_document(document, index, catalog) == enrich_document(document, index, catalog)
