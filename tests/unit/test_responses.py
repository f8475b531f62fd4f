"""
Unit tests for response construction.
"""

import json

import pytest

from catalog.handlers.utils.responses import build_location, empty_response, json_response, to_json
from catalog.models.product import Product


class TestBuildLocation:
    """Test cases for the Location header join rule."""

    def test_inserts_separator(self):
        assert build_location("/items", "42") == "/items/42"

    def test_keeps_existing_trailing_slash(self):
        assert build_location("/items/", "42") == "/items/42"

    def test_absolute_uri(self):
        assert build_location("https://host/items", "7") == "https://host/items/7"


class TestJsonResponse:
    """Test cases for JSON success responses."""

    def test_compact_body_and_content_type(self):
        """Test that the body is compact JSON with the JSON content type."""
        response = json_response(200, [{"id": "1", "name": "Widget"}])

        assert response.status_code == 200
        assert response.headers["Content-Type"] == "application/json"
        assert response.body == '[{"id":"1","name":"Widget"}]'

    def test_extra_headers(self):
        response = json_response(201, {"id": "7"}, headers={"Location": "/items/7"})

        assert response.headers["Location"] == "/items/7"
        assert response.headers["Content-Type"] == "application/json"

    def test_models_round_trip(self, sample_product):
        """Test that serialized products parse back to the same structure."""
        other = Product(id="8", name="Gadget", description="A gadget")
        response = json_response(200, [sample_product, other])

        assert json.loads(response.body) == [sample_product.model_dump(), other.model_dump()]

    def test_unserializable_value_raises(self):
        with pytest.raises(TypeError):
            to_json({"value": object()})


class TestEmptyResponse:
    """Test cases for bodiless responses."""

    @pytest.mark.parametrize("status_code", [204, 400, 404])
    def test_empty_body_without_content_type(self, status_code):
        response = empty_response(status_code)

        assert response.status_code == status_code
        assert response.body == ""
        assert "Content-Type" not in response.headers
