"""
Pytest configuration and shared fixtures for the product catalog.

This module provides common test fixtures and configuration used across
unit and integration tests.
"""

import json
import os
from typing import Any, Callable, Dict, Optional
from unittest.mock import Mock

import boto3
import pytest
from moto import mock_aws

# Test environment configuration, applied before the handler modules are imported
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "TABLE_NAME": "test-products-table",
    "ENVIRONMENT": "test",
    "POWERTOOLS_SERVICE_NAME": "test-product-catalog",
    "POWERTOOLS_METRICS_NAMESPACE": "TestProductCatalog",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
})

from catalog.dal import Commands, Queries, get_commands, get_queries  # noqa: E402
from catalog.models.product import Product  # noqa: E402


# Sample data fixtures
@pytest.fixture
def sample_product() -> Product:
    """Create a sample product for testing."""
    return Product(id="7", name="Widget", description="A small mechanical widget")


@pytest.fixture
def sample_product_data() -> Dict[str, Any]:
    """Sample create/update payload for request testing."""
    return {
        "name": "Widget",
        "description": "A small mechanical widget",
    }


# Capability test doubles
@pytest.fixture
def queries() -> Mock:
    """Query capability double; configure return values per test."""
    return Mock(spec=Queries)


@pytest.fixture
def commands() -> Mock:
    """Command capability double; configure return values per test."""
    return Mock(spec=Commands)


@pytest.fixture
def api_gateway_event() -> Callable[..., Dict[str, Any]]:
    """Factory for API Gateway REST proxy events."""

    def _build(
        method: str,
        path: str,
        body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
        path_parameters: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)

        request_headers = {
            "Content-Type": "application/json",
            "User-Agent": "test-agent/1.0",
        }
        request_headers.update(headers or {})

        return {
            "resource": path,
            "httpMethod": method,
            "path": path,
            "headers": request_headers,
            "multiValueHeaders": {key: [value] for key, value in request_headers.items()},
            "body": body,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "httpMethod": method,
                "path": f"/test{path}",
                "resourcePath": path,
                "protocol": "HTTP/1.1",
                "identity": {
                    "sourceIp": "127.0.0.1",
                    "userAgent": "test-agent/1.0",
                },
            },
            "pathParameters": path_parameters,
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "stageVariables": None,
            "isBase64Encoded": False,
        }

    return _build


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-catalog-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-catalog-function"
    context.memory_limit_in_mb = 512
    context.get_remaining_time_in_millis.return_value = 30000
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-catalog-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    return context


@pytest.fixture
def response_header() -> Callable[[Dict[str, Any], str], Optional[str]]:
    """Read a single header value from a proxy response dict."""

    def _get(response: Dict[str, Any], name: str) -> Optional[str]:
        multi_value = response.get("multiValueHeaders") or {}
        if name in multi_value:
            return multi_value[name][0]
        return (response.get("headers") or {}).get(name)

    return _get


# DynamoDB fixtures
@pytest.fixture
def dynamodb_table():
    """Create a mock DynamoDB products table for testing."""
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")

        table = dynamodb.create_table(
            TableName="test-products-table",
            KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )

        table.wait_until_exists()
        yield table


@pytest.fixture(autouse=True)
def reset_capabilities():
    """Drop cached capability instances between tests."""
    get_queries.cache_clear()
    get_commands.cache_clear()
    yield
    get_queries.cache_clear()
    get_commands.cache_clear()


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
