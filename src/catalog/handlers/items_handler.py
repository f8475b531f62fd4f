"""
Items Handler - Lambda function for the product catalog API.

This module wires the five catalog routes onto the API Gateway REST resolver.
Reads go through the query capability and writes through the command
capability; both are resolved on first use so tests can patch the factories.
"""

import json
from typing import Any, Dict, Mapping

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from aws_lambda_powertools.utilities.typing import LambdaContext

from catalog.dal import get_commands, get_queries
from catalog.handlers import commands_handler, queries_handler
from catalog.handlers.utils.errors import BaseServiceError, log_error_metrics
from catalog.handlers.utils.observability import logger, metrics, tracer
from catalog.handlers.utils.rest_api_resolver import ITEM_PATH, ITEMS_PATH, Route, app, register_routes


def request_uri(event: APIGatewayProxyEvent) -> str:
    """
    Rebuild the URI a request was sent to.

    The path is the one the client called, including the stage or base path
    mapping that API Gateway strips from ``event.path``. Returns the absolute
    URI when the Host header is known, otherwise the bare path.
    """
    path = (event.get("requestContext") or {}).get("path") or event.path
    host = event.headers.get("Host")
    if not host:
        return path
    scheme = event.headers.get("X-Forwarded-Proto") or "https"
    return f"{scheme}://{host}{path}"


def query_all_products(**params: str) -> Response:
    return queries_handler.list_products(get_queries())


def query_product_by_id(**params: str) -> Response:
    return queries_handler.get_product_by_id(get_queries(), params)


def create_product(**params: str) -> Response:
    event = app.current_event
    return commands_handler.create_product(get_commands(), event.decoded_body, request_uri(event))


def update_product_by_id(**params: str) -> Response:
    return commands_handler.update_product_by_id(get_commands(), params, app.current_event.decoded_body)


def delete_product_by_id(**params: str) -> Response:
    return commands_handler.delete_product_by_id(get_commands(), params)


ROUTES = register_routes(app, (
    # queries
    Route('GET', ITEMS_PATH, query_all_products),
    Route('GET', ITEM_PATH, query_product_by_id),
    # commands
    Route('POST', ITEMS_PATH, create_product),
    Route('PUT', ITEM_PATH, update_product_by_id),
    Route('DELETE', ITEM_PATH, delete_product_by_id),
))


def _server_error(context: LambdaContext) -> Dict[str, Any]:
    error_response = {
        "error": {
            "code": "INTERNAL_SERVER_ERROR",
            "message": "An unexpected error occurred",
            "error_id": context.aws_request_id,
        }
    }
    return {
        "statusCode": 500,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(error_response),
        "isBase64Encoded": False,
    }


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Mapping[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Args:
        event: API Gateway REST proxy event
        context: Lambda context object

    Returns:
        API Gateway proxy response
    """
    metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)
    tracer.put_annotation("service", "product-catalog")

    try:
        response = app.resolve(event, context)
    except BaseServiceError as e:
        log_error_metrics(e)
        metrics.add_metric(name="RequestError", unit=MetricUnit.Count, value=1)
        logger.exception("Service error in lambda handler", extra={"error_code": e.error_code})
        return _server_error(context)
    except Exception as e:
        metrics.add_metric(name="RequestError", unit=MetricUnit.Count, value=1)
        logger.exception("Unhandled error in lambda handler", extra={"error": str(e)})
        return _server_error(context)

    metrics.add_metric(name="RequestSuccess", unit=MetricUnit.Count, value=1)
    return response
