"""
Query side handlers for the catalog API.

Each handler maps a read through the ``Queries`` capability onto an HTTP
response. Capability errors are not caught here; they propagate to the Lambda
entry point, which answers with a generic server error.
"""

from typing import Mapping

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.metrics import MetricUnit

from catalog.dal import Queries
from catalog.handlers.utils.observability import logger, metrics, tracer
from catalog.handlers.utils.responses import empty_response, json_response


@tracer.capture_method
def list_products(queries: Queries) -> Response:
    """
    List every product in the catalog.

    Args:
        queries: Query capability

    Returns:
        200 with the JSON array of products
    """
    logger.info("List products request received")

    products = queries.all_products()
    response = json_response(200, products)

    metrics.add_metric(name="ProductsListed", unit=MetricUnit.Count, value=1)
    logger.info("Products listed successfully", extra={"product_count": len(products)})
    return response


@tracer.capture_method
def get_product_by_id(queries: Queries, params: Mapping[str, str]) -> Response:
    """
    Fetch a single product.

    Args:
        queries: Query capability
        params: Path parameters of the matched route

    Returns:
        200 with the JSON product, or 400 when ``id`` is missing
    """
    product_id = params.get('id')
    if not product_id:
        logger.warning("Get product request without id")
        return empty_response(400)

    logger.info("Get product request received", extra={"product_id": product_id})
    tracer.put_annotation("product_id", product_id)

    # Not-found is not distinguished from other query failures
    product = queries.product_by_id(product_id)
    response = json_response(200, product)

    logger.info("Product retrieved successfully", extra={"product_id": product_id})
    return response
