"""
Command side handlers for the catalog API.

Every handler runs the same short-circuiting steps: path parameter check,
body decode, one ``Commands`` call, response mapping. Client input errors are
answered with an empty 400 before the capability is called; capability
errors propagate to the Lambda entry point.
"""

from typing import Mapping, Optional, Union

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.metrics import MetricUnit

from catalog.dal import Commands, DeleteOutcome
from catalog.handlers.utils.errors import PayloadDecodeError, log_error_metrics
from catalog.handlers.utils.observability import logger, metrics, tracer
from catalog.handlers.utils.request_decoder import decode_payload
from catalog.handlers.utils.responses import build_location, empty_response, json_response
from catalog.models.input import CreateProductModel, UpdateProductModel

Body = Optional[Union[str, bytes]]


@tracer.capture_method
def create_product(commands: Commands, body: Body, request_uri: str) -> Response:
    """
    Create a product from the request body.

    Args:
        commands: Command capability
        body: Raw request body
        request_uri: URI the request was sent to, used for the Location header

    Returns:
        201 with the JSON product and a Location header, or 400 on an
        undecodable body
    """
    logger.info("Create product request received")

    try:
        payload = decode_payload(CreateProductModel, body)
    except PayloadDecodeError as e:
        log_error_metrics(e)
        return empty_response(400)

    product = commands.create_product(payload)
    location = build_location(request_uri, product.id)

    metrics.add_metric(name="ProductCreated", unit=MetricUnit.Count, value=1)
    tracer.put_annotation("product_id", product.id)
    logger.info("Product created successfully", extra={"product_id": product.id, "location": location})

    return json_response(201, product, headers={"Location": location})


@tracer.capture_method
def update_product_by_id(commands: Commands, params: Mapping[str, str], body: Body) -> Response:
    """
    Update a product from the request body.

    Args:
        commands: Command capability
        params: Path parameters of the matched route
        body: Raw request body

    Returns:
        200 with the JSON product, or 400 when ``id`` is missing or the body
        is undecodable
    """
    product_id = params.get('id')
    if not product_id:
        logger.warning("Update product request without id")
        return empty_response(400)

    logger.info("Update product request received", extra={"product_id": product_id})

    try:
        payload = decode_payload(UpdateProductModel, body)
    except PayloadDecodeError as e:
        log_error_metrics(e)
        return empty_response(400)

    tracer.put_annotation("product_id", product_id)
    product = commands.update_product(product_id, payload)

    metrics.add_metric(name="ProductUpdated", unit=MetricUnit.Count, value=1)
    logger.info("Product updated successfully", extra={"product_id": product_id})

    return json_response(200, product)


@tracer.capture_method
def delete_product_by_id(commands: Commands, params: Mapping[str, str]) -> Response:
    """
    Delete a product.

    Args:
        commands: Command capability
        params: Path parameters of the matched route

    Returns:
        204 when deleted, 404 when the product did not exist, 400 when ``id``
        is missing
    """
    product_id = params.get('id')
    if not product_id:
        logger.warning("Delete product request without id")
        return empty_response(400)

    logger.info("Delete product request received", extra={"product_id": product_id})
    tracer.put_annotation("product_id", product_id)

    outcome = commands.delete_product_by_id(product_id)

    if outcome is DeleteOutcome.DELETED:
        metrics.add_metric(name="ProductDeleted", unit=MetricUnit.Count, value=1)
        logger.info("Product deleted successfully", extra={"product_id": product_id})
        return empty_response(204)

    if outcome is DeleteOutcome.NOT_FOUND:
        logger.info("Product to delete was not found", extra={"product_id": product_id})
        return empty_response(404)

    raise TypeError(f"Unexpected delete outcome: {outcome!r}")
