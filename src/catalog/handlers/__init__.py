"""
Catalog Lambda Handlers Module.

The handler layer owns request/response handling for the catalog API:

1. items_handler: Lambda entry point and route table
2. queries_handler: read routes backed by the Queries capability
3. commands_handler: write routes backed by the Commands capability

The handlers use AWS Lambda Powertools for structured logging with
correlation IDs, X-Ray tracing, and custom metrics.
"""

from catalog.handlers.utils.observability import logger, tracer, metrics
from catalog.handlers.utils.rest_api_resolver import app, ITEMS_PATH, ITEM_PATH

__all__ = [
    "logger",
    "tracer",
    "metrics",
    "app",
    "ITEMS_PATH",
    "ITEM_PATH",
]
