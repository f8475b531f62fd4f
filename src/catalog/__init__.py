"""
Product Catalog Service Module.

HTTP boundary of a CQRS product catalog running on AWS Lambda:

- handlers: API entry point, routing, and query/command handlers
- dal: Queries/Commands capability interfaces and their DynamoDB implementation
- models: Product read model and command payloads
"""

__version__ = "1.0.0"
__description__ = "Product catalog CQRS API on AWS Lambda"

from catalog.models.input import CreateProductModel, UpdateProductModel
from catalog.models.product import Product
from catalog.dal import Commands, DeleteOutcome, Queries

__all__ = [
    "CreateProductModel",
    "UpdateProductModel",
    "Product",
    "Commands",
    "DeleteOutcome",
    "Queries",
]
