"""
Capability interfaces for the query and command sides of the catalog.

The handler layer depends only on the ``Queries`` and ``Commands`` protocols
defined here. The DynamoDB-backed implementations are created on first use by
``get_queries`` and ``get_commands``.
"""

from enum import Enum
from functools import lru_cache
from typing import Protocol, Sequence, runtime_checkable

from catalog.models.input import CreateProductModel, UpdateProductModel
from catalog.models.product import Product


class DeleteOutcome(str, Enum):
    """Result of a delete that did not fail."""

    DELETED = 'deleted'
    NOT_FOUND = 'not_found'


@runtime_checkable
class Queries(Protocol):
    """Read side of the catalog."""

    def all_products(self) -> Sequence[Product]:
        """Return every product in the read model."""
        ...

    def product_by_id(self, product_id: str) -> Product:
        """Return a single product, raising if it cannot be loaded."""
        ...


@runtime_checkable
class Commands(Protocol):
    """Write side of the catalog."""

    def create_product(self, payload: CreateProductModel) -> Product:
        """Create a product and return it with its new id."""
        ...

    def update_product(self, product_id: str, payload: UpdateProductModel) -> Product:
        """Replace the attributes of an existing product."""
        ...

    def delete_product_by_id(self, product_id: str) -> DeleteOutcome:
        """Delete a product, reporting whether it existed."""
        ...


@lru_cache(maxsize=1)
def get_queries() -> Queries:
    """
    Factory function for the query capability.

    Returns:
        DynamoDB-backed Queries implementation
    """
    # Import here to avoid circular imports
    from catalog.dal.dynamodb_handler import DynamoDbQueries

    return DynamoDbQueries.from_environment()


@lru_cache(maxsize=1)
def get_commands() -> Commands:
    """
    Factory function for the command capability.

    Returns:
        DynamoDB-backed Commands implementation
    """
    from catalog.dal.dynamodb_handler import DynamoDbCommands

    return DynamoDbCommands.from_environment()


__all__ = [
    'DeleteOutcome',
    'Queries',
    'Commands',
    'get_queries',
    'get_commands',
]
