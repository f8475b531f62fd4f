"""
Product read model.

The handler layer treats products as opaque JSON values; only the ``id`` of a
freshly created product is read, to build the ``Location`` header.
"""

from typing import Annotated

from pydantic import BaseModel, Field


class Product(BaseModel):
    """Catalog product as returned by the query and command capabilities."""

    id: Annotated[str, Field(
        min_length=1,
        description='Unique identifier for the product',
        examples=['5f0c6a4e-8d53-4f0e-9a57-0a3e1c2b7d11']
    )]

    name: Annotated[str, Field(
        description='Product name',
        examples=['Widget']
    )]

    description: Annotated[str, Field(
        description='Product description',
        examples=['A small mechanical widget']
    )]
