"""
Command payload models decoded from request bodies.

These models only guarantee that a body parses into the expected shape.
Semantic validation belongs to the command capability.
"""

from typing import Annotated

from pydantic import BaseModel, Field


class CreateProductModel(BaseModel):
    """Request body for creating a product."""

    name: Annotated[str, Field(
        description='Product name',
        examples=['Widget']
    )]

    description: Annotated[str, Field(
        description='Product description',
        examples=['A small mechanical widget']
    )]


class UpdateProductModel(BaseModel):
    """Request body for updating a product."""

    name: Annotated[str, Field(
        description='Updated product name',
        examples=['Widget Pro']
    )]

    description: Annotated[str, Field(
        description='Updated product description',
        examples=['A slightly larger mechanical widget']
    )]
