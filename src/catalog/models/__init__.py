"""
Catalog Models Package

Pydantic models for the product read model and the command payloads.
"""

from .input import CreateProductModel, UpdateProductModel
from .product import Product

__all__ = [
    "CreateProductModel",
    "UpdateProductModel",
    "Product",
]
