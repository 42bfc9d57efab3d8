"""Database models for persistence layer.

Models Organization:
    - category.py: Product category
    - product.py: Catalog product

All models derive from BaseEntity and are handled through the generic
repository (src/infrastructure/persistence/repository.py).
"""

from src.infrastructure.persistence.models.category import Category
from src.infrastructure.persistence.models.product import Product

__all__ = [
    "Category",
    "Product",
]
