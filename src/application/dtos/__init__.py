"""Data Transfer Objects (DTOs) for application layer.

DTOs are response/result dataclasses returned by query handlers. They
transfer data from the application layer to the presentation layer without
exposing mapped entities.

Usage:
    from src.application.dtos import ProductDto
"""

from src.application.dtos.product_dtos import ProductDto

__all__ = ["ProductDto"]
