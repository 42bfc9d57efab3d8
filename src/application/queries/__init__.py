"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (GetProductById, ListProducts).

Each query has a corresponding handler that fetches and returns the requested
data. Queries NEVER change state.
"""

from src.application.queries.product_queries import GetProductById, ListProducts

__all__ = ["GetProductById", "ListProducts"]
