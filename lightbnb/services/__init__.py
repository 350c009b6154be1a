"""
Service layer exposing the query operations to the HTTP layer.
"""

from .query_layer import QueryLayer

__all__ = [
    "QueryLayer",
]
