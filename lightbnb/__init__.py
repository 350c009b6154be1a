"""
LightBnB data-access layer.
Parameterized queries over users, properties, reservations and reviews.
"""

from lightbnb.services.query_layer import QueryLayer

__version__ = "1.0.0"

__all__ = [
    "QueryLayer",
    "__version__",
]
