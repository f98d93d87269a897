"""
Endpoints de la API v1.
"""
from app.api.v1.endpoints import (
    auth,
    categories,
    subcategories,
    products,
)

__all__ = [
    "auth",
    "categories",
    "subcategories",
    "products",
]
