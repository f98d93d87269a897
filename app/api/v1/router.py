"""
Router principal de la API v1.
Incluye todos los endpoints de la aplicación.
"""
from fastapi import APIRouter

from app.api.v1.endpoints import (
    auth,
    categories,
    subcategories,
    products,
)

api_router = APIRouter()

# ============================================================================
# AUTENTICACIÓN
# ============================================================================
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Autenticación"]
)

# ============================================================================
# CATÁLOGO
# ============================================================================
api_router.include_router(
    categories.router,
    prefix="/categories",
    tags=["Catálogo"]
)

api_router.include_router(
    subcategories.router,
    prefix="/subcategories",
    tags=["Catálogo"]
)

api_router.include_router(
    products.router,
    prefix="/products",
    tags=["Catálogo"]
)
