"""
Módulo de modelos ORM.
Importa todos los modelos para que SQLAlchemy los reconozca.
"""
from app.db.base import Base

# Catálogo
from app.models.category import Category
from app.models.subcategory import Subcategory
from app.models.product import Product

# Usuarios y Autenticación
from app.models.user import User

__all__ = [
    "Base",
    # Catálogo
    "Category",
    "Subcategory",
    "Product",
    # Usuarios
    "User",
]
