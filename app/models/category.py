"""
Modelo ORM para Categorías del catálogo.
"""
from sqlalchemy import Column, Integer, String, Text
from app.db.base import Base, CatalogMixin


class Category(Base, CatalogMixin):
    """Categoría raíz de la jerarquía Categoría → Subcategoría → Producto."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=False)
    # active, created_at y updated_at vienen del CatalogMixin

    def __repr__(self):
        return f"<Category {self.name}>"
