"""
Modelo ORM para Subcategorías.
Cada subcategoría pertenece a exactamente una categoría.
"""
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from app.db.base import Base, CatalogMixin


class Subcategory(Base, CatalogMixin):
    """Subcategoría dependiente de una categoría padre."""

    __tablename__ = "subcategories"

    id = Column(Integer, primary_key=True, index=True)
    # El nombre es único en toda la tabla, no por categoría
    name = Column(String(100), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)

    # Relationships (solo lectura del nombre del padre)
    category = relationship("Category", lazy="joined")

    def __repr__(self):
        return f"<Subcategory {self.name}>"
