"""
Modelo ORM para Productos.
"""
from sqlalchemy import Column, Integer, String, Text, Float, JSON, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from app.db.base import Base, CatalogMixin


class Product(Base, CatalogMixin):
    """
    Producto del catálogo.

    Referencia a su subcategoría y, de forma redundante, a la categoría.
    No se exige que subcategory.category_id coincida con category_id.
    """

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    stock = Column(Integer, nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    subcategory_id = Column(Integer, ForeignKey("subcategories.id"), nullable=False, index=True)
    created_by_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"))
    images = Column(JSON, nullable=False, default=list)

    # Constraints
    __table_args__ = (
        CheckConstraint('price >= 0', name='check_price_non_negative'),
        CheckConstraint('stock >= 0', name='check_stock_non_negative'),
    )

    # Relationships
    category = relationship("Category", lazy="joined")
    subcategory = relationship("Subcategory", lazy="joined")
    created_by = relationship("User", lazy="joined")

    def __repr__(self):
        return f"<Product {self.name}>"
