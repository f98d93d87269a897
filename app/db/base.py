"""
Base declarativa de SQLAlchemy con soporte para desactivación (soft delete).
Todos los modelos heredan de esta clase base.
"""
from sqlalchemy import Column, Boolean, DateTime, true
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func


class CatalogMixin:
    """
    Mixin que agrega el flag de actividad y las marcas de tiempo.

    Los modelos que hereden de este mixin tendrán:
    - Campo active: False significa desactivado (soft delete)
    - Campos created_at y updated_at mantenidos por la base de datos
    - Método deactivate()
    """

    active = Column(Boolean, nullable=False, default=True, server_default=true(), index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def deactivate(self) -> None:
        """Marca el registro como inactivo (soft delete)."""
        self.active = False


# Base declarativa de SQLAlchemy
Base = declarative_base()
