"""
CRUD para categorías.
"""
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.category import Category
from app.schemas.catalog import CategoryCreate, CategoryUpdate


class CRUDCategory(CRUDBase[Category, CategoryCreate, CategoryUpdate]):
    """CRUD específico para categorías."""

    entity_label = "categoria"
    not_found_message = "Categoria no encontrada"
    duplicate_message = "Ya existe una categoria con ese nombre"

    def _order(self, query):
        """Las categorías se listan de la más reciente a la más antigua."""
        return query.order_by(Category.created_at.desc(), Category.id.desc())

    def create_category(self, db: Session, *, obj_in: CategoryCreate) -> Category:
        """
        Crear nueva categoría.

        Args:
            db: Sesión de base de datos
            obj_in: Nombre y descripción ya recortados

        Returns:
            Categoría creada

        Raises:
            DuplicateException: Si el nombre ya existe
        """
        self.ensure_unique_name(db, name=obj_in.name)
        return self.create(db, obj_in=obj_in)

    def update_category(
        self, db: Session, *, db_obj: Category, obj_in: CategoryUpdate
    ) -> Category:
        """
        Actualizar nombre y/o descripción de una categoría.

        Raises:
            DuplicateException: Si el nuevo nombre pertenece a otra categoría
        """
        if obj_in.name:
            self.ensure_unique_name(db, name=obj_in.name, exclude_id=db_obj.id)
        return self.update(db, db_obj=db_obj, obj_in=obj_in)


# Instancia global del CRUD
category = CRUDCategory(Category)
