"""
CRUD para subcategorías.
"""
from typing import Any, Dict
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.crud.category import category as crud_category
from app.core.exceptions import NotFoundException
from app.models.subcategory import Subcategory
from app.schemas.catalog import SubcategoryCreate, SubcategoryUpdate


class CRUDSubcategory(CRUDBase[Subcategory, SubcategoryCreate, SubcategoryUpdate]):
    """CRUD específico para subcategorías."""

    entity_label = "subcategoria"
    not_found_message = "Subcategoria no encontrada"
    duplicate_message = "Ya existe una subcategoria con ese nombre"

    def _ensure_parent(self, db: Session, category_id: int) -> None:
        if crud_category.get(db, category_id) is None:
            raise NotFoundException(f"La categoria {category_id} no existe")

    def create_subcategory(
        self, db: Session, *, obj_in: SubcategoryCreate
    ) -> Subcategory:
        """
        Crear nueva subcategoría bajo una categoría existente.

        Raises:
            NotFoundException: Si la categoría padre no existe
            DuplicateException: Si el nombre ya existe
        """
        self._ensure_parent(db, obj_in.category)
        self.ensure_unique_name(db, name=obj_in.name)
        return self.create(db, obj_in={
            "name": obj_in.name,
            "description": obj_in.description,
            "category_id": obj_in.category,
        })

    def update_subcategory(
        self, db: Session, *, db_obj: Subcategory, obj_in: SubcategoryUpdate
    ) -> Subcategory:
        """
        Actualizar parcialmente una subcategoría.

        Si se cambia la categoría padre se verifica que exista.

        Raises:
            NotFoundException: Si la nueva categoría padre no existe
            DuplicateException: Si el nuevo nombre pertenece a otra subcategoría
        """
        update_data: Dict[str, Any] = obj_in.model_dump(exclude_unset=True)
        category_id = update_data.pop("category", None)
        if category_id is not None:
            self._ensure_parent(db, category_id)
            update_data["category_id"] = category_id
        if update_data.get("name"):
            self.ensure_unique_name(db, name=update_data["name"], exclude_id=db_obj.id)
        return self.update(db, db_obj=db_obj, obj_in=update_data)


# Instancia global del CRUD
subcategory = CRUDSubcategory(Subcategory)
