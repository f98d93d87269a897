"""
CRUD para productos.
"""
import logging
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.crud.category import category as crud_category
from app.crud.subcategory import subcategory as crud_subcategory
from app.core.exceptions import NotFoundException
from app.models.product import Product
from app.schemas.catalog import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


class CRUDProduct(CRUDBase[Product, ProductCreate, ProductUpdate]):
    """CRUD específico para productos."""

    entity_label = "producto"
    not_found_message = "Producto no encontrado"
    duplicate_message = "Ya existe un producto con ese nombre"

    def get_filtered(
        self,
        db: Session,
        *,
        include_inactive: bool = False,
        category_id: Optional[int] = None,
        subcategory_id: Optional[int] = None
    ) -> List[Product]:
        """
        Listar productos, opcionalmente filtrados por categoría o subcategoría.
        """
        query = self._base_query(db, include_inactive)
        if category_id is not None:
            query = query.filter(Product.category_id == category_id)
        if subcategory_id is not None:
            query = query.filter(Product.subcategory_id == subcategory_id)
        return self._order(query).all()

    def _check_references(
        self, db: Session, *, category_id: int, subcategory_id: int
    ) -> None:
        """
        Verificar que categoría y subcategoría existan.

        Una subcategoría que pertenece a otra categoría solo se registra
        en el log; no se rechaza.
        """
        if crud_category.get(db, category_id) is None:
            raise NotFoundException(f"La categoria {category_id} no existe")
        parent = crud_subcategory.get(db, subcategory_id)
        if parent is None:
            raise NotFoundException(f"La subcategoria {subcategory_id} no existe")
        if parent.category_id != category_id:
            logger.warning(
                f"Producto con categoria {category_id} y subcategoria {subcategory_id} "
                f"de la categoria {parent.category_id}"
            )

    def create_product(
        self, db: Session, *, obj_in: ProductCreate, created_by_id: Optional[int] = None
    ) -> Product:
        """
        Crear nuevo producto.

        Args:
            db: Sesión de base de datos
            obj_in: Datos del producto
            created_by_id: Usuario que crea el producto

        Raises:
            NotFoundException: Si la categoría o subcategoría no existe
            DuplicateException: Si el nombre ya existe
        """
        self._check_references(
            db, category_id=obj_in.category, subcategory_id=obj_in.subcategory
        )
        self.ensure_unique_name(db, name=obj_in.name)
        return self.create(db, obj_in={
            "name": obj_in.name,
            "description": obj_in.description,
            "price": obj_in.price,
            "stock": obj_in.stock,
            "category_id": obj_in.category,
            "subcategory_id": obj_in.subcategory,
            "images": list(obj_in.images),
            "created_by_id": created_by_id,
        })

    def update_product(
        self, db: Session, *, db_obj: Product, obj_in: ProductUpdate
    ) -> Product:
        """
        Actualizar parcialmente un producto.

        Raises:
            NotFoundException: Si una referencia enviada no existe
            DuplicateException: Si el nuevo nombre pertenece a otro producto
        """
        update_data: Dict[str, Any] = obj_in.model_dump(exclude_unset=True)
        category_id = update_data.pop("category", None)
        subcategory_id = update_data.pop("subcategory", None)
        if category_id is not None or subcategory_id is not None:
            category_id = category_id if category_id is not None else db_obj.category_id
            subcategory_id = subcategory_id if subcategory_id is not None else db_obj.subcategory_id
            self._check_references(db, category_id=category_id, subcategory_id=subcategory_id)
            update_data["category_id"] = category_id
            update_data["subcategory_id"] = subcategory_id
        if update_data.get("name"):
            self.ensure_unique_name(db, name=update_data["name"], exclude_id=db_obj.id)
        return self.update(db, db_obj=db_obj, obj_in=update_data)


# Instancia global del CRUD
product = CRUDProduct(Product)
