"""
Endpoints de productos.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from app.core.deps import get_db, get_catalog_editor, get_current_admin_user
from app.crud.product import product as crud_product
from app.models.user import User
from app.schemas.catalog import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductDeleteResponse,
)
from app.services import cascade_service

router = APIRouter()


@router.get("", response_model=List[ProductResponse])
def get_products(
    include_inactive: bool = Query(False, alias="includeInactive", description="Incluir productos inactivos"),
    category_id: Optional[int] = Query(None, alias="category", description="Filtrar por categoria"),
    subcategory_id: Optional[int] = Query(None, alias="subcategory", description="Filtrar por subcategoria"),
    db: Session = Depends(get_db)
):
    """
    Obtener lista de productos con sus referencias resueltas.
    Por defecto solo devuelve productos activos.
    """
    return crud_product.get_filtered(
        db,
        include_inactive=include_inactive,
        category_id=category_id,
        subcategory_id=subcategory_id,
    )


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int,
    db: Session = Depends(get_db)
):
    """Obtener un producto por ID, activo o no."""
    return crud_product.get_or_404(db, product_id)


@router.post("", response_model=ProductResponse, status_code=201)
def create_product(
    product_in: ProductCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_catalog_editor)
):
    """
    Crear un producto. Queda registrado el usuario que lo crea.
    Requiere rol admin o coordinador.
    """
    return crud_product.create_product(db, obj_in=product_in, created_by_id=current_user.id)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product_in: ProductUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_catalog_editor)
):
    """
    Actualizar parcialmente un producto.
    Requiere rol admin o coordinador.
    """
    product = crud_product.get_or_404(db, product_id)
    return crud_product.update_product(db, db_obj=product, obj_in=product_in)


@router.delete("/{product_id}", response_model=ProductDeleteResponse)
def delete_product(
    product_id: int,
    hard_delete: bool = Query(False, alias="hardDelete", description="Eliminar permanentemente"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Eliminar o desactivar un producto.
    Requiere rol admin.
    """
    result = cascade_service.delete_product(db, product_id, hard_delete=hard_delete)
    message = "Producto eliminado permanentemente" if result.hard_delete else "Producto desactivado"
    return ProductDeleteResponse(message=message, product=result.product)
