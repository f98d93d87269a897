"""
Endpoints de categorias.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Union

from app.core.deps import get_db, get_catalog_editor, get_current_admin_user
from app.crud.category import category as crud_category
from app.models.user import User
from app.schemas.catalog import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    CategoryDeactivateResponse,
    CategoryHardDeleteResponse,
)
from app.services import cascade_service

router = APIRouter()


# ================================================================
# ENDPOINTS PUBLICOS
# ================================================================

@router.get("", response_model=List[CategoryResponse])
def get_categories(
    include_inactive: bool = Query(False, alias="includeInactive", description="Incluir categorias inactivas"),
    db: Session = Depends(get_db)
):
    """
    Obtener lista de categorias, de la mas reciente a la mas antigua.
    Por defecto solo devuelve categorias activas.
    """
    return crud_category.get_multi(db, include_inactive=include_inactive)


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: int,
    db: Session = Depends(get_db)
):
    """
    Obtener una categoria por ID, activa o no.
    """
    return crud_category.get_or_404(db, category_id)


# ================================================================
# ENDPOINTS ADMIN / COORDINADOR
# ================================================================

@router.post("", response_model=CategoryResponse, status_code=201)
def create_category(
    category_in: CategoryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_catalog_editor)
):
    """
    Crear una nueva categoria.
    Requiere rol admin o coordinador.
    """
    return crud_category.create_category(db, obj_in=category_in)


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    category_in: CategoryUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_catalog_editor)
):
    """
    Actualizar nombre y/o descripcion de una categoria.
    Requiere rol admin o coordinador.
    """
    category = crud_category.get_or_404(db, category_id)
    return crud_category.update_category(db, db_obj=category, obj_in=category_in)


@router.delete(
    "/{category_id}",
    response_model=Union[CategoryDeactivateResponse, CategoryHardDeleteResponse]
)
def delete_category(
    category_id: int,
    hard_delete: bool = Query(False, alias="hardDelete", description="Eliminar permanentemente"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Eliminar o desactivar una categoria.
    Requiere rol admin.

    - Soft delete (por defecto): desactiva la categoria, sus subcategorias
      y sus productos.
    - hardDelete=true: elimina permanentemente productos, subcategorias y
      la categoria. No se puede recuperar.
    """
    result = cascade_service.delete_category(db, category_id, hard_delete=hard_delete)

    if result.hard_delete:
        return CategoryHardDeleteResponse(
            message="Categoria eliminada permanentemente con sus subcategorias y productos",
            category=result.category,
            subcategories_deleted=result.subcategories_affected,
            products_deleted=result.products_affected,
        )
    return CategoryDeactivateResponse(
        message="Categoria desactivada junto con sus subcategorias y productos",
        category=result.category,
        subcategories_deactivated=result.subcategories_affected,
        products_deactivated=result.products_affected,
    )
