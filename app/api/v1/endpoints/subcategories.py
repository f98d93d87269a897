"""
Endpoints de subcategorias.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Union

from app.core.deps import get_db, get_catalog_editor, get_current_admin_user
from app.crud.subcategory import subcategory as crud_subcategory
from app.models.user import User
from app.schemas.catalog import (
    SubcategoryCreate,
    SubcategoryUpdate,
    SubcategoryResponse,
    SubcategoryDeactivateResponse,
    SubcategoryHardDeleteResponse,
)
from app.services import cascade_service

router = APIRouter()


@router.get("", response_model=List[SubcategoryResponse])
def get_subcategories(
    include_inactive: bool = Query(False, alias="includeInactive", description="Incluir subcategorias inactivas"),
    db: Session = Depends(get_db)
):
    """
    Obtener lista de subcategorias con el nombre de su categoria.
    Por defecto solo devuelve subcategorias activas.
    """
    return crud_subcategory.get_multi(db, include_inactive=include_inactive)


@router.get("/{subcategory_id}", response_model=SubcategoryResponse)
def get_subcategory(
    subcategory_id: int,
    db: Session = Depends(get_db)
):
    """Obtener una subcategoria por ID, activa o no."""
    return crud_subcategory.get_or_404(db, subcategory_id)


@router.post("", response_model=SubcategoryResponse, status_code=201)
def create_subcategory(
    subcategory_in: SubcategoryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_catalog_editor)
):
    """
    Crear una subcategoria dentro de una categoria existente.
    Requiere rol admin o coordinador.
    """
    return crud_subcategory.create_subcategory(db, obj_in=subcategory_in)


@router.put("/{subcategory_id}", response_model=SubcategoryResponse)
def update_subcategory(
    subcategory_id: int,
    subcategory_in: SubcategoryUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_catalog_editor)
):
    """
    Actualizar una subcategoria. Si cambia la categoria padre, debe existir.
    Requiere rol admin o coordinador.
    """
    subcategory = crud_subcategory.get_or_404(db, subcategory_id)
    return crud_subcategory.update_subcategory(db, db_obj=subcategory, obj_in=subcategory_in)


@router.delete(
    "/{subcategory_id}",
    response_model=Union[SubcategoryDeactivateResponse, SubcategoryHardDeleteResponse]
)
def delete_subcategory(
    subcategory_id: int,
    hard_delete: bool = Query(False, alias="hardDelete", description="Eliminar permanentemente"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Eliminar o desactivar una subcategoria y sus productos.
    Requiere rol admin.
    """
    result = cascade_service.delete_subcategory(db, subcategory_id, hard_delete=hard_delete)

    if result.hard_delete:
        return SubcategoryHardDeleteResponse(
            message="Subcategoria eliminada permanentemente con sus productos",
            subcategory=result.subcategory,
            products_deleted=result.products_affected,
        )
    return SubcategoryDeactivateResponse(
        message="Subcategoria desactivada junto con sus productos",
        subcategory=result.subcategory,
        products_deactivated=result.products_affected,
    )
