"""
Schemas para el catálogo (Categorías, Subcategorías, Productos).
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime


# Los textos llegan recortados antes de validar min_length
_TEXT_CONFIG = {"str_strip_whitespace": True}


# ================================================================
# REFERENCIAS (nombre del padre resuelto al leer)
# ================================================================

class CategoryRef(BaseModel):
    """Referencia resumida a una categoria."""

    id: int
    name: str

    model_config = {"from_attributes": True}


class SubcategoryRef(BaseModel):
    """Referencia resumida a una subcategoria."""

    id: int
    name: str

    model_config = {"from_attributes": True}


class UserRef(BaseModel):
    """Referencia resumida al usuario creador."""

    id: int
    username: str

    model_config = {"from_attributes": True}


# ================================================================
# CATEGORIAS
# ================================================================

class CategoryCreate(BaseModel):
    """Schema para crear categoria."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)

    model_config = _TEXT_CONFIG


class CategoryUpdate(BaseModel):
    """Schema para actualizar categoria. Solo se aplican los campos enviados."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1)

    model_config = _TEXT_CONFIG


class CategoryResponse(BaseModel):
    """Schema de respuesta de categoria."""

    id: int
    name: str
    description: str
    active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


# ================================================================
# SUBCATEGORIAS
# ================================================================

class SubcategoryCreate(BaseModel):
    """Schema para crear subcategoria."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    category: int = Field(..., description="ID de la categoria padre")

    model_config = _TEXT_CONFIG


class SubcategoryUpdate(BaseModel):
    """Schema para actualizar subcategoria."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1)
    category: Optional[int] = None

    model_config = _TEXT_CONFIG


class SubcategoryResponse(BaseModel):
    """Schema de respuesta de subcategoria con el nombre de su categoria."""

    id: int
    name: str
    description: str
    active: bool
    category_id: int
    category: Optional[CategoryRef] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


# ================================================================
# PRODUCTOS
# ================================================================

class ProductCreate(BaseModel):
    """Schema para crear producto."""

    name: str = Field(..., min_length=1, max_length=150)
    description: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    stock: int = Field(..., ge=0)
    category: int
    subcategory: int
    images: List[str] = Field(default_factory=list)

    model_config = _TEXT_CONFIG

    @field_validator('images')
    @classmethod
    def drop_empty_images(cls, v: List[str]) -> List[str]:
        """Descartar URLs vacías conservando el orden."""
        return [url for url in v if url]


class ProductUpdate(BaseModel):
    """Schema para actualizar producto."""

    name: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    category: Optional[int] = None
    subcategory: Optional[int] = None
    images: Optional[List[str]] = None

    model_config = _TEXT_CONFIG

    @field_validator('images')
    @classmethod
    def drop_empty_images(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        """Descartar URLs vacías conservando el orden."""
        if v is None:
            return v
        return [url for url in v if url]


class ProductResponse(BaseModel):
    """Schema de respuesta de producto con sus referencias resueltas."""

    id: int
    name: str
    description: str
    price: float
    stock: int
    images: List[str] = []
    active: bool
    category_id: int
    subcategory_id: int
    category: Optional[CategoryRef] = None
    subcategory: Optional[SubcategoryRef] = None
    created_by: Optional[UserRef] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


# ================================================================
# RESUMENES DE ELIMINACION
# ================================================================

class _DeleteSummary(BaseModel):
    """Base de las respuestas de eliminacion/desactivacion."""

    success: bool = True
    message: str

    model_config = {"populate_by_name": True}


class CategoryDeactivateResponse(_DeleteSummary):
    """Resultado de desactivar una categoria en cascada."""

    category: CategoryResponse
    subcategories_deactivated: int = Field(..., alias="subcategoriesDeactivated")
    products_deactivated: int = Field(..., alias="productsDeactivated")


class CategoryHardDeleteResponse(_DeleteSummary):
    """Resultado de eliminar permanentemente una categoria en cascada."""

    category: CategoryResponse
    subcategories_deleted: int = Field(..., alias="subcategoriesDeleted")
    products_deleted: int = Field(..., alias="productsDeleted")


class SubcategoryDeactivateResponse(_DeleteSummary):
    """Resultado de desactivar una subcategoria en cascada."""

    subcategory: SubcategoryResponse
    products_deactivated: int = Field(..., alias="productsDeactivated")


class SubcategoryHardDeleteResponse(_DeleteSummary):
    """Resultado de eliminar permanentemente una subcategoria en cascada."""

    subcategory: SubcategoryResponse
    products_deleted: int = Field(..., alias="productsDeleted")


class ProductDeleteResponse(_DeleteSummary):
    """Resultado de desactivar o eliminar un producto."""

    product: ProductResponse
