"""
Servicio de eliminación en cascada del catálogo.

Propaga la desactivación (soft delete) o la eliminación permanente
(hard delete) por la jerarquía Categoría → Subcategoría → Producto.

Cada cascada se ejecuta en una única transacción: los pasos se aplican
con operaciones masivas sin confirmar y se hace un solo commit al final.
Si un paso falla se hace rollback de todo y se lanza InternalException.
Los pasos de desactivación solo tocan registros aún activos, por lo que
repetir una cascada converge al mismo estado final.

No hay bloqueo por entidad: modificar el mismo subárbol en paralelo
durante una cascada queda sujeto al aislamiento de la base de datos.
"""
import logging
from dataclasses import dataclass
from typing import Callable, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import InternalException
from app.crud.category import category as crud_category
from app.crud.subcategory import subcategory as crud_subcategory
from app.crud.product import product as crud_product
from app.models.product import Product
from app.models.subcategory import Subcategory
from app.models.category import Category
from app.schemas.catalog import CategoryResponse, SubcategoryResponse, ProductResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class CategoryCascadeResult:
    """Resultado de una cascada sobre una categoría."""

    category: CategoryResponse
    hard_delete: bool
    subcategories_affected: int
    products_affected: int


@dataclass
class SubcategoryCascadeResult:
    """Resultado de una cascada sobre una subcategoría."""

    subcategory: SubcategoryResponse
    hard_delete: bool
    products_affected: int


@dataclass
class ProductDeleteResult:
    """Resultado de desactivar o eliminar un producto."""

    product: ProductResponse
    hard_delete: bool


def _run_in_transaction(db: Session, description: str, steps: Callable[[], T]) -> T:
    """
    Ejecutar los pasos de una cascada y confirmar una sola vez.

    Raises:
        InternalException: Si cualquier paso o el commit fallan
    """
    try:
        result = steps()
        db.commit()
        return result
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(f"Fallo en cascada ({description}), cambios revertidos")
        raise InternalException(f"Error al ejecutar {description}") from exc


def delete_category(db: Session, category_id: int, hard_delete: bool = False) -> CategoryCascadeResult:
    """
    Desactivar o eliminar una categoría con todos sus descendientes.

    Soft delete: la categoría, sus subcategorías y los productos que
    referencian la categoría quedan con active = False.

    Hard delete: se eliminan primero los productos (por categoría y por
    subcategoría), luego las subcategorías y por último la categoría.

    Args:
        db: Sesión de base de datos
        category_id: ID de la categoría raíz
        hard_delete: True para eliminar permanentemente

    Returns:
        Categoría afectada y cantidad de descendientes afectados

    Raises:
        NotFoundException: Si la categoría no existe (sin tocar nada)
        InternalException: Si falla algún paso (sin cambios persistidos)
    """
    target = crud_category.get_or_404(db, category_id)

    if hard_delete:
        snapshot = CategoryResponse.model_validate(target)

        def steps():
            subcategory_ids = [
                row.id for row in
                db.query(Subcategory.id).filter(Subcategory.category_id == category_id).all()
            ]
            products = crud_product.delete_where(db, Product.category_id == category_id)
            if subcategory_ids:
                products += crud_product.delete_where(
                    db, Product.subcategory_id.in_(subcategory_ids)
                )
            subcategories = crud_subcategory.delete_where(
                db, Subcategory.category_id == category_id
            )
            crud_category.delete_where(db, Category.id == category_id)
            return subcategories, products

        subcategories, products = _run_in_transaction(
            db, "eliminacion de categoria", steps
        )
        logger.info(
            f"Categoria {category_id} eliminada: {subcategories} subcategorias, "
            f"{products} productos"
        )
        return CategoryCascadeResult(
            category=snapshot,
            hard_delete=True,
            subcategories_affected=subcategories,
            products_affected=products,
        )

    def steps():
        target.deactivate()
        db.add(target)
        subcategories = crud_subcategory.deactivate_where(
            db, Subcategory.category_id == category_id
        )
        products = crud_product.deactivate_where(db, Product.category_id == category_id)
        return subcategories, products

    subcategories, products = _run_in_transaction(
        db, "desactivacion de categoria", steps
    )
    db.refresh(target)
    logger.info(
        f"Categoria {category_id} desactivada: {subcategories} subcategorias, "
        f"{products} productos"
    )
    return CategoryCascadeResult(
        category=CategoryResponse.model_validate(target),
        hard_delete=False,
        subcategories_affected=subcategories,
        products_affected=products,
    )


def delete_subcategory(db: Session, subcategory_id: int, hard_delete: bool = False) -> SubcategoryCascadeResult:
    """
    Desactivar o eliminar una subcategoría junto con sus productos.

    Args:
        db: Sesión de base de datos
        subcategory_id: ID de la subcategoría raíz
        hard_delete: True para eliminar permanentemente

    Raises:
        NotFoundException: Si la subcategoría no existe (sin tocar nada)
        InternalException: Si falla algún paso (sin cambios persistidos)
    """
    target = crud_subcategory.get_or_404(db, subcategory_id)

    if hard_delete:
        snapshot = SubcategoryResponse.model_validate(target)

        def steps():
            products = crud_product.delete_where(db, Product.subcategory_id == subcategory_id)
            crud_subcategory.delete_where(db, Subcategory.id == subcategory_id)
            return products

        products = _run_in_transaction(db, "eliminacion de subcategoria", steps)
        logger.info(f"Subcategoria {subcategory_id} eliminada: {products} productos")
        return SubcategoryCascadeResult(
            subcategory=snapshot, hard_delete=True, products_affected=products
        )

    def steps():
        target.deactivate()
        db.add(target)
        return crud_product.deactivate_where(db, Product.subcategory_id == subcategory_id)

    products = _run_in_transaction(db, "desactivacion de subcategoria", steps)
    db.refresh(target)
    logger.info(f"Subcategoria {subcategory_id} desactivada: {products} productos")
    return SubcategoryCascadeResult(
        subcategory=SubcategoryResponse.model_validate(target),
        hard_delete=False,
        products_affected=products,
    )


def delete_product(db: Session, product_id: int, hard_delete: bool = False) -> ProductDeleteResult:
    """
    Desactivar o eliminar un producto. Es una hoja: no hay cascada.

    Raises:
        NotFoundException: Si el producto no existe
        InternalException: Si la operación falla
    """
    target = crud_product.get_or_404(db, product_id)

    if hard_delete:
        snapshot = ProductResponse.model_validate(target)
        _run_in_transaction(
            db,
            "eliminacion de producto",
            lambda: crud_product.delete_where(db, Product.id == product_id),
        )
        logger.info(f"Producto {product_id} eliminado")
        return ProductDeleteResult(product=snapshot, hard_delete=True)

    def steps():
        target.deactivate()
        db.add(target)

    _run_in_transaction(db, "desactivacion de producto", steps)
    db.refresh(target)
    logger.info(f"Producto {product_id} desactivado")
    return ProductDeleteResult(
        product=ProductResponse.model_validate(target), hard_delete=False
    )
