"""
CRUD base genérico con operaciones comunes y soporte para desactivación.
"""
import logging
from typing import Generic, TypeVar, Type, Optional, List, Any, Dict
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from pydantic import BaseModel
from app.db.base import Base
from app.core.exceptions import DuplicateException, InternalException, NotFoundException

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


def is_unique_violation(exc: IntegrityError) -> bool:
    """
    Determinar si un IntegrityError proviene de un índice único.

    Cubre PostgreSQL (SQLSTATE 23505) y SQLite ("UNIQUE constraint failed").
    """
    orig = getattr(exc, "orig", None)
    if getattr(orig, "pgcode", None) == "23505":
        return True
    text = str(orig).lower()
    return "unique" in text or "duplicate" in text


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Clase base para operaciones CRUD con soporte para desactivación.

    Los listados filtran automáticamente los registros inactivos
    (active = false) a menos que se especifique lo contrario. La lectura
    por ID devuelve el registro sin importar su estado.
    """

    #: Nombre legible de la entidad y mensajes de error
    entity_label: str = "registro"
    not_found_message: str = "Registro no encontrado"
    duplicate_message: str = "Ya existe un registro con ese nombre"

    def __init__(self, model: Type[ModelType]):
        """
        Inicializar CRUD con el modelo ORM.

        Args:
            model: Modelo ORM de SQLAlchemy
        """
        self.model = model

    def _base_query(self, db: Session, include_inactive: bool = False):
        """
        Crear query base con filtro de actividad.

        Args:
            db: Sesión de base de datos
            include_inactive: Si es True, incluye registros desactivados

        Returns:
            Query filtrado
        """
        query = db.query(self.model)
        if not include_inactive:
            query = query.filter(self.model.active == True)
        return query

    def _order(self, query):
        """Orden por defecto de los listados (orden natural por ID)."""
        return query.order_by(self.model.id)

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        """
        Obtener un registro por ID, activo o no.

        Args:
            db: Sesión de base de datos
            id: ID del registro

        Returns:
            Registro encontrado o None
        """
        return db.query(self.model).filter(self.model.id == id).first()

    def get_or_404(self, db: Session, id: Any) -> ModelType:
        """
        Obtener un registro por ID o lanzar NotFoundException.

        Raises:
            NotFoundException: Si el registro no existe
        """
        obj = self.get(db, id)
        if obj is None:
            raise NotFoundException(self.not_found_message)
        return obj

    def get_multi(
        self,
        db: Session,
        *,
        include_inactive: bool = False
    ) -> List[ModelType]:
        """
        Obtener múltiples registros.

        Args:
            db: Sesión de base de datos
            include_inactive: Si es True, no se aplica el filtro de actividad

        Returns:
            Lista de registros
        """
        return self._order(self._base_query(db, include_inactive)).all()

    def get_by_name(
        self, db: Session, *, name: str, exclude_id: Optional[Any] = None
    ) -> Optional[ModelType]:
        """
        Buscar un registro por nombre exacto, activo o no.

        Args:
            db: Sesión de base de datos
            name: Nombre ya recortado
            exclude_id: ID a ignorar (el propio registro al actualizar)
        """
        query = db.query(self.model).filter(self.model.name == name)
        if exclude_id is not None:
            query = query.filter(self.model.id != exclude_id)
        return query.first()

    def ensure_unique_name(
        self, db: Session, *, name: str, exclude_id: Optional[Any] = None
    ) -> None:
        """
        Verificar a nivel de aplicación que el nombre no esté en uso.

        Raises:
            DuplicateException: Si ya existe otro registro con ese nombre
        """
        if self.get_by_name(db, name=name, exclude_id=exclude_id):
            raise DuplicateException(self.duplicate_message)

    def _commit(self, db: Session) -> None:
        """
        Confirmar la transacción traduciendo violaciones de índice único.

        Raises:
            DuplicateException: Si el índice único rechaza la escritura
            InternalException: Ante cualquier otra violación de integridad
        """
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            if is_unique_violation(exc):
                raise DuplicateException(self.duplicate_message) from exc
            logger.error(f"Error de integridad guardando {self.entity_label}: {exc}")
            raise InternalException(f"Error al guardar {self.entity_label}") from exc

    def create(self, db: Session, *, obj_in: CreateSchemaType | Dict[str, Any]) -> ModelType:
        """
        Crear un nuevo registro.

        Args:
            db: Sesión de base de datos
            obj_in: Schema o dict con datos de entrada

        Returns:
            Registro creado
        """
        obj_in_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump()
        db_obj = self.model(**obj_in_data)
        db.add(db_obj)
        self._commit(db)
        db.refresh(db_obj)
        return db_obj

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: UpdateSchemaType | Dict[str, Any]
    ) -> ModelType:
        """
        Actualizar parcialmente un registro existente.

        Solo se aplican los campos enviados; un campo ausente o nulo
        deja el valor actual intacto.

        Args:
            db: Sesión de base de datos
            db_obj: Objeto de base de datos a actualizar
            obj_in: Schema o dict con datos de actualización

        Returns:
            Registro actualizado
        """
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)

        for field, value in update_data.items():
            if value is not None and hasattr(db_obj, field):
                setattr(db_obj, field, value)

        db.add(db_obj)
        self._commit(db)
        db.refresh(db_obj)
        return db_obj

    # ------------------------------------------------------------------
    # Operaciones masivas usadas por la cascada.
    # No confirman la transacción: el llamador hace commit o rollback.
    # ------------------------------------------------------------------

    def deactivate_where(self, db: Session, *criteria) -> int:
        """
        Desactivar todos los registros que cumplan los criterios.

        Solo toca los registros aún activos, por lo que repetir la
        operación no cambia nada.

        Returns:
            Cantidad de registros que pasaron de activos a inactivos
        """
        return (
            db.query(self.model)
            .filter(*criteria, self.model.active == True)
            .update({self.model.active: False}, synchronize_session=False)
        )

    def delete_where(self, db: Session, *criteria) -> int:
        """
        Eliminar permanentemente los registros que cumplan los criterios.

        Returns:
            Cantidad de registros eliminados
        """
        return (
            db.query(self.model)
            .filter(*criteria)
            .delete(synchronize_session=False)
        )
