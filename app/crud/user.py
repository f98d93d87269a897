"""
CRUD para usuarios.
"""
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import or_

from app.crud.base import CRUDBase
from app.core.exceptions import DuplicateException
from app.models.user import User
from app.schemas.user import UserCreate
from app.core.security import get_password_hash


class CRUDUser(CRUDBase[User, UserCreate, UserCreate]):
    """CRUD específico para usuarios."""

    entity_label = "usuario"
    not_found_message = "Usuario no encontrado"
    duplicate_message = "El username o el email ya están registrados"

    def get_by_email(self, db: Session, *, email: str) -> Optional[User]:
        """Obtener usuario por email (comparación en minúsculas)."""
        return db.query(User).filter(User.email == email.lower()).first()

    def get_by_username(self, db: Session, *, username: str) -> Optional[User]:
        """Obtener usuario por username."""
        return db.query(User).filter(User.username == username).first()

    def get_by_login(
        self,
        db: Session,
        *,
        email: Optional[str] = None,
        username: Optional[str] = None
    ) -> Optional[User]:
        """
        Buscar usuario por email o por username.

        Args:
            db: Sesión de base de datos
            email: Email enviado en el login (opcional)
            username: Username enviado en el login (opcional)

        Returns:
            Usuario encontrado o None
        """
        conditions = []
        if email:
            conditions.append(User.email == email.lower())
        if username:
            conditions.append(User.username == username)
        if not conditions:
            return None
        return db.query(User).filter(or_(*conditions)).first()

    def create(self, db: Session, *, obj_in: UserCreate) -> User:
        """
        Crear usuario con hash de contraseña.

        Raises:
            DuplicateException: Si el username o el email ya existen
        """
        if self.get_by_username(db, username=obj_in.username):
            raise DuplicateException("El username ya está registrado")
        if self.get_by_email(db, email=obj_in.email):
            raise DuplicateException("El email ya está registrado")

        db_obj = User(
            username=obj_in.username,
            email=obj_in.email.lower(),
            password_hash=get_password_hash(obj_in.password),
            role=obj_in.role,
        )
        db.add(db_obj)
        self._commit(db)
        db.refresh(db_obj)
        return db_obj


# Instancia global del CRUD
user = CRUDUser(User)
