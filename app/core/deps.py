"""
Dependencias comunes de FastAPI.
"""
from typing import Generator, Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from jose import JWTError
from pydantic import ValidationError

from app.db.session import SessionLocal
from app.core.security import decode_token
from app.core.exceptions import UnauthorizedException, ForbiddenException
from app.models.user import User
from app.schemas.auth import TokenPayload

security = HTTPBearer(auto_error=False)


def get_db() -> Generator:
    """
    Dependencia que proporciona una sesión de base de datos.

    Yields:
        Session: Sesión de SQLAlchemy
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> int:
    """
    Obtener el ID del usuario actual desde el JWT.

    Args:
        credentials: Credenciales HTTP Bearer

    Returns:
        ID del usuario

    Raises:
        UnauthorizedException: Si falta el token o es inválido
    """
    if credentials is None:
        raise UnauthorizedException("Token de acceso requerido")

    try:
        token = TokenPayload.model_validate(decode_token(credentials.credentials))
    except (JWTError, ValidationError):
        raise UnauthorizedException("No se pudieron validar las credenciales")

    return token.id


def get_current_user(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id)
) -> User:
    """
    Obtener el usuario actual activo desde la base de datos.

    Raises:
        UnauthorizedException: Si el usuario no existe o está desactivado
    """
    user = db.query(User).filter(User.id == user_id).first()

    if user is None or not user.active:
        raise UnauthorizedException("Usuario no encontrado o inactivo")

    return user


def require_roles(*roles: str):
    """
    Construir una dependencia que exige alguno de los roles indicados.

    Args:
        roles: Roles permitidos

    Returns:
        Dependencia de FastAPI que devuelve el usuario autorizado
    """

    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if not current_user.has_role(*roles):
            raise ForbiddenException("No tiene permisos para realizar esta accion")
        return current_user

    return role_checker


# Crear y actualizar: admin y coordinador. Eliminar: solo admin.
get_catalog_editor = require_roles("admin", "coordinador")
get_current_admin_user = require_roles("admin")
