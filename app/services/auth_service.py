"""
Servicio de autenticación.
Maneja registro, inicio de sesión y generación de tokens JWT.
"""
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import settings
from app.core.exceptions import (
    ValidationException,
    InternalException,
    NotFoundException,
    UnauthorizedException,
)
from app.core.security import create_user_token, verify_password
from app.crud.user import user as crud_user
from app.schemas.auth import AuthResponse, SigninRequest, SignupRequest
from app.schemas.user import UserResponse

logger = logging.getLogger(__name__)


def _auth_response(user, message: str) -> AuthResponse:
    """Armar la respuesta con token y usuario (sin contraseña)."""
    return AuthResponse(
        message=message,
        token=create_user_token(user),
        expires_in=settings.JWT_EXPIRATION,
        user=UserResponse.model_validate(user),
    )


def signup(db: Session, user_in: SignupRequest) -> AuthResponse:
    """
    Registrar nuevo usuario y devolver su token.

    La contraseña se guarda como hash bcrypt; el rol por defecto es auxiliar.

    Args:
        db: Sesión de base de datos
        user_in: Datos de registro

    Returns:
        Token y usuario creado

    Raises:
        DuplicateException: Si el username o el email ya existen
        InternalException: Si falla el guardado
    """
    try:
        user = crud_user.create(db, obj_in=user_in)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(f"Error al registrar usuario {user_in.username}")
        raise InternalException("Error al registrar usuario") from exc

    logger.info(f"Usuario registrado: {user.username} ({user.role})")
    return _auth_response(user, "Usuario registrado correctamente")


def signin(db: Session, login_data: SigninRequest) -> AuthResponse:
    """
    Autenticar usuario por email o username.

    Args:
        db: Sesión de base de datos
        login_data: Identificador y contraseña

    Returns:
        Token y usuario autenticado

    Raises:
        ValidationException: Si falta el identificador o la contraseña
        NotFoundException: Si el usuario no existe
        UnauthorizedException: Si la contraseña es incorrecta o el usuario está inactivo
    """
    if not login_data.email and not login_data.username:
        raise ValidationException("email o username requerido")
    if not login_data.password:
        raise ValidationException("password requerido")

    user = crud_user.get_by_login(
        db, email=login_data.email, username=login_data.username
    )
    if not user:
        raise NotFoundException("Usuario no encontrado")

    if not user.password_hash:
        logger.error(f"Usuario {user.id} sin contraseña almacenada")
        raise InternalException("Error interno: usuario sin contraseña")

    if not verify_password(login_data.password, user.password_hash):
        raise UnauthorizedException("Contraseña incorrecta")

    if not user.active:
        raise UnauthorizedException("Usuario inactivo")

    return _auth_response(user, "Inicio de sesion exitoso")
