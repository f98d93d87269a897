"""
Hashing de contraseñas (bcrypt) y tokens de sesión JWT.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt
from passlib.context import CryptContext
from app.config import settings

# El costo de bcrypt sale de SALT_ROUNDS
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.SALT_ROUNDS,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Comparar una contraseña en texto plano con el hash almacenado."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Firmar un JWT con SECRET_KEY.

    Args:
        data: Claims del token ({id, role, email})
        expires_delta: Vigencia; por defecto JWT_EXPIRATION segundos

    Returns:
        Token codificado
    """
    if expires_delta is None:
        expires_delta = timedelta(seconds=settings.JWT_EXPIRATION)

    claims = dict(data)
    claims["exp"] = datetime.now(timezone.utc) + expires_delta
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def create_user_token(user) -> str:
    """Token de sesión de un usuario: id, rol y email."""
    return create_access_token(
        data={"id": user.id, "role": user.role, "email": user.email}
    )


def decode_token(token: str) -> Dict[str, Any]:
    """
    Validar firma y expiración de un JWT y devolver sus claims.

    Raises:
        JWTError: Si el token es inválido o ha expirado
    """
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        raise JWTError(f"Token inválido: {e}")
