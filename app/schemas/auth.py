"""
Schemas para autenticación.
"""
from pydantic import BaseModel, Field, StringConstraints, field_validator
from typing import Annotated, Optional

from app.schemas.user import UserCreate, UserResponse


class SignupRequest(UserCreate):
    """Schema para registro de nuevo usuario."""

    @field_validator('email')
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        """Guardar el email siempre en minúsculas."""
        return v.lower()

    @field_validator('role', mode='before')
    @classmethod
    def default_role(cls, v: Optional[str]) -> str:
        """Un rol vacío o nulo equivale al rol por defecto."""
        return v or 'auxiliar'


class SigninRequest(BaseModel):
    """
    Schema para inicio de sesión.

    Los campos son opcionales para poder responder 400 con un mensaje
    propio cuando falta el identificador o la contraseña.
    """

    email: Optional[Annotated[str, StringConstraints(strip_whitespace=True)]] = None
    username: Optional[Annotated[str, StringConstraints(strip_whitespace=True)]] = None
    password: Optional[str] = None


class TokenPayload(BaseModel):
    """Schema del payload del JWT."""

    id: int
    role: str
    email: str
    exp: int


class AuthResponse(BaseModel):
    """Schema de respuesta de signup/signin."""

    success: bool = True
    message: str
    token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Segundos de validez del token")
    user: UserResponse
