"""
Schemas para usuarios.
"""
from pydantic import BaseModel, EmailStr, Field, StringConstraints, field_validator
from typing import Annotated, Literal, Optional
from datetime import datetime


UserRole = Literal['admin', 'coordinador', 'auxiliar']

# Solo los identificadores se recortan; la contraseña se guarda tal cual llega
Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]


class UserCreate(BaseModel):
    """Schema para crear usuario."""

    username: Username
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=100)
    role: UserRole = 'auxiliar'

    @field_validator('email', mode='before')
    @classmethod
    def strip_email(cls, v):
        return v.strip() if isinstance(v, str) else v


class UserResponse(BaseModel):
    """Schema de respuesta de usuario (nunca incluye la contraseña)."""

    id: int
    username: str
    email: EmailStr
    role: str
    active: bool = True
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
