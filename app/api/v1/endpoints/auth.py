"""
Endpoints de autenticación.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.deps import get_db
from app.schemas.auth import AuthResponse, SigninRequest, SignupRequest
from app.services import auth_service

router = APIRouter()


@router.post("/signup", response_model=AuthResponse)
def signup(
    user_in: SignupRequest,
    db: Session = Depends(get_db)
):
    """
    Registrar nuevo usuario.

    Requiere:
    - username y email únicos
    - Contraseña de al menos 6 caracteres
    - role opcional (admin, coordinador, auxiliar; por defecto auxiliar)

    Retorna el token JWT y el usuario sin la contraseña.
    """
    return auth_service.signup(db, user_in)


@router.post("/signin", response_model=AuthResponse)
def signin(
    login_data: SigninRequest,
    db: Session = Depends(get_db)
):
    """
    Iniciar sesión con email o username y contraseña.

    Retorna:
    - 400 si falta el identificador o la contraseña
    - 404 si el usuario no existe
    - 401 si la contraseña es incorrecta
    """
    return auth_service.signin(db, login_data)
