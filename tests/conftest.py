"""
Fixtures comunes: base SQLite en memoria, cliente HTTP y usuarios con token.
"""
import os

# Configuración de pruebas antes de importar la aplicación
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SALT_ROUNDS", "4")
os.environ.setdefault("SECRET_KEY", "clave-de-pruebas")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.core.deps import get_db
from app.core.security import create_user_token
from app.crud.category import category as crud_category
from app.crud.subcategory import subcategory as crud_subcategory
from app.crud.product import product as crud_product
from app.crud.user import user as crud_user
from app.models import Base
from app.schemas.catalog import CategoryCreate, SubcategoryCreate, ProductCreate
from app.schemas.user import UserCreate

API = "/api/v1"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _headers_for(db, username: str, role: str) -> dict:
    user = crud_user.create(db, obj_in=UserCreate(
        username=username,
        email=f"{username}@example.com",
        password="secret1",
        role=role,
    ))
    return {"Authorization": f"Bearer {create_user_token(user)}"}


@pytest.fixture
def admin_headers(db):
    return _headers_for(db, "root", "admin")


@pytest.fixture
def coordinator_headers(db):
    return _headers_for(db, "coord", "coordinador")


@pytest.fixture
def auxiliar_headers(db):
    return _headers_for(db, "aux", "auxiliar")


@pytest.fixture
def catalog(db):
    """Jerarquía Dairy → Cheese → Cheddar creada directamente en la base."""
    dairy = crud_category.create_category(
        db, obj_in=CategoryCreate(name="Dairy", description="Milk products")
    )
    cheese = crud_subcategory.create_subcategory(
        db, obj_in=SubcategoryCreate(name="Cheese", description="Cheeses", category=dairy.id)
    )
    cheddar = crud_product.create_product(
        db,
        obj_in=ProductCreate(
            name="Cheddar",
            description="Aged cheddar",
            price=5,
            stock=10,
            category=dairy.id,
            subcategory=cheese.id,
        ),
    )
    return {"category": dairy, "subcategory": cheese, "product": cheddar}
