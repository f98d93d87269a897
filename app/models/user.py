"""
Modelo ORM para Usuarios.
"""
from sqlalchemy import Column, Integer, String, Enum
from app.db.base import Base, CatalogMixin


USER_ROLES = ('admin', 'coordinador', 'auxiliar')

user_role_enum = Enum(*USER_ROLES, name='user_role')


class User(Base, CatalogMixin):
    """Usuario del sistema. El hash de la contraseña nunca se serializa."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(user_role_enum, nullable=False, default='auxiliar')

    def __repr__(self):
        return f"<User {self.email}>"

    def has_role(self, *roles: str) -> bool:
        """Verificar si el usuario tiene alguno de los roles indicados."""
        return self.role in roles
