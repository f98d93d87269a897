"""
Engine y fábrica de sesiones SQLAlchemy (instancia única por proceso).
"""
from typing import Optional

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker

from app.config import get_settings


class DatabaseConnection:
    """
    Conexión única a la base de datos del catálogo.

    SQLite (valor por defecto) comparte la conexión entre los hilos del
    servidor; cualquier otro motor usa un pool de conexiones.
    """
    _instance: Optional['DatabaseConnection'] = None
    _engine: Optional[Engine] = None
    _session_factory: Optional[sessionmaker] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._engine is not None:
            return

        settings = get_settings()
        options = {"pool_pre_ping": True, "echo": settings.DEBUG}
        if settings.is_sqlite:
            options["connect_args"] = {"check_same_thread": False}
        else:
            options.update(pool_recycle=3600, pool_size=5, max_overflow=10)

        self._engine = create_engine(settings.DATABASE_URL, **options)
        self._session_factory = sessionmaker(
            autocommit=False, autoflush=False, bind=self._engine
        )

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def session_factory(self) -> sessionmaker:
        return self._session_factory

    def dispose(self) -> None:
        """Cerrar las conexiones del pool."""
        self._engine.dispose()


_db = DatabaseConnection()

engine = _db.engine
SessionLocal = _db.session_factory


def get_db_connection() -> DatabaseConnection:
    """Obtener la conexión única."""
    return _db
