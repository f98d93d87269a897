"""
Configuración de la API de catálogo.
Maneja variables de entorno y settings globales.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """Configuración de la aplicación usando Pydantic Settings v2."""

    # Database
    DATABASE_URL: str = "sqlite:///./catalog.db"

    # Security
    SECRET_KEY: str = "tusecretoparalostokens"
    ALGORITHM: str = "HS256"
    JWT_EXPIRATION: int = 86400  # 24 horas, en segundos
    SALT_ROUNDS: int = 10

    # Application
    APP_NAME: str = "Catalog API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Initial Admin (opcional, vacío = no se crea)
    ADMIN_USERNAME: str = "admin"
    ADMIN_EMAIL: str = ""
    ADMIN_PASSWORD: str = ""

    # Computed properties
    @property
    def allowed_origins_list(self) -> List[str]:
        """Convierte ALLOWED_ORIGINS string a lista."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    @property
    def is_sqlite(self) -> bool:
        """Indica si la base de datos configurada es SQLite."""
        return self.DATABASE_URL.startswith("sqlite")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Instancia Singleton de settings
_settings_instance = None


def get_settings() -> Settings:
    """
    Obtener instancia Singleton de configuración.
    Se carga una sola vez y se reutiliza.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


# Instancia global de settings (Singleton)
settings = get_settings()
