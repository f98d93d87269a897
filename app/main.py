"""
Aplicación FastAPI principal de la API de catálogo.
"""
import json
import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.config import settings
from app.api.v1.router import api_router
from app.db.session import get_db_connection
from app.services.init_service import run_initialization
from app.core.exceptions import (
    CatalogException,
    NotFoundException,
    UnauthorizedException,
    ForbiddenException,
    BadRequestException,
    InternalException,
)

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Crear aplicación FastAPI
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="""
    ## Catalog API

    API RESTful para la gestión de un catálogo jerárquico
    (Categoría → Subcategoría → Producto) con autenticación JWT.

    ### Características principales:

    * **Autenticación JWT** - Registro e inicio de sesión por email o username
    * **Catálogo** - CRUD de categorías, subcategorías y productos
    * **Eliminación en cascada** - Desactivación (soft) o eliminación permanente (hard)

    ### Documentación:

    - **Swagger UI**: /docs
    - **ReDoc**: /redoc
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# Configurar CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "detail": message}
    )


# Exception Handlers
@app.exception_handler(NotFoundException)
async def not_found_exception_handler(request: Request, exc: NotFoundException):
    """Handler para recursos no encontrados."""
    return _error_response(status.HTTP_404_NOT_FOUND, str(exc))


@app.exception_handler(UnauthorizedException)
async def unauthorized_exception_handler(request: Request, exc: UnauthorizedException):
    """Handler para errores de autenticación."""
    return _error_response(status.HTTP_401_UNAUTHORIZED, str(exc))


@app.exception_handler(ForbiddenException)
async def forbidden_exception_handler(request: Request, exc: ForbiddenException):
    """Handler para errores de autorización."""
    return _error_response(status.HTTP_403_FORBIDDEN, str(exc))


@app.exception_handler(BadRequestException)
async def bad_request_exception_handler(request: Request, exc: BadRequestException):
    """Handler para solicitudes inválidas, validaciones y nombres duplicados."""
    return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))


@app.exception_handler(InternalException)
async def internal_exception_handler(request: Request, exc: InternalException):
    """Handler para fallos del almacenamiento. Los detalles quedan en el log."""
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


@app.exception_handler(CatalogException)
async def catalog_exception_handler(request: Request, exc: CatalogException):
    """Handler para cualquier otra excepción propia no clasificada."""
    logger.error(f"Excepción no clasificada en {request.url.path}: {exc}")
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error interno del servidor")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handler para errores de validación de Pydantic (400)."""
    # Convertir errores a formato serializable
    errors = []
    for error in exc.errors():
        err = {
            "type": error.get("type"),
            "loc": error.get("loc"),
            "msg": error.get("msg"),
        }
        # Incluir input solo si es serializable
        if "input" in error:
            try:
                json.dumps(error["input"])
                err["input"] = error["input"]
            except (TypeError, ValueError):
                err["input"] = str(error["input"])
        errors.append(err)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "detail": errors}
    )


# Incluir routers de la API
app.include_router(api_router, prefix="/api/v1")


# Endpoint raíz
@app.get("/", tags=["Health"])
async def root():
    """
    Endpoint raíz para verificar que la API está funcionando.
    """
    return {
        "message": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "online",
        "docs": "/docs",
        "redoc": "/redoc"
    }


# Health check
@app.get("/health", tags=["Health"])
async def health_check():
    """
    Endpoint de health check para monitoreo.
    """
    return {
        "status": "healthy",
        "version": settings.APP_VERSION
    }


# Startup event
@app.on_event("startup")
async def startup_event():
    """
    Evento ejecutado al iniciar la aplicación.
    """
    logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} iniciada")
    logger.info(f"Modo debug: {settings.DEBUG}")
    run_initialization()


# Shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    """
    Evento ejecutado al apagar la aplicación.
    """
    get_db_connection().dispose()
    logger.info(f"{settings.APP_NAME} detenida")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
