"""
Excepciones personalizadas para la API de catálogo.
"""


class CatalogException(Exception):
    """Excepción base para todas las excepciones del catálogo."""

    def __init__(self, message: str = "Error en la aplicación"):
        self.message = message
        super().__init__(self.message)


class NotFoundException(CatalogException):
    """Excepción cuando un recurso no se encuentra."""

    def __init__(self, message: str = "Recurso no encontrado"):
        super().__init__(message)


class UnauthorizedException(CatalogException):
    """Excepción cuando el usuario no está autenticado."""

    def __init__(self, message: str = "No autorizado"):
        super().__init__(message)


class ForbiddenException(CatalogException):
    """Excepción cuando el usuario no tiene permisos."""

    def __init__(self, message: str = "Acceso prohibido"):
        super().__init__(message)


class BadRequestException(CatalogException):
    """Excepción cuando la solicitud es inválida."""

    def __init__(self, message: str = "Solicitud inválida"):
        super().__init__(message)


class ValidationException(BadRequestException):
    """Excepción cuando falla la validación de datos."""

    def __init__(self, message: str = "Error de validación"):
        super().__init__(message)


class DuplicateException(BadRequestException):
    """Excepción cuando se viola una restricción de nombre único."""

    def __init__(self, message: str = "Ya existe un registro con ese nombre"):
        super().__init__(message)


class InternalException(CatalogException):
    """Excepción ante fallos inesperados del almacenamiento o la infraestructura."""

    def __init__(self, message: str = "Error interno del servidor"):
        super().__init__(message)
