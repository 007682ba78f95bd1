"""Domain errors shared by the services.

Each error carries the HTTP status and machine-readable code it maps to, so
the global exception handlers can render it without knowing every subclass.
"""


class ServiceError(Exception):
    """Base exception for all request-terminating domain errors."""

    status_code = 500
    code = "SERVICE_ERROR"
    default_message = "Service error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> dict:
        return {"message": self.message, "code": self.code}


class InvalidCredentials(ServiceError):
    """Raised when a username/password pair matches no account."""

    status_code = 401
    code = "INVALID_CREDENTIALS"
    default_message = "Credenciales inválidas"

    def to_body(self) -> dict:
        return {"success": False, **super().to_body()}


class Unauthorized(ServiceError):
    """Raised when the resolved identity lacks the required role."""

    status_code = 403
    code = "UNAUTHORIZED"
    default_message = "Acceso no autorizado"


class InvalidInput(ServiceError):
    """Raised when a candidate record breaks a validation rule."""

    status_code = 400
    code = "INVALID_INPUT"
    default_message = "Datos inválidos"


class NotFound(ServiceError):
    """Raised when a requested resource id has no matching record."""

    status_code = 404
    code = "NOT_FOUND"
    default_message = "Recurso no encontrado"
