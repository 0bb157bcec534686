"""
Errores de negocio. Cada error lleva un ErrorKind explícito; main.py traduce
el tipo a un status HTTP.
"""
from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    NOT_AVAILABLE = "NOT_AVAILABLE"
    FORBIDDEN = "FORBIDDEN"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    INVALID_STATE = "INVALID_STATE"


# Forbidden se responde como 404 para no revelar que el recurso existe
HTTP_STATUS: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.FORBIDDEN: 404,
    ErrorKind.NOT_AVAILABLE: 400,
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.INVALID_STATE: 400,
    ErrorKind.ALREADY_EXISTS: 409,
}


class ShareItError(Exception):
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return HTTP_STATUS[self.kind]


class NotFoundError(ShareItError):
    kind = ErrorKind.NOT_FOUND


class NotAvailableError(ShareItError):
    kind = ErrorKind.NOT_AVAILABLE


class ForbiddenError(ShareItError):
    kind = ErrorKind.FORBIDDEN


class InvalidArgumentError(ShareItError):
    kind = ErrorKind.INVALID_ARGUMENT


class AlreadyExistsError(ShareItError):
    kind = ErrorKind.ALREADY_EXISTS


class InvalidStateError(ShareItError):
    kind = ErrorKind.INVALID_STATE
