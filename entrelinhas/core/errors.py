"""Application errors.

Services raise these; ``entrelinhas.main`` renders every ``AppError`` as
``{"error": message}`` with the status carried by its kind.
"""
from enum import Enum

from fastapi import status


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    INVALID_CREDENTIALS = "invalid_credentials"
    CONFLICT = "conflict"
    UNAUTHENTICATED = "unauthenticated"
    INVALID_TOKEN = "invalid_token"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class AppError(Exception):
    kind: ErrorKind = ErrorKind.INTERNAL
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Erro no servidor"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    kind = ErrorKind.VALIDATION
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Requisição inválida"


class InvalidCredentials(AppError):
    kind = ErrorKind.INVALID_CREDENTIALS
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Credenciais inválidas"


class Conflict(AppError):
    kind = ErrorKind.CONFLICT
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Registro duplicado"


class Unauthenticated(AppError):
    kind = ErrorKind.UNAUTHENTICATED
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Token necessário"


class InvalidToken(AppError):
    kind = ErrorKind.INVALID_TOKEN
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Token inválido"


class Forbidden(AppError):
    kind = ErrorKind.FORBIDDEN
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Sem permissão"


class NotFound(AppError):
    kind = ErrorKind.NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Não encontrado"


class InternalError(AppError):
    pass
