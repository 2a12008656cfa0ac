from __future__ import annotations

from typing import Dict, Tuple

from fastapi import status

from .repositories import ErrorKind

TITLE_REQUIRED = "El título es obligatorio"
TODO_NOT_FOUND = "Tarea no encontrada"
ENDPOINT_NOT_FOUND = "Endpoint no encontrado"
INVALID_INPUT = "Datos de entrada inválidos"
INTERNAL_ERROR = "Error interno del servidor"
TODO_DELETED = "Tarea eliminada correctamente"

# Store error kind -> (HTTP status, client message)
ERROR_RESPONSES: Dict[ErrorKind, Tuple[int, str]] = {
    ErrorKind.VALIDATION: (status.HTTP_400_BAD_REQUEST, TITLE_REQUIRED),
    ErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, TODO_NOT_FOUND),
}


class ApiError(Exception):
    """
    An expected failure rendered as an error envelope with the given status.
    """

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    @classmethod
    def from_kind(cls, kind: ErrorKind) -> "ApiError":
        status_code, message = ERROR_RESPONSES[kind]
        return cls(status_code, message)
