from __future__ import annotations

import enum


class ErrorMessage(str, enum.Enum):
    """Human-readable default messages, keyed by symbolic name."""

    BAD_REQUEST_400 = "Bad Request"
    UNAUTHORIZED_401 = "Unauthorized"
    FORBIDDEN_403 = "Forbidden"
    NOT_FOUND_404 = "Not Found"
    METHOD_NOT_ALLOWED_405 = "Method Not Allowed"
    CONFLICT_409 = "Conflict"
    PRECONDITION_FAILED_412 = "Precondition Failed"
    PRECONDITION_REQUIRED_428 = "Precondition Required"
    INTERNAL_SERVER_ERROR_500 = "Internal Server Error"
    NOT_IMPLEMENTED_501 = "Not Implemented"
    SERVICE_UNAVAILABLE_503 = "Service Unavailable"

    CONTACT_ADMINISTRATOR = "Please contact the administrator."

    def __str__(self) -> str:
        return self.value


_BY_CODE: dict[int, ErrorMessage] = {
    400: ErrorMessage.BAD_REQUEST_400,
    401: ErrorMessage.UNAUTHORIZED_401,
    403: ErrorMessage.FORBIDDEN_403,
    404: ErrorMessage.NOT_FOUND_404,
    405: ErrorMessage.METHOD_NOT_ALLOWED_405,
    409: ErrorMessage.CONFLICT_409,
    412: ErrorMessage.PRECONDITION_FAILED_412,
    428: ErrorMessage.PRECONDITION_REQUIRED_428,
    500: ErrorMessage.INTERNAL_SERVER_ERROR_500,
    501: ErrorMessage.NOT_IMPLEMENTED_501,
    503: ErrorMessage.SERVICE_UNAVAILABLE_503,
}


def default_message(code: int) -> str:
    return _BY_CODE.get(code, ErrorMessage.INTERNAL_SERVER_ERROR_500).value
