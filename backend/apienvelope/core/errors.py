from __future__ import annotations

import dataclasses

from apienvelope.core.messages import ErrorMessage


class ResponseError(Exception):
    """Error that maps to the standard response envelope.

    Every kind carries ``status``, ``message`` and ``description``.
    """

    status: int
    message: str
    description: str

    def _init_args(self) -> None:
        self.message = str(self.message)
        self.description = str(self.description)
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message


@dataclasses.dataclass(eq=False)
class NoResponseError(ResponseError):
    """A response was already produced by other means; emit nothing further."""

    status: int = 500
    message: str = ErrorMessage.INTERNAL_SERVER_ERROR_500
    description: str = ErrorMessage.CONTACT_ADMINISTRATOR

    def __post_init__(self) -> None:
        self._init_args()


@dataclasses.dataclass(eq=False)
class ServerError(ResponseError):
    """Internal failure."""

    status: int = 500
    message: str = ErrorMessage.INTERNAL_SERVER_ERROR_500
    description: str = ErrorMessage.CONTACT_ADMINISTRATOR

    def __post_init__(self) -> None:
        self._init_args()


@dataclasses.dataclass(eq=False)
class ClientError(ResponseError):
    """Caller fault. ``status`` and ``message`` have no defaults."""

    status: int
    message: str
    description: str = ""

    def __post_init__(self) -> None:
        self._init_args()

