from typing import Optional
from ._constants import INTERNALSERVERERROR, NOTFOUND, CONFLICT, BADREQUEST


class ApplicationException(Exception):
    """
    Base exception of the application. Subclasses set ``status`` and
    ``error``; the handlers turn them into an ``ErrorResponse``.
    """

    status: int = INTERNALSERVERERROR
    error: str = "Internal Server Error"

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        error: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status or type(self).status
        self.error = error or type(self).error
        self.cause = cause
        self.path: Optional[str] = None

    @property
    def exception(self) -> str:
        return type(self).__name__


class DomainException(ApplicationException):
    """Business rule violations."""


class ConflictDomainException(DomainException):
    status = CONFLICT
    error = "Conflict"


class BadRequestDomainException(DomainException):
    status = BADREQUEST
    error = "Bad Request"


class NotFoundDomainException(DomainException):
    status = NOTFOUND
    error = "Not Found"


class DataBaseException(ApplicationException):
    error = "Database Error"
