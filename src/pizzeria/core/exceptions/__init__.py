from ._exception import (
    ApplicationException,
    DomainException,
    ConflictDomainException,
    NotFoundDomainException,
    BadRequestDomainException,
    DataBaseException,
)
from ._setup_exception_handlers import setup_exception_handlers

__all__ = [
    "ApplicationException",
    "DomainException",
    "ConflictDomainException",
    "NotFoundDomainException",
    "BadRequestDomainException",
    "DataBaseException",
    "setup_exception_handlers",
]
