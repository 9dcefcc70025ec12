import pytest

from pizzeria.core.exceptions import (
    ApplicationException,
    BadRequestDomainException,
    ConflictDomainException,
    DataBaseException,
    DomainException,
    NotFoundDomainException,
)


@pytest.mark.parametrize(
    "exception_type, status",
    [
        (NotFoundDomainException, 404),
        (ConflictDomainException, 409),
        (BadRequestDomainException, 400),
        (DataBaseException, 500),
        (ApplicationException, 500),
    ],
)
def test_status(exception_type, status):
    exc = exception_type("boom")
    assert exc.status == status
    assert exc.message == "boom"
    assert exc.exception == exception_type.__name__


def test_domain_exceptions_share_a_base():
    assert issubclass(NotFoundDomainException, DomainException)
    assert issubclass(ConflictDomainException, ApplicationException)


def test_cause_is_kept():
    cause = KeyError("id")
    assert DataBaseException("lost", cause=cause).cause is cause


def test_status_can_be_overridden():
    assert ApplicationException("teapot", status=418).status == 418
