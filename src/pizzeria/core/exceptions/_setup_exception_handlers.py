import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from pizzeria.core.errors import ErrorResponse
from ._exception import ApplicationException, NotFoundDomainException
from ._constants import NOTFOUND, UNPROCESSABLEENTITY, INTERNALSERVERERROR

logger = structlog.get_logger(__name__)


def _create_error_response(
    status: int,
    error: str,
    exception_name: str,
    message: str | list,
    path: str,
) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content=jsonable_encoder(
            ErrorResponse(
                status=status,
                error=error,
                exception=exception_name,
                message=message,
                path=path,
            )
        ),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Registers the handlers that turn exceptions into responses.

    A missing entity is always answered with an empty 404; every other
    failure carries an ``ErrorResponse`` body.
    """

    @app.exception_handler(NotFoundDomainException)
    async def not_found_exception_handler(
        request: Request, exc: NotFoundDomainException
    ) -> Response:
        logger.info("entity_not_found", path=request.url.path, message=exc.message)
        return Response(status_code=NOTFOUND)

    @app.exception_handler(ApplicationException)
    async def application_exception_handler(
        request: Request, exc: ApplicationException
    ) -> JSONResponse:
        return _create_error_response(
            status=exc.status,
            error=exc.error,
            exception_name=exc.exception,
            message=exc.message,
            path=exc.path or str(request.url.path),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _create_error_response(
            status=UNPROCESSABLEENTITY,
            error="Validation Error",
            exception_name=type(exc).__name__,
            message=list(exc.errors()),
            path=str(request.url.path),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request, exc: HTTPException
    ) -> JSONResponse:
        return _create_error_response(
            status=exc.status_code,
            error="HTTP Exception",
            exception_name=type(exc).__name__,
            message=exc.detail,
            path=str(request.url.path),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception("unhandled_exception", path=request.url.path)
        return _create_error_response(
            status=INTERNALSERVERERROR,
            error="Internal Server Error",
            exception_name=type(exc).__name__,
            message=str(exc),
            path=str(request.url.path),
        )
