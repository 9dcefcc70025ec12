from .errors_response import ErrorResponse

__all__ = ["ErrorResponse"]
