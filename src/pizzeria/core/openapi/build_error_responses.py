from typing import Dict
from pizzeria.core.errors import ErrorResponse


def build_error_responses(*codes: int) -> Dict[int, dict]:
    """Builds the ``responses`` argument of a route for 400, 404 and 409.

    404 is documented without a body, the other codes with ``ErrorResponse``.
    """
    allowed_codes = {
        400: {"description": "Bad Request", "model": ErrorResponse},
        404: {"description": "Not Found"},
        409: {"description": "Conflict", "model": ErrorResponse},
    }

    result = {}
    for code in codes:
        if code not in allowed_codes:
            raise ValueError(f"Code {code} not allowed. Only 400, 404 or 409.")
        result[code] = allowed_codes[code]
    return result
