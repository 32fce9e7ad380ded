"""REST error codes and the error list returned with 4xx responses."""

from fastapi.responses import JSONResponse

ERR_INVALID_JSON = 2
ERR_RESOURCE_NOT_AVAILABLE = 3
ERR_MISSING_PARAMETER = 5
ERR_INVALID_VALUE = 7


def error_to_map(error_type: int, address: str, description: str) -> dict:
    return {"error": {"type": error_type, "address": address, "description": description}}


def error_response(status_code: int, error_type: int, address: str, description: str) -> JSONResponse:
    """Single-error list with the given HTTP status."""
    return JSONResponse(
        status_code=status_code,
        content=[error_to_map(error_type, address, description)],
    )
