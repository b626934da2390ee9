"""
Standardized response utilities
"""

from typing import Any, Optional
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from suitehub.core.errors import DomainError, ErrorCode
from suitehub.schemas.common import StandardResponse, ErrorResponse

ERROR_STATUS = {
    ErrorCode.VALIDATION_ERROR: 422,
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.INVALID_CREDENTIALS: 401,
    ErrorCode.EVENT_NOT_FOUND: 404,
    ErrorCode.STORE_UNAVAILABLE: 503,
}

def success_response(
    message: str,
    data: Any = None,
    status_code: int = 200
) -> JSONResponse:
    """Create standardized success response"""
    response = StandardResponse(
        success=True,
        message=message,
        data=jsonable_encoder(data, by_alias=True)
    )
    return JSONResponse(
        content=response.model_dump(),
        status_code=status_code
    )

def error_response(
    message: str,
    error_code: Optional[str] = None,
    details: Any = None,
    status_code: int = 400
) -> JSONResponse:
    """Create standardized error response"""
    response = ErrorResponse(
        message=message,
        error_code=error_code,
        details=jsonable_encoder(details)
    )
    return JSONResponse(
        content=response.model_dump(),
        status_code=status_code
    )

def domain_error_response(error: DomainError, message: Optional[str] = None) -> JSONResponse:
    """Map a domain error onto the error envelope.

    `message` replaces the error's own text where the cause must stay hidden.
    """
    return error_response(
        message=message or error.message,
        error_code=error.code.value,
        status_code=ERROR_STATUS.get(error.code, 400)
    )
