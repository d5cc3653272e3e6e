"""
Standardized response utilities
"""

from typing import Any, Optional
from fastapi import HTTPException, status
from fastapi.responses import JSONResponse

from boxoffice.core.errors import (
    CatalogError,
    DuplicateKey,
    InvalidSeatFormat,
    SeatTaken,
    TicketNotFound,
    UnknownEvent,
)
from boxoffice.schemas.common import StandardResponse, ErrorResponse

# HTTP status for each catalog error kind
ERROR_STATUS = {
    DuplicateKey: status.HTTP_409_CONFLICT,
    SeatTaken: status.HTTP_409_CONFLICT,
    UnknownEvent: status.HTTP_404_NOT_FOUND,
    TicketNotFound: status.HTTP_404_NOT_FOUND,
    InvalidSeatFormat: 422,
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
        data=data
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
        details=details
    )
    return JSONResponse(
        content=response.model_dump(),
        status_code=status_code
    )

def catalog_error_response(error: CatalogError) -> JSONResponse:
    """Render a catalog precondition failure"""
    return error_response(
        message=error.message,
        error_code=error.error_code,
        details=error.details or None,
        status_code=ERROR_STATUS.get(type(error), status.HTTP_400_BAD_REQUEST)
    )

def rate_limit_error():
    """Create rate limit error"""
    raise HTTPException(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        detail="Rate limit exceeded. Please try again later."
    )
