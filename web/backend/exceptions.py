#!/usr/bin/env python3
"""
Exception handlers for the web application.

Domain errors from core.exceptions are mapped onto HTTP status codes
with a consistent {success, error, type} body.
"""

import logging
from typing import Dict, Type
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from core.exceptions import (
    AtsError,
    DocumentParseError,
    Forbidden,
    IOFailure,
    NotAuthenticated,
    OracleFailure,
    ReportNotFound,
    UnsupportedDocumentFormat,
    ValidationError,
)

logger = logging.getLogger(__name__)


class ServiceUnavailable(AtsError):
    """Raised when the application failed to initialize its storage."""
    pass


ORACLE_RETRY_MESSAGE = "AI Engine error. Ensure your API key is valid and try again."

STATUS_CODES: Dict[Type[AtsError], int] = {
    ValidationError: 400,
    DocumentParseError: 400,
    NotAuthenticated: 401,
    Forbidden: 403,
    ReportNotFound: 404,
    UnsupportedDocumentFormat: 415,
    OracleFailure: 502,
    ServiceUnavailable: 503,
    IOFailure: 500,
}


def status_code_for(exc: AtsError) -> int:
    for exc_type, status_code in STATUS_CODES.items():
        if isinstance(exc, exc_type):
            return status_code
    return 500


async def ats_exception_handler(
    request: Request,
    exc: AtsError
) -> JSONResponse:
    """
    Handle domain exceptions.

    Args:
        request: The FastAPI request.
        exc: The domain exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = status_code_for(exc)
    message = str(exc)

    if isinstance(exc, OracleFailure):
        logger.error(f"Scoring failed in {request.url.path}: {exc}")
        message = ORACLE_RETRY_MESSAGE
    elif status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"Rejected request to {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": message,
            "type": exc.__class__.__name__
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
