"""FastAPI exception handlers turning ReportDeskError into JSON responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from reportdesk.errors.exceptions import ReportDeskError, UnauthenticatedError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(ReportDeskError)
    async def reportdesk_error_handler(request: Request, exc: ReportDeskError):
        if exc.status_code >= 500:
            logger.warning(
                "request_failed",
                extra={"path": request.url.path, "method": request.method, "code": exc.code},
            )
        headers = None
        if isinstance(exc, UnauthenticatedError):
            headers = {"WWW-Authenticate": "Bearer"}
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message, "code": exc.code},
            headers=headers,
        )
