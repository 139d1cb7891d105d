"""Pager exceptions and FastAPI exception handlers.

Request input never raises; these cover setup and wiring mistakes only.
"""


from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

class PagerException(Exception):
    """Base pager exception."""

    def __init__(self, message: str, status_code: int = 500, code: str = "PAGER_ERROR"):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

class PagerConfigError(PagerException):
    """Raised when the configured query parameter names are unusable."""

    def __init__(self, message: str):
        super().__init__(message, status_code=500, code="PAGER_CONFIG_ERROR")

class PagerNotRegisteredError(PagerException):
    def __init__(self, message: str = "No pager registered on this application"):
        super().__init__(message, status_code=500, code="PAGER_NOT_REGISTERED")

# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}}

def register_exception_handlers(app: FastAPI) -> None:
    """Attach the pager exception handler to the FastAPI app."""

    @app.exception_handler(PagerException)
    async def pager_exception_handler(request: Request, exc: PagerException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.code, exc.message),
        )
