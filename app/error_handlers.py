from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from domain.errors import AnalyzerError

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def attach_error_handlers(app: FastAPI) -> None:
    """Render every failure as ``{"error": ...}``.

    Must run before CORS middleware is added, so the catch-all below sits
    inside the CORS layer and unexpected 500s still carry CORS headers.
    """

    @app.exception_handler(AnalyzerError)
    async def _analyzer_error(request: Request, exc: AnalyzerError):
        if exc.status_code >= 500:
            logger.error("Analysis failed: %s", exc.message, exc_info=exc.__cause__ or exc)
        else:
            logger.warning("Rejected request: %s", exc.message)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError):
        logger.warning("Invalid request: %s", exc.errors())
        return _error(400, "Invalid request: expected a multipart upload with a 'file' field")

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.middleware("http")
    async def _unhandled(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled: %s", exc)
            return _error(500, "Internal Server Error")
