# app/api/errors.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.errors import ProductsApiError, StorageError
from app.utils.logging import get_logger

logger = get_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Kazdy blad serializowany jako {"error": message}."""

    @app.exception_handler(ProductsApiError)
    async def products_api_error_handler(request: Request, exc: ProductsApiError):
        body = {"error": exc.message}
        if isinstance(exc, StorageError) and exc.detail:
            body["detail"] = exc.detail

        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message} ({exc.detail})")
        else:
            logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")

        return JSONResponse(status_code=exc.status_code, content=body)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        problems = []
        for err in exc.errors():
            field = ".".join(str(part) for part in err.get("loc", ())[1:])
            problems.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))

        return JSONResponse(
            status_code=400,
            content={"error": "invalid request: " + "; ".join(problems)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"{request.method} {request.url.path} -> unhandled {type(exc).__name__}")
        return JSONResponse(
            status_code=500,
            content={"error": "internal error", "detail": str(exc)},
        )
