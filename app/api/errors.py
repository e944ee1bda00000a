# app/api/errors.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.errors import CatalogValidationError, ProductNotFoundError
from app.utils.logging import get_logger

logger = get_logger(__name__)


async def product_not_found_handler(request: Request, exc: ProductNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def catalog_validation_handler(request: Request, exc: CatalogValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProductNotFoundError, product_not_found_handler)
    app.add_exception_handler(CatalogValidationError, catalog_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
