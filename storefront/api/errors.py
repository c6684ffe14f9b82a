# storefront/api/errors.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.domain.errors import ServiceError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def error_response(status: int, msg: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"status": status, "msg": msg})


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.msg}")
    return error_response(exc.status_code, exc.msg)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug(f"{request.method} {request.url.path} invalid arguments: {exc.errors()}")
    return error_response(400, "Invalid arguments")


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
