import logging

from fastapi import Request
from fastapi.responses import HTMLResponse

from hotelbook.api.views import templates

from .custom import ClientInputError, NotFound, StorageError

logger = logging.getLogger(__name__)


def _error_page(request: Request, status_code: int, title: str, detail: str) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "error.html",
        {"status_code": status_code, "title": title, "detail": detail},
        status_code=status_code,
    )


async def client_input_error_handler(request: Request, exc: ClientInputError) -> HTMLResponse:
    logger.warning("Rejected input on %s: %s", request.url.path, exc.message)
    return _error_page(request, 400, "Bad request", exc.message)


async def not_found_handler(request: Request, exc: NotFound) -> HTMLResponse:
    logger.info("%s %s not found", exc.entity, exc.entity_id)
    return _error_page(request, 404, "Not found", f"{exc.entity} not found")


async def storage_error_handler(request: Request, exc: StorageError) -> HTMLResponse:
    logger.error("Storage error on %s: %s", request.url.path, exc.message)
    return _error_page(request, 500, "Internal error", "Something went wrong. Please try again later.")
