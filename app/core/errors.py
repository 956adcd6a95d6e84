from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AnalyzerError(Exception):
    """Base error surfaced to API callers as ``{"error": message}``."""

    status_code = 400
    message = "Ошибка запроса"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class InvalidInput(AnalyzerError):
    message = "Текст не предоставлен или имеет неверный формат"


class TooLong(AnalyzerError):
    message = "Текст слишком длинный. Максимум 5000 символов."

    def __init__(self, max_length: int = 5000):
        super().__init__(f"Текст слишком длинный. Максимум {max_length} символов.")
        self.max_length = max_length


class InternalError(AnalyzerError):
    status_code = 500
    message = "Произошла ошибка при анализе текста"


class UnsupportedDocument(AnalyzerError):
    message = "Неподдерживаемый тип файла"


class ExportError(AnalyzerError):
    message = "Не удалось выполнить экспорт"


class UnknownVisualKind(AnalyzerError):
    status_code = 404
    message = "Неизвестный тип инфографики"


def error_response(err: AnalyzerError) -> JSONResponse:
    return JSONResponse(status_code=err.status_code, content={"error": err.message})


async def _analyzer_error_handler(request: Request, exc: AnalyzerError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected malformed request on %s: %s", request.url.path, exc.errors())
    return error_response(InvalidInput())


async def _unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected failure on %s %s", request.method, request.url.path)
    return error_response(InternalError())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AnalyzerError, _analyzer_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unexpected_error_handler)
