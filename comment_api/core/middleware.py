from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.middleware import Middleware as StarletteMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from typing import Awaitable, Callable, List
import logging
import time

from apiutil import METHOD_NOT_ALLOWED, get_unmarshal_error, not_ok, write_json

from ..features.comment.messages import Message

# Настройка логирования
logger = logging.getLogger(__name__)

# Middleware - async функция (request, call_next) -> response
Middleware = Callable[[Request, RequestResponseEndpoint], Awaitable[Response]]


def create_stack(*middlewares: Middleware) -> List[StarletteMiddleware]:
    """
    Собрать цепочку middleware для FastAPI(middleware=...).

    Первый переданный middleware видит запрос первым, method_not_allowed
    всегда самый внутренний (ближе всего к обработчику).
    """
    stack = [
        StarletteMiddleware(BaseHTTPMiddleware, dispatch=middleware)
        for middleware in middlewares
    ]
    stack.append(StarletteMiddleware(BaseHTTPMiddleware, dispatch=method_not_allowed))
    return stack


async def method_not_allowed(request: Request, call_next: RequestResponseEndpoint) -> Response:
    """
    Заменить ответ 405 на JSON конверт "Method not allowed"
    """
    response = await call_next(request)
    if response.status_code != status.HTTP_405_METHOD_NOT_ALLOWED:
        return response

    headers = {}
    if "allow" in response.headers:
        headers["Allow"] = response.headers["allow"]
    return write_json(
        status.HTTP_405_METHOD_NOT_ALLOWED,
        not_ok(METHOD_NOT_ALLOWED),
        headers=headers
    )


async def log_requests(request: Request, call_next: RequestResponseEndpoint) -> Response:
    # 1. Логируем входящий запрос
    start_time = time.time()
    client_host = request.client.host if request.client else "unknown"
    logger.info(f"Incoming request: {request.method} {request.url.path} from {client_host}")

    # 2. Передаем запрос дальше и получаем ответ
    response = await call_next(request)

    # 3. Логируем время выполнения и статус ответа
    process_time = time.time() - start_time

    # Разный уровень логирования в зависимости от статуса
    if response.status_code >= 500:
        logger.error(
            f"Request {request.method} {request.url.path} failed | "
            f"Status: {response.status_code} | Time: {process_time:.4f}s"
        )
    elif response.status_code >= 400:
        logger.warning(
            f"Request {request.method} {request.url.path} finished with client error | "
            f"Status: {response.status_code} | Time: {process_time:.4f}s"
        )
    else:
        logger.info(
            f"Request {request.method} {request.url.path} completed | "
            f"Status: {response.status_code} | Time: {process_time:.4f}s"
        )

    return response


def setup_exception_handlers(app: FastAPI):
    """
    Настройка глобальных обработчиков исключений
    """

    # Ошибка разбора JSON тела или его валидации
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            f"Bad request body for {request.method} {request.url.path}: "
            f"{get_unmarshal_error(exc)}"
        )
        return write_json(status.HTTP_400_BAD_REQUEST, not_ok(Message.BAD_REQUEST))
