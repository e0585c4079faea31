"""
Middleware перехвата необработанных исключений.

Ловит любую ошибку обработчика, отвечает клиенту 500 в формате конверта
и в фоне отправляет отчет о падении на SERVICE_PANIC_LOG_URL.
"""

import logging
import os
import sys
import traceback
from pathlib import Path
from typing import Any, Dict

from fastapi import Request, status
from starlette.background import BackgroundTask
from starlette.middleware.base import RequestResponseEndpoint
from starlette.responses import Response

from .client import call_api_without_token
from .response import not_ok, write_json

logger = logging.getLogger(__name__)

PANIC_LOG_URL_ENV = "SERVICE_PANIC_LOG_URL"


def service_name() -> str:
    """Имя запущенного сервиса (исполняемого файла)"""
    return Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "unknown"


async def report_panic(report: Dict[str, Any]) -> None:
    """
    Отправить отчет о падении на внешний сервис логов.

    Ошибки отправки только логируются.
    """
    log_url = os.getenv(PANIC_LOG_URL_ENV)
    if not log_url:
        logger.warning(f"{PANIC_LOG_URL_ENV} not found in environment variable")
        return

    try:
        response = await call_api_without_token(log_url, report)
    except Exception as e:
        logger.error(f"Failed to send panic report to {log_url}: {e}")
        return

    if response.status_code != 200:
        try:
            details = response.body_to_map()
        except ValueError:
            details = response.body.decode(errors="replace")
        logger.error(
            f"Panic log service returned status {response.status_code}: {details}"
        )


async def unpanic(request: Request, call_next: RequestResponseEndpoint) -> Response:
    try:
        return await call_next(request)
    except Exception as exc:
        stack_trace = traceback.format_exc()
        name = service_name()
        logger.error(f"Recovered from panic: {exc}")
        logger.error(f"StackTrace: {stack_trace}")
        logger.info(f"Current executing service name: {name}")

        report = {
            "serviceName": name,
            "errorMessage": str(exc),
            "stackTrace": stack_trace,
        }
        logger.debug(f"Log request before sending: {report}")

        response = write_json(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            not_ok(str(exc))
        )
        response.background = BackgroundTask(report_panic, report)
        return response
