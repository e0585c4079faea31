"""
Единый формат ответов API.

Все JSON ответы сервиса оборачиваются в конверт:
    {"status": "OK" | "NotOK", "msg": "...", "data": ...}
"""

from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

METHOD_NOT_ALLOWED = "Method not allowed"
INVALID_REQUEST = "Invalid request"

# Статус успешной операции
STATUS_CODE_OK = "OK"
# Статус неуспешной операции
STATUS_CODE_NOT_OK = "NotOK"


class Response(BaseModel):
    """
    Конверт ответа API.

    status - "OK" или "NotOK"
    msg - человекочитаемое сообщение
    data - полезная нагрузка (объект, список или None)
    """
    status: str
    msg: str
    data: Optional[Any] = None


def ok(msg: str, data: Any = None) -> Response:
    return Response(status=STATUS_CODE_OK, msg=str(msg), data=data)


def not_ok(msg: str) -> Response:
    return Response(status=STATUS_CODE_NOT_OK, msg=str(msg))


def write_json(status_code: int, val: Any, headers: Optional[dict] = None) -> JSONResponse:
    """
    Сформировать JSON ответ с указанным статусом.

    val может быть конвертом Response, pydantic моделью или любым
    JSON-сериализуемым значением.
    """
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(val),
        headers=headers
    )
