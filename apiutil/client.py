"""
Минимальный HTTP клиент для исходящих POST запросов.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

ModelT = TypeVar("ModelT", bound=BaseModel)


class AuthTokenError(Exception):
    """Не удалось получить токен авторизации"""

    def __init__(self, message: str, status_code: Optional[int] = None, body: bytes = b""):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


@dataclass
class ApiResponse:
    """Ответ внешнего API: HTTP статус и сырое тело"""
    status_code: int
    body: bytes

    def body_to_map(self) -> Dict[str, Any]:
        """Разобрать тело как JSON объект"""
        data = json.loads(self.body)
        if not isinstance(data, dict):
            raise ValueError("response body is not a JSON object")
        return data

    def decode_body(self, model: Type[ModelT]) -> ModelT:
        """Разобрать тело в pydantic модель"""
        return model.model_validate_json(self.body)


async def _send_request(
    query_url: str,
    headers: Optional[Dict[str, str]] = None,
    client: Optional[httpx.AsyncClient] = None,
    **kwargs
) -> ApiResponse:
    if client is None:
        async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT) as own_client:
            return await _send_request(query_url, headers, own_client, **kwargs)

    response = await client.post(query_url, headers=headers, **kwargs)
    return ApiResponse(status_code=response.status_code, body=response.content)


async def call_api_with_token(
    query_url: str,
    token: str,
    request: Dict[str, Any],
    client: Optional[httpx.AsyncClient] = None
) -> ApiResponse:
    """
    Отправить POST запрос с JSON телом и Bearer токеном.

    Args:
        query_url: URL запроса
        token: Токен для заголовка Authorization
        request: Тело запроса
        client: Готовый httpx.AsyncClient (опционально)

    Returns:
        ApiResponse: Статус и тело ответа
    """
    headers = {"Authorization": f"Bearer {token}"}
    return await _send_request(query_url, headers, client, json=request)


async def call_api_without_token(
    query_url: str,
    request: Dict[str, Any],
    client: Optional[httpx.AsyncClient] = None
) -> ApiResponse:
    """Отправить POST запрос с JSON телом без авторизации"""
    return await _send_request(query_url, None, client, json=request)


async def get_auth_token(
    auth_uri: str,
    user_id: str,
    password: str,
    client: Optional[httpx.AsyncClient] = None
) -> str:
    """
    Получить токен авторизации.

    Логин и пароль отправляются как multipart форма (userid, password),
    токен берется из ключа "Value" JSON ответа.

    Raises:
        AuthTokenError: Сервер ответил не 200 или токен не найден
    """
    # httpx кодирует data как multipart только при наличии files
    form = {
        "userid": (None, user_id),
        "password": (None, password),
    }
    response = await _send_request(auth_uri, None, client, files=form)

    if response.status_code != 200:
        raise AuthTokenError(
            f"auth api returned statusCode: {response.status_code}, "
            f"body: {response.body.decode(errors='replace')}",
            status_code=response.status_code,
            body=response.body
        )

    try:
        data = response.body_to_map()
    except ValueError as e:
        raise AuthTokenError(f"unable to parse auth response: {e}") from e

    if "Value" not in data:
        raise AuthTokenError("unable to fetch token, value not found inside response")

    token = data["Value"]
    if not isinstance(token, str):
        raise AuthTokenError("value is not a string inside the response")
    if token == "":
        raise AuthTokenError("token is empty")

    return token
