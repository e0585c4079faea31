"""
Общие утилиты для HTTP сервисов.

Этот пакет содержит:
- response: конверт ответа API и запись JSON
- env: чтение переменных окружения по описанию полей
- client: исходящие POST запросы (с токеном и без)
- errors: сообщения об ошибках разбора JSON
- recovery: middleware перехвата необработанных исключений
"""

from .response import (
    INVALID_REQUEST,
    METHOD_NOT_ALLOWED,
    STATUS_CODE_NOT_OK,
    STATUS_CODE_OK,
    Response,
    not_ok,
    ok,
    write_json,
)
from .env import (
    EnvError,
    EnvVar,
    EnvVarMissingError,
    EnvVarTypeError,
    parse_bool,
    parse_int,
    parse_str,
    read_env_vars,
)
from .client import (
    ApiResponse,
    AuthTokenError,
    call_api_with_token,
    call_api_without_token,
    get_auth_token,
)
from .errors import get_unmarshal_error
from .recovery import unpanic

__all__ = [
    "INVALID_REQUEST",
    "METHOD_NOT_ALLOWED",
    "STATUS_CODE_NOT_OK",
    "STATUS_CODE_OK",
    "Response",
    "not_ok",
    "ok",
    "write_json",
    "EnvError",
    "EnvVar",
    "EnvVarMissingError",
    "EnvVarTypeError",
    "parse_bool",
    "parse_int",
    "parse_str",
    "read_env_vars",
    "ApiResponse",
    "AuthTokenError",
    "call_api_with_token",
    "call_api_without_token",
    "get_auth_token",
    "get_unmarshal_error",
    "unpanic",
]
