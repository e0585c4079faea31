"""
Человекочитаемые сообщения об ошибках разбора тела запроса.
"""

from typing import Any, Sequence

from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from .response import INVALID_REQUEST

# Типы ошибок pydantic, означающие пустое или обрезанное тело
_EMPTY_BODY_TYPES = {"json_invalid", "missing"}

_JSON_TYPE_NAMES = {
    dict: "object",
    list: "array",
    str: "string",
    bool: "bool",
    int: "number",
    float: "number",
    type(None): "null",
}

_EXPECTED_TYPES = {
    "string_type": "string",
    "int_type": "number",
    "int_parsing": "number",
    "float_type": "number",
    "float_parsing": "number",
    "bool_type": "bool",
    "bool_parsing": "bool",
    "model_attributes_type": "object",
    "dict_type": "object",
    "list_type": "array",
}


def _field_name(loc: Sequence[Any]) -> str:
    # Убираем служебный префикс "body" от FastAPI
    parts = [str(part) for part in loc if part != "body"]
    return ".".join(parts)


def get_unmarshal_error(exc: Exception) -> str:
    """
    Получить описание ошибки разбора JSON тела.

    Пустое или невалидное тело -> INVALID_REQUEST,
    несовпадение типа поля -> "Provided dataType <got> but required dataType
    for the key <field> is <expected>", остальное -> текст ошибки.
    """
    if isinstance(exc, (RequestValidationError, ValidationError)):
        errors = exc.errors()
        if not errors:
            return str(exc)

        error = errors[0]
        error_type = error.get("type", "")
        field = _field_name(error.get("loc", ()))

        if error_type in _EMPTY_BODY_TYPES and not field:
            return INVALID_REQUEST
        if error_type == "json_invalid":
            return INVALID_REQUEST

        if error_type in _EXPECTED_TYPES:
            got = _JSON_TYPE_NAMES.get(type(error.get("input")), "value")
            expected = _EXPECTED_TYPES[error_type]
            if field:
                return (
                    f"Provided dataType {got} but required dataType "
                    f"for the key {field} is {expected}"
                )
            return f"Provided dataType {got} but required dataType is {expected}"

        return error.get("msg", str(exc))

    return str(exc)
