"""
Чтение переменных окружения по статическому описанию полей.

Каждое поле описывается через EnvVar: имя поля, имя переменной,
признак обязательности и парсер значения.
"""

import os
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

_INT_RE = re.compile(r"[+-]?[0-9]+")

_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}


class EnvError(ValueError):
    """Базовая ошибка конфигурации окружения"""


class EnvVarMissingError(EnvError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"required environment variable {name} not found")


class EnvVarTypeError(EnvError):
    def __init__(self, name: str, value: str, kind: str):
        self.name = name
        self.value = value
        self.kind = kind
        super().__init__(
            f"value: {value}, in env variable {name} is not of type {kind}"
        )


def parse_str(value: str) -> str:
    return value


def parse_bool(value: str) -> bool:
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(value)


def parse_int(value: str) -> int:
    if not _INT_RE.fullmatch(value):
        raise ValueError(value)
    return int(value)


# Нулевые значения для незаданных необязательных переменных
_ZERO_VALUES = {
    parse_str: "",
    parse_bool: False,
    parse_int: 0,
}

_KIND_NAMES = {
    parse_str: "string",
    parse_bool: "bool",
    parse_int: "int",
}


@dataclass(frozen=True)
class EnvVar:
    """Описание одного поля конфигурации"""
    field: str
    name: str
    required: bool = False
    parser: Callable[[str], Any] = parse_str
    default: Optional[Any] = None

    def zero_value(self) -> Any:
        if self.default is not None:
            return self.default
        return _ZERO_VALUES.get(self.parser)

    def kind(self) -> str:
        return _KIND_NAMES.get(self.parser, getattr(self.parser, "__name__", "value"))


def read_env_vars(
    variables: Iterable[EnvVar],
    environ: Optional[Mapping[str, str]] = None
) -> Dict[str, Any]:
    """
    Прочитать переменные окружения по списку описаний.

    Args:
        variables: Описания полей (EnvVar)
        environ: Источник значений (по умолчанию os.environ)

    Returns:
        Dict[str, Any]: Значения, разложенные по именам полей

    Raises:
        EnvVarMissingError: Не задана обязательная переменная
        EnvVarTypeError: Значение не разбирается парсером поля
    """
    if environ is None:
        environ = os.environ

    values = {}
    for var in variables:
        if var.name not in environ:
            if var.required:
                raise EnvVarMissingError(var.name)
            values[var.field] = var.zero_value()
            continue

        raw = environ[var.name]
        # Пустое значение трактуем как незаданное
        if raw == "":
            values[var.field] = var.zero_value()
            continue

        try:
            values[var.field] = var.parser(raw)
        except ValueError:
            raise EnvVarTypeError(var.name, raw, var.kind()) from None

    return values
