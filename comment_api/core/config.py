import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from apiutil import EnvVar, parse_bool, parse_int, read_env_vars


APP_NAME = "Comment Service API"
APP_DESCRIPTION = "REST API для управления комментариями"
APP_VERSION = "1.0.0"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Описание переменных окружения сервиса
ENVIRONMENT_VARIABLES = (
    # === НАСТРОЙКИ БАЗЫ ДАННЫХ ===
    EnvVar("db_username", "DB_USERNAME", required=True),
    EnvVar("db_password", "DB_PASSWORD", required=True),
    EnvVar("db_host", "DB_HOST", required=True),
    EnvVar("db_port", "DB_PORT", required=True),
    EnvVar("db_name", "DB_NAME", required=True),

    # === НАСТРОЙКИ СЕРВЕРА ===
    EnvVar("port", "COMMENT_SERVICE_PORT", required=True, parser=parse_int),
    EnvVar("host", "COMMENT_SERVICE_HOST", default="0.0.0.0"),

    # === НАСТРОЙКИ ЛОГИРОВАНИЯ ===
    EnvVar("log_level", "LOG_LEVEL", default="INFO"),
    EnvVar("debug", "DEBUG", parser=parse_bool),
)


@dataclass(frozen=True)
class Environment:
    """
    Настройки сервиса, прочитанные из окружения при старте
    """
    db_username: str
    db_password: str
    db_host: str
    db_port: str
    db_name: str
    port: int
    host: str = "0.0.0.0"
    log_level: str = "INFO"
    debug: bool = False


def load_environment(environ: Optional[Mapping[str, str]] = None) -> Environment:
    """
    Прочитать настройки сервиса.

    Raises:
        EnvError: Не задана обязательная переменная или значение
            не соответствует типу поля
    """
    return Environment(**read_env_vars(ENVIRONMENT_VARIABLES, environ))


def setup_logging(environment: Optional[Environment] = None):
    """
    Настройка логирования приложения
    """
    level_name = environment.log_level if environment else "INFO"
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.INFO),
        format=LOG_FORMAT
    )

    # Настройка логгера для uvicorn (если нужно)
    if environment and environment.debug:
        logging.getLogger("uvicorn").setLevel(logging.DEBUG)
        logging.getLogger("uvicorn.access").setLevel(logging.DEBUG)


def get_app_config(environment: Optional[Environment] = None) -> dict:
    """
    Получить конфигурацию FastAPI приложения
    """
    return {
        "title": APP_NAME,
        "description": APP_DESCRIPTION,
        "version": APP_VERSION,
        "debug": bool(environment and environment.debug)
    }
