"""
Ядро приложения - настройки и инфраструктура.

Этот модуль содержит основные компоненты приложения:
- config: настройки приложения и переменные окружения
- database: подключение к базе данных и миграция схемы
- middleware: цепочка middleware и обработчики исключений
"""

from .config import Environment, load_environment, setup_logging, get_app_config
from .database import Base, DatabaseError, get_db, migrate_db, new_database
from .middleware import create_stack, log_requests, setup_exception_handlers

__all__ = [
    "Environment",
    "load_environment",
    "setup_logging",
    "get_app_config",
    "Base",
    "DatabaseError",
    "get_db",
    "migrate_db",
    "new_database",
    "create_stack",
    "log_requests",
    "setup_exception_handlers",
]
