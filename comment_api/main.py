from fastapi import FastAPI, APIRouter
from dotenv import load_dotenv
from sqlalchemy.engine import Engine
from typing import Optional
import logging
import sys

from apiutil import EnvError, unpanic

from .core.config import Environment, load_environment, setup_logging, get_app_config
from .core.database import DatabaseError, migrate_db, new_database, new_session_factory
from .core.middleware import create_stack, log_requests, setup_exception_handlers
from .features.comment.routes import comment_router
from .features.system.routes import system_router

logger = logging.getLogger(__name__)

API_PREFIX = "/v1/api"


def create_app(engine: Engine, environment: Optional[Environment] = None) -> FastAPI:
    """
    Собрать FastAPI приложение поверх готового подключения к БД.
    """
    logger.info("Setting up routes")

    # unpanic - самый внешний, method_not_allowed - самый внутренний
    app = FastAPI(
        **get_app_config(environment),
        middleware=create_stack(unpanic, log_requests)
    )
    app.state.engine = engine
    app.state.session_factory = new_session_factory(engine)

    # Настраиваем обработчики исключений
    setup_exception_handlers(app)

    # Подключаем роутеры
    api_router = APIRouter(prefix=API_PREFIX)
    api_router.include_router(system_router)
    api_router.include_router(comment_router)
    app.include_router(api_router)

    return app


def run():
    """
    Запуск сервиса: окружение -> БД -> миграция -> HTTP сервер.
    """
    # В Docker переменные окружения уже установлены, .env их не перезаписывает
    load_dotenv(override=False)

    try:
        environment = load_environment()
    except EnvError as e:
        setup_logging()
        logger.critical(f"Failed to load environment: {e}")
        sys.exit(1)

    setup_logging(environment)
    logger.info("Setting up comment service")

    try:
        engine = new_database(environment)
        migrate_db(engine)
    except DatabaseError as e:
        logger.critical(f"Error starting up REST API: {e}")
        sys.exit(1)

    app = create_app(engine, environment)

    import uvicorn
    uvicorn.run(app, host=environment.host, port=environment.port)


if __name__ == "__main__":
    run()
