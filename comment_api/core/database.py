import logging
from typing import Iterator, Union

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import Environment

logger = logging.getLogger(__name__)

Base = declarative_base()


class DatabaseError(Exception):
    """Ошибка подключения или миграции базы данных при старте"""


def build_database_url(environment: Environment) -> URL:
    """Собрать URL подключения к PostgreSQL из настроек окружения"""
    return URL.create(
        "postgresql+psycopg2",
        username=environment.db_username,
        password=environment.db_password,
        host=environment.db_host,
        port=int(environment.db_port) if environment.db_port else None,
        database=environment.db_name,
    )


def new_database(target: Union[Environment, URL, str], **engine_kwargs) -> Engine:
    """
    Создать подключение к базе данных и проверить его.

    Args:
        target: Настройки окружения либо готовый URL
        engine_kwargs: Дополнительные параметры create_engine

    Raises:
        DatabaseError: Не удалось подключиться или выполнить ping
    """
    logger.info("Setting up new db connection")

    try:
        url = build_database_url(target) if isinstance(target, Environment) else target
        engine = create_engine(url, **engine_kwargs)
        # Проверяем подключение к БД
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except (SQLAlchemyError, ValueError) as e:
        raise DatabaseError(f"failed to connect to database: {e}") from e

    return engine


def migrate_db(engine: Engine):
    """Синхронизация схемы - создание недостающих таблиц"""
    # Регистрируем модели в метаданных
    from ..features.comment.models import Comment  # noqa: F401

    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        raise DatabaseError(f"failed to migrate database: {e}") from e
    logger.info("Database schema is up to date")


def new_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
