import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from comment_api.core.database import Base, migrate_db, new_database, new_session_factory
from comment_api.features.comment.models import Comment
from comment_api.main import create_app

# Настройка тестовой базы данных
SQLALCHEMY_DATABASE_URL = "sqlite://"
engine = new_database(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool
)
TestingSessionLocal = new_session_factory(engine)


@pytest.fixture(scope="function")
def db_session():
    """Фикстура для создания тестовой сессии БД"""
    # Очищаем и создаем таблицы заново
    Base.metadata.drop_all(bind=engine)
    migrate_db(engine)

    session = TestingSessionLocal()

    yield session

    # Очищаем после теста
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def app(db_session):
    return create_app(engine)


@pytest.fixture(scope="function")
def client(app):
    """Фикстура для тестового клиента FastAPI"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_comment_data():
    """Фикстура с тестовыми данными комментария"""
    return {
        "slug": "hello-world",
        "body": "First comment",
        "author": "alice"
    }


@pytest.fixture
def created_comment(db_session, sample_comment_data):
    """Фикстура с созданным комментарием в БД"""
    comment = Comment(**sample_comment_data)
    db_session.add(comment)
    db_session.commit()
    db_session.refresh(comment)
    return comment


@pytest.fixture
def multiple_comments(db_session):
    """Фикстура с несколькими комментариями в БД"""
    comments_data = [
        {"slug": "first", "body": "one", "author": "alice"},
        {"slug": "second", "body": "two", "author": "bob"},
        {"slug": "third", "body": "three", "author": "carol"},
    ]

    comments = []
    for comment_data in comments_data:
        comment = Comment(**comment_data)
        db_session.add(comment)
        comments.append(comment)

    db_session.commit()
    for comment in comments:
        db_session.refresh(comment)

    return comments
