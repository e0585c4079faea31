"""
Управление комментариями.

Этот модуль содержит:
- models: модель базы данных (SQLAlchemy)
- schemas: схемы API (Pydantic)
- crud: операции с БД (CRUD - Create, Read, Update, Delete)
- routes: маршруты для работы с комментариями (/comment, /comment/{id})
"""

from .models import Comment
from .crud import CommentService, CommentError, CommentNotFoundError, get_comment_service
from .routes import comment_router

__all__ = [
    "Comment",
    "CommentService",
    "CommentError",
    "CommentNotFoundError",
    "get_comment_service",
    "comment_router"
]
