from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging
import re

from apiutil import ok, not_ok, write_json

from ...core.database import get_db
from .crud import CommentError, get_comment_service
from .messages import Message
from .schemas import CommentIn, CommentResponse

# Настройка логирования для routes
logger = logging.getLogger(__name__)

# Создаем роутер для комментариев
comment_router = APIRouter(prefix="/comment", tags=["comments"])

_UINT_RE = re.compile(r"[0-9]+")
_MAX_UINT64 = 2 ** 64 - 1


class InvalidIdError(ValueError):
    pass


def parse_id(raw: str) -> int:
    """Разобрать id из пути как беззнаковое 64-битное число"""
    if not _UINT_RE.fullmatch(raw):
        raise InvalidIdError(f"invalid id: {raw!r}")
    value = int(raw)
    if value > _MAX_UINT64:
        raise InvalidIdError(f"id out of range: {raw}")
    return value


def _bad(msg: Message) -> JSONResponse:
    return write_json(status.HTTP_400_BAD_REQUEST, not_ok(msg))


def _ok(msg: Message, data=None) -> JSONResponse:
    return write_json(status.HTTP_200_OK, ok(msg, data))


# === КОММЕНТАРИИ ===

@comment_router.get("")
def get_all_comments(db: Session = Depends(get_db)):
    """
    Получить список всех комментариев.
    """
    try:
        comments = get_comment_service(db).get_all_comments()
    except SQLAlchemyError as e:
        logger.error(f"API: Failed to fetch comments: {e}")
        return _bad(Message.INTERNAL_SERVER_ERROR)

    return _ok(
        Message.FETCH_SUCCESS,
        [CommentResponse.model_validate(comment) for comment in comments]
    )


@comment_router.get("/{comment_id}")
def get_comment(comment_id: str, db: Session = Depends(get_db)):
    """
    Получить комментарий по id.
    """
    try:
        parsed_id = parse_id(comment_id)
    except InvalidIdError as e:
        logger.warning(f"API: {e}")
        return _bad(Message.INVALID_ID)

    try:
        comment = get_comment_service(db).get_comment(parsed_id)
    except (CommentError, SQLAlchemyError) as e:
        logger.error(f"API: Failed to fetch comment {parsed_id}: {e}")
        return _bad(Message.INTERNAL_SERVER_ERROR)

    return _ok(Message.FETCH_SUCCESS, CommentResponse.model_validate(comment))


@comment_router.post("")
def post_comment(comment: CommentIn, db: Session = Depends(get_db)):
    """
    Создать новый комментарий.
    """
    try:
        new_comment = get_comment_service(db).post_comment(comment)
    except SQLAlchemyError as e:
        logger.error(f"API: Failed to create comment: {e}")
        return _bad(Message.BAD_REQUEST)

    return _ok(Message.CREATE_SUCCESS, CommentResponse.model_validate(new_comment))


@comment_router.put("/{comment_id}")
def put_comment(comment_id: str, comment: CommentIn, db: Session = Depends(get_db)):
    """
    Перезаписать комментарий по id.
    """
    try:
        parsed_id = parse_id(comment_id)
    except InvalidIdError as e:
        logger.warning(f"API: {e}")
        return _bad(Message.INVALID_ID)

    try:
        updated = get_comment_service(db).update_comment(parsed_id, comment)
    except (CommentError, SQLAlchemyError) as e:
        logger.error(f"API: Failed to update comment {parsed_id}: {e}")
        return _bad(Message.BAD_REQUEST)

    return _ok(Message.UPDATE_SUCCESS, CommentResponse.model_validate(updated))


@comment_router.delete("/{comment_id}")
def delete_comment(comment_id: str, db: Session = Depends(get_db)):
    """
    Удалить комментарий (мягкое удаление).
    """
    try:
        parsed_id = parse_id(comment_id)
    except InvalidIdError as e:
        logger.warning(f"API: {e}")
        return _bad(Message.INVALID_ID)

    try:
        get_comment_service(db).delete_comment(parsed_id)
    except (CommentError, SQLAlchemyError) as e:
        logger.error(f"API: Failed to delete comment {parsed_id}: {e}")
        return _bad(Message.INTERNAL_SERVER_ERROR)

    return _ok(Message.DELETE_SUCCESS)
