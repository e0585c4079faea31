from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import func
from .models import Comment
from .schemas import CommentIn
import logging

# Настройка логирования
logger = logging.getLogger(__name__)

# Максимальный id, который помещается в BIGINT
MAX_COMMENT_ID = 2 ** 63 - 1


class CommentError(Exception):
    """Базовая ошибка сервиса комментариев"""


class CommentNotFoundError(CommentError):
    def __init__(self, comment_id: int):
        self.comment_id = comment_id
        super().__init__(f"comment {comment_id} not found")


class CommentService:
    def __init__(self, db: Session):
        self.db = db

    def _active(self):
        # Мягко удаленные комментарии не видны ни одной операции
        return self.db.query(Comment).filter(Comment.deleted_at.is_(None))

    def get_all_comments(self) -> list[Comment]:
        """Получить все комментарии"""
        return self._active().order_by(Comment.id).all()

    def get_comment(self, comment_id: int) -> Comment:
        """Получить комментарий по id"""
        if comment_id > MAX_COMMENT_ID:
            raise CommentNotFoundError(comment_id)
        comment = self._active().filter(Comment.id == comment_id).first()
        if comment is None:
            raise CommentNotFoundError(comment_id)
        return comment

    def post_comment(self, data: CommentIn) -> Comment:
        """Создать новый комментарий"""
        try:
            comment = Comment(
                slug=data.slug,
                body=data.body,
                author=data.author
            )
            self.db.add(comment)
            self.db.commit()
            self.db.refresh(comment)
            logger.info(f"Created comment: {comment.id}")
            return comment
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error creating comment: {e}")
            raise

    def update_comment(self, comment_id: int, data: CommentIn) -> Comment:
        """Перезаписать поля комментария"""
        comment = self.get_comment(comment_id)
        try:
            comment.slug = data.slug
            comment.body = data.body
            comment.author = data.author
            comment.updated_at = func.now()
            self.db.commit()
            self.db.refresh(comment)
            logger.info(f"Updated comment: {comment_id}")
            return comment
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating comment {comment_id}: {e}")
            raise

    def delete_comment(self, comment_id: int):
        """Пометить комментарий удаленным"""
        comment = self.get_comment(comment_id)
        try:
            comment.deleted_at = func.now()
            self.db.commit()
            logger.info(f"Deleted comment: {comment_id}")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error deleting comment {comment_id}: {e}")
            raise


def get_comment_service(db: Session) -> CommentService:
    return CommentService(db)
