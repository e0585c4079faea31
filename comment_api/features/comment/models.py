from sqlalchemy import BigInteger, Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from ...core.database import Base


class Comment(Base):
    __tablename__ = "comments"

    # BIGINT в PostgreSQL, INTEGER в SQLite (иначе нет автоинкремента)
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True)
    slug = Column(String(255), nullable=False, default="")
    body = Column(Text, nullable=False, default="")
    author = Column(String(255), nullable=False, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)  # Мягкое удаление

    def __repr__(self):
        return f"<Comment {self.id} - {self.slug}>"
