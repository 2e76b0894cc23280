"""SQLAlchemy models for the forum hierarchy and user accounts."""
from __future__ import annotations

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)

from .session import Base


class SerializerMixin:
    """Plain-dict view of a row, column by column."""

    def to_dict(self, *, exclude: tuple[str, ...] = ()) -> dict:
        return {
            column.name: getattr(self, column.name)
            for column in self.__table__.columns
            if column.name not in exclude
        }


class Subpage(SerializerMixin, Base):
    __tablename__ = "subpage"

    page_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    visiter_count = Column(Integer, default=0, server_default="0", nullable=False)
    created = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class Category(SerializerMixin, Base):
    __tablename__ = "category"

    cat_id = Column(Integer, primary_key=True, autoincrement=True)
    subject = Column(String(255), nullable=False)
    created = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    page_id = Column(Integer, ForeignKey("subpage.page_id", ondelete="CASCADE"), nullable=False, index=True)


class Subcategory(SerializerMixin, Base):
    __tablename__ = "subcategory"

    sub_cat_id = Column(Integer, primary_key=True, autoincrement=True)
    subject = Column(String(255), nullable=False)
    created = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    main_cat_id = Column(Integer, ForeignKey("category.cat_id", ondelete="CASCADE"), nullable=False, index=True)


class Thread(SerializerMixin, Base):
    __tablename__ = "thread"

    thread_id = Column(Integer, primary_key=True, autoincrement=True)
    subject = Column(String(255), nullable=False)
    sub_cat_id = Column(Integer, ForeignKey("subcategory.sub_cat_id", ondelete="CASCADE"), nullable=False, index=True)


class Post(SerializerMixin, Base):
    __tablename__ = "post"

    post_id = Column(Integer, primary_key=True, autoincrement=True)
    content = Column(Text, nullable=False)
    thread_id = Column(Integer, ForeignKey("thread.thread_id", ondelete="CASCADE"), nullable=False, index=True)


class UserAccount(SerializerMixin, Base):
    __tablename__ = "user_account"

    user_account_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(Text, nullable=False)
    created = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
