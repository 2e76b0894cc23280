"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import delete, func, select, update

from forum_api.db.models import (
    Category,
    Post,
    Subcategory,
    Subpage,
    Thread,
    UserAccount,
)
from forum_api.db.session import get_session

# The session is discarded right after each bulk statement.
_NO_SYNC = {"synchronize_session": False}


def _page_bounds(page_num: int | None, page_size: int) -> tuple[int | None, int]:
    if not page_num:
        return None, 0
    return page_size, (page_num - 1) * page_size


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session; one session per call."""

    # -------------------------- subpages --------------------------
    def create_subpage(self, title: str, description: str | None = None) -> Subpage:
        entity = Subpage(title=title, description=description, visiter_count=0)
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def get_subpage_by_title(self, title: str) -> Optional[Subpage]:
        with get_session() as session:
            stmt = (
                select(Subpage)
                .where(func.lower(Subpage.title) == func.lower(title))
                .order_by(Subpage.page_id)
                .limit(1)
            )
            return session.execute(stmt).scalar_one_or_none()

    def get_subpage_tree(self, title: str) -> Optional[dict]:
        """Subpage by title, its categories, then each category's subcategories."""
        with get_session() as session:
            stmt = (
                select(Subpage)
                .where(func.lower(Subpage.title) == func.lower(title))
                .order_by(Subpage.page_id)
                .limit(1)
            )
            subpage = session.execute(stmt).scalar_one_or_none()
            if subpage is None:
                return None
            categories = session.execute(
                select(Category).where(Category.page_id == subpage.page_id).order_by(Category.cat_id)
            ).scalars().all()
            subcategories = []
            for category in categories:
                rows = session.execute(
                    select(Subcategory)
                    .where(Subcategory.main_cat_id == category.cat_id)
                    .order_by(Subcategory.sub_cat_id)
                ).scalars().all()
                subcategories.append(rows)
            return {"subpage": subpage, "categories": categories, "subcategories": subcategories}

    def update_subpage(self, page_id: int, title: str, description: str | None = None) -> int:
        values = {"title": title}
        if description is not None:
            values["description"] = description
        with get_session() as session:
            stmt = update(Subpage).where(Subpage.page_id == page_id).values(**values).execution_options(**_NO_SYNC)
            result = session.execute(stmt)
            session.commit()
            return result.rowcount

    def delete_subpage_by_title(self, title: str) -> int:
        with get_session() as session:
            stmt = (
                delete(Subpage)
                .where(func.lower(Subpage.title) == func.lower(title))
                .execution_options(**_NO_SYNC)
            )
            result = session.execute(stmt)
            session.commit()
            return result.rowcount

    # -------------------------- categories --------------------------
    def create_category(self, subject: str, page_id: int) -> Category:
        entity = Category(subject=subject, page_id=page_id)
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def list_categories(self, page_id: int) -> list[Category]:
        with get_session() as session:
            stmt = select(Category).where(Category.page_id == page_id).order_by(Category.cat_id)
            return session.execute(stmt).scalars().all()

    def update_category(self, cat_id: int, subject: str) -> int:
        with get_session() as session:
            stmt = update(Category).where(Category.cat_id == cat_id).values(subject=subject).execution_options(**_NO_SYNC)
            result = session.execute(stmt)
            session.commit()
            return result.rowcount

    def delete_category(self, cat_id: int) -> int:
        with get_session() as session:
            result = session.execute(delete(Category).where(Category.cat_id == cat_id).execution_options(**_NO_SYNC))
            session.commit()
            return result.rowcount

    # -------------------------- subcategories --------------------------
    def create_subcategory(self, subject: str, main_cat_id: int) -> Subcategory:
        entity = Subcategory(subject=subject, main_cat_id=main_cat_id)
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def get_subcategory_view(self, sub_cat_id: int, *, page_num: int | None = None, page_size: int = 20) -> Optional[dict]:
        """Subcategory, its parent category and its threads (one page of them when page_num is set)."""
        limit, offset = _page_bounds(page_num, page_size)
        with get_session() as session:
            subcategory = session.get(Subcategory, sub_cat_id)
            if subcategory is None:
                return None
            category = session.get(Category, subcategory.main_cat_id)
            stmt = select(Thread).where(Thread.sub_cat_id == sub_cat_id).order_by(Thread.thread_id).offset(offset)
            if limit is not None:
                stmt = stmt.limit(limit)
            threads = session.execute(stmt).scalars().all()
            return {"subcategory": subcategory, "category": category, "threads": threads}

    def update_subcategory(self, sub_cat_id: int, subject: str) -> int:
        with get_session() as session:
            stmt = (
                update(Subcategory)
                .where(Subcategory.sub_cat_id == sub_cat_id)
                .values(subject=subject)
                .execution_options(**_NO_SYNC)
            )
            result = session.execute(stmt)
            session.commit()
            return result.rowcount

    def delete_subcategory(self, sub_cat_id: int) -> int:
        with get_session() as session:
            stmt = delete(Subcategory).where(Subcategory.sub_cat_id == sub_cat_id).execution_options(**_NO_SYNC)
            result = session.execute(stmt)
            session.commit()
            return result.rowcount

    # -------------------------- threads --------------------------
    def create_thread_with_post(self, subject: str, sub_cat_id: int, content: str) -> tuple[Thread, Post]:
        """Insert a thread and its first post in one transaction."""
        with get_session() as session:
            thread = Thread(subject=subject, sub_cat_id=sub_cat_id)
            session.add(thread)
            session.flush()
            post = Post(content=content, thread_id=thread.thread_id)
            session.add(post)
            session.commit()
            session.refresh(thread)
            session.refresh(post)
            return thread, post

    def get_thread_view(self, thread_id: int, *, page_num: int | None = None, page_size: int = 20) -> Optional[dict]:
        limit, offset = _page_bounds(page_num, page_size)
        with get_session() as session:
            thread = session.get(Thread, thread_id)
            if thread is None:
                return None
            stmt = select(Post).where(Post.thread_id == thread_id).order_by(Post.post_id).offset(offset)
            if limit is not None:
                stmt = stmt.limit(limit)
            posts = session.execute(stmt).scalars().all()
            return {"thread": thread, "posts": posts}

    def list_new_threads(self, limit: int) -> list[Thread]:
        with get_session() as session:
            stmt = select(Thread).order_by(Thread.thread_id.desc()).limit(limit)
            return session.execute(stmt).scalars().all()

    def update_thread(self, thread_id: int, subject: str) -> int:
        with get_session() as session:
            stmt = update(Thread).where(Thread.thread_id == thread_id).values(subject=subject).execution_options(**_NO_SYNC)
            result = session.execute(stmt)
            session.commit()
            return result.rowcount

    def delete_thread(self, thread_id: int) -> int:
        with get_session() as session:
            result = session.execute(delete(Thread).where(Thread.thread_id == thread_id).execution_options(**_NO_SYNC))
            session.commit()
            return result.rowcount

    # -------------------------- posts --------------------------
    def create_post(self, content: str, thread_id: int) -> Post:
        entity = Post(content=content, thread_id=thread_id)
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def get_post(self, post_id: int) -> Optional[Post]:
        with get_session() as session:
            return session.get(Post, post_id)

    def update_post(self, post_id: int, thread_id: int, content: str) -> int:
        with get_session() as session:
            stmt = (
                update(Post)
                .where(Post.post_id == post_id, Post.thread_id == thread_id)
                .values(content=content)
                .execution_options(**_NO_SYNC)
            )
            result = session.execute(stmt)
            session.commit()
            return result.rowcount

    def delete_post(self, post_id: int, thread_id: int) -> int:
        with get_session() as session:
            stmt = (
                delete(Post)
                .where(Post.post_id == post_id, Post.thread_id == thread_id)
                .execution_options(**_NO_SYNC)
            )
            result = session.execute(stmt)
            session.commit()
            return result.rowcount

    # -------------------------- users --------------------------
    def create_user(self, name: str, email: str, password_hash: str) -> UserAccount:
        entity = UserAccount(name=name, email=email, password=password_hash)
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def get_user(self, user_account_id: int) -> Optional[UserAccount]:
        with get_session() as session:
            return session.get(UserAccount, user_account_id)

    def get_user_by_email(self, email: str) -> Optional[UserAccount]:
        with get_session() as session:
            stmt = select(UserAccount).where(UserAccount.email == email)
            return session.execute(stmt).scalar_one_or_none()

    def delete_user(self, user_account_id: int) -> int:
        with get_session() as session:
            stmt = delete(UserAccount).where(UserAccount.user_account_id == user_account_id).execution_options(**_NO_SYNC)
            result = session.execute(stmt)
            session.commit()
            return result.rowcount
