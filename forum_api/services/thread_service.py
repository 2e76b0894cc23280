"""Thread and post use cases."""
from __future__ import annotations

import logging
from typing import Optional

from forum_api.core.config import get_settings
from forum_api.repositories.sql_repository import SQLRepository
from forum_api.services.errors import InsertFailedError, NotFoundError, insert_guard

logger = logging.getLogger(__name__)


class ThreadService:
    def __init__(self) -> None:
        self.repository = SQLRepository()

    # -------------------------- threads --------------------------
    def add_thread(self, subject: str, sub_cat_id: int, content: str) -> dict:
        """Create a thread together with its first post; neither exists without the other."""
        with insert_guard("thread"):
            thread, post = self.repository.create_thread_with_post(subject, sub_cat_id, content)
        if thread.thread_id is None or post.post_id is None:
            raise InsertFailedError("Unable to create a thread")
        logger.info("Thread %s created in subcategory %s with post %s", thread.thread_id, sub_cat_id, post.post_id)
        return {
            "thread": {"thread_id": thread.thread_id, "subject": thread.subject},
            "post": {"post_id": post.post_id, "content": post.content},
        }

    def get_thread(self, thread_id: int, page_num: Optional[int] = None) -> dict:
        view = self.repository.get_thread_view(thread_id, page_num=page_num, page_size=get_settings().page_size)
        if view is None:
            raise NotFoundError(f"No thread with thread_id: {thread_id}")
        result = view["thread"].to_dict()
        result["posts"] = [p.to_dict() for p in view["posts"]]
        return result

    def latest_threads(self) -> list[dict]:
        limit = get_settings().new_threads_limit
        return [t.to_dict() for t in self.repository.list_new_threads(limit)]

    def update_thread(self, thread_id: int, subject: str) -> dict:
        if not self.repository.update_thread(thread_id, subject):
            raise NotFoundError(f"No thread with thread_id: {thread_id}")
        logger.info("Thread %s subject updated", thread_id)
        return {"thread_id": thread_id}

    def delete_thread(self, thread_id: int) -> dict:
        if not self.repository.delete_thread(thread_id):
            raise NotFoundError(f"No thread with thread_id: {thread_id}")
        logger.info("Thread %s deleted", thread_id)
        return {"thread_id": thread_id}

    # -------------------------- posts --------------------------
    def add_post(self, content: str, thread_id: int) -> dict:
        with insert_guard("post"):
            entity = self.repository.create_post(content, thread_id)
        if entity.post_id is None:
            raise InsertFailedError("Unable to create the post")
        logger.info("Post %s created in thread %s", entity.post_id, thread_id)
        return {"post_id": entity.post_id, "content": entity.content, "thread_id": entity.thread_id}

    def get_post(self, post_id: int) -> dict:
        entity = self.repository.get_post(post_id)
        if entity is None:
            raise NotFoundError(f"No post with post_id: {post_id}")
        return entity.to_dict()

    def update_post(self, post_id: int, thread_id: int, content: str) -> dict:
        # Both keys must match the same row.
        if not self.repository.update_post(post_id, thread_id, content):
            raise NotFoundError(f"No post with post_id {post_id} and thread_id: {thread_id}")
        logger.info("Contents of post %s of thread %s updated", post_id, thread_id)
        return {"post_id": post_id, "thread_id": thread_id}

    def delete_post(self, post_id: int, thread_id: int) -> dict:
        if not self.repository.delete_post(post_id, thread_id):
            raise NotFoundError(f"No post with post_id {post_id} and thread_id: {thread_id}")
        logger.info("Post %s of thread %s deleted", post_id, thread_id)
        return {"post_id": post_id, "thread_id": thread_id}
