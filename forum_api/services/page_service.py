"""Subpage, category and subcategory use cases."""
from __future__ import annotations

import logging
from typing import Optional

from forum_api.core.config import get_settings
from forum_api.repositories.sql_repository import SQLRepository
from forum_api.services.errors import InsertFailedError, NotFoundError, insert_guard

logger = logging.getLogger(__name__)


class PageService:
    """Create/read/update/delete for the top three levels of the hierarchy."""

    def __init__(self) -> None:
        self.repository = SQLRepository()

    # -------------------------- subpages --------------------------
    def add_page(self, title: str, description: Optional[str] = None) -> dict:
        with insert_guard("subpage"):
            entity = self.repository.create_subpage(title, description)
        if entity.page_id is None:
            raise InsertFailedError("Unable to insert the subpage")
        logger.info("Subpage %s created with page_id %s", entity.title, entity.page_id)
        return {"page_id": entity.page_id, "title": entity.title}

    def get_page(self, title: str) -> dict:
        tree = self.repository.get_subpage_tree(title)
        if tree is None:
            logger.warning("No subpage titled %r", title)
            raise NotFoundError(f"No Subpage with title: {title}")
        return {
            "subpage": tree["subpage"].to_dict(),
            "category": [c.to_dict() for c in tree["categories"]],
            "sub_category": [[s.to_dict() for s in group] for group in tree["subcategories"]],
        }

    def update_page(self, page_id: int, title: str, description: Optional[str] = None) -> dict:
        if not self.repository.update_subpage(page_id, title, description):
            raise NotFoundError(f"No Subpage with page_id: {page_id}")
        logger.info("Subpage %s updated", page_id)
        return {"page_id": page_id}

    def delete_page(self, title: str) -> dict:
        if not self.repository.delete_subpage_by_title(title):
            raise NotFoundError(f"No Subpage with title: {title}")
        logger.info("Subpage %r deleted", title)
        return {"title": title}

    # -------------------------- categories --------------------------
    def add_category(self, subject: str, page_id: int) -> dict:
        with insert_guard("category"):
            entity = self.repository.create_category(subject, page_id)
        if entity.cat_id is None:
            raise InsertFailedError("Unable to insert the category")
        logger.info("Category %s created under subpage %s", entity.cat_id, page_id)
        return {"cat_id": entity.cat_id, "subject": entity.subject}

    def list_categories(self, page_id: int) -> list[dict]:
        return [c.to_dict() for c in self.repository.list_categories(page_id)]

    def update_category(self, cat_id: int, subject: str) -> dict:
        if not self.repository.update_category(cat_id, subject):
            raise NotFoundError(f"No Category with cat_id: {cat_id}")
        logger.info("Category %s updated", cat_id)
        return {"cat_id": cat_id}

    def delete_category(self, cat_id: int) -> dict:
        if not self.repository.delete_category(cat_id):
            raise NotFoundError(f"No Category with cat_id: {cat_id}")
        logger.info("Category %s deleted", cat_id)
        return {"cat_id": cat_id}

    # -------------------------- subcategories --------------------------
    def add_subcategory(self, subject: str, main_cat_id: int) -> dict:
        with insert_guard("subcategory"):
            entity = self.repository.create_subcategory(subject, main_cat_id)
        if entity.sub_cat_id is None:
            raise InsertFailedError("Unable to insert the subcategory")
        logger.info("Subcategory %s created under category %s", entity.sub_cat_id, main_cat_id)
        return {"sub_cat_id": entity.sub_cat_id, "subject": entity.subject}

    def get_subcategory(self, sub_cat_id: int, page_num: Optional[int] = None) -> dict:
        view = self.repository.get_subcategory_view(
            sub_cat_id, page_num=page_num, page_size=get_settings().page_size
        )
        if view is None:
            raise NotFoundError(f"No Subcategory with sub_cat_id: {sub_cat_id}")
        category = view["category"]
        return {
            "subCategory": view["subcategory"].to_dict(),
            "Category": category.to_dict() if category is not None else None,
            "Threads": [t.to_dict() for t in view["threads"]],
        }

    def update_subcategory(self, sub_cat_id: int, subject: str) -> dict:
        if not self.repository.update_subcategory(sub_cat_id, subject):
            raise NotFoundError(f"No Subcategory with sub_cat_id: {sub_cat_id}")
        logger.info("Subcategory %s updated", sub_cat_id)
        return {"sub_cat_id": sub_cat_id}

    def delete_subcategory(self, sub_cat_id: int) -> dict:
        if not self.repository.delete_subcategory(sub_cat_id):
            raise NotFoundError(f"No Subcategory with sub_cat_id: {sub_cat_id}")
        logger.info("Subcategory %s deleted", sub_cat_id)
        return {"sub_cat_id": sub_cat_id}
