from __future__ import annotations

from fastapi import APIRouter, Form

from forum_api.core.responses import send_json
from forum_api.core.validation import Rule, validate
from forum_api.services.page_service import PageService

router = APIRouter(prefix="/v1/pages", tags=["pages"])
service = PageService()

PAGE_GET = (Rule("page_id", "Page Id", location="path"),)
PAGE_CREATE = (
    Rule("title", "Title"),
    Rule("description", "Description", required=False),
)
PAGE_UPDATE = (
    Rule("page_id", "Page Id", kind="int"),
    Rule("title", "Title"),
    Rule("description", "Description", required=False),
)
PAGE_DELETE = (Rule("page_id", "Subpage Id", location="path"),)

CATEGORY_LIST = (Rule("page_id", "Page Id", kind="int", location="query"),)
CATEGORY_CREATE = (
    Rule("subject", "Subject"),
    Rule("page_id", "Page Id", kind="int"),
)
CATEGORY_UPDATE = (
    Rule("cat_id", "Category Id", kind="int"),
    Rule("subject", "Subject"),
)
CATEGORY_DELETE = (Rule("cat_id", "Category Id", kind="int"),)

SUBCATEGORY_GET = (
    Rule("sub_cat_id", "Subcategory Id", kind="int", location="path"),
    Rule("page_num", "Page Number", kind="page", location="path", required=False),
)
SUBCATEGORY_CREATE = (
    Rule("subject", "Subject"),
    Rule("main_cat_id", "Main Category ID", kind="int"),
)
SUBCATEGORY_UPDATE = (
    Rule("sub_cat_id", "Subcategory Id", kind="int"),
    Rule("subject", "Subject"),
)
SUBCATEGORY_DELETE = (Rule("sub_cat_id", "Subcategory Id", kind="int"),)


# -------------------------- subpages --------------------------
@router.get("/Page/{page_id}")
def get_page(page_id: str):
    """Subpage (matched by title, case-insensitive) with its categories and their subcategories."""
    values = validate(PAGE_GET, path={"page_id": page_id})
    return send_json(service.get_page(values["page_id"]))


@router.post("/Page")
def add_page(title: str | None = Form(None), description: str | None = Form(None)):
    values = validate(PAGE_CREATE, body={"title": title, "description": description})
    return send_json(service.add_page(values["title"], values["description"]))


@router.put("/Page")
def update_page(
    page_id: str | None = Form(None),
    title: str | None = Form(None),
    description: str | None = Form(None),
):
    values = validate(PAGE_UPDATE, body={"page_id": page_id, "title": title, "description": description})
    return send_json(service.update_page(values["page_id"], values["title"], values["description"]))


@router.delete("/Page/{page_id}")
def delete_page(page_id: str):
    values = validate(PAGE_DELETE, path={"page_id": page_id})
    return send_json(service.delete_page(values["page_id"]))


# -------------------------- categories --------------------------
@router.get("/Category")
def list_categories(page_id: str | None = None):
    values = validate(CATEGORY_LIST, query={"page_id": page_id})
    return send_json(service.list_categories(values["page_id"]))


@router.post("/Category")
def add_category(subject: str | None = Form(None), page_id: str | None = Form(None)):
    values = validate(CATEGORY_CREATE, body={"subject": subject, "page_id": page_id})
    return send_json(service.add_category(values["subject"], values["page_id"]))


@router.put("/Category")
def update_category(cat_id: str | None = Form(None), subject: str | None = Form(None)):
    values = validate(CATEGORY_UPDATE, body={"cat_id": cat_id, "subject": subject})
    return send_json(service.update_category(values["cat_id"], values["subject"]))


@router.delete("/Category")
def delete_category(cat_id: str | None = Form(None)):
    values = validate(CATEGORY_DELETE, body={"cat_id": cat_id})
    return send_json(service.delete_category(values["cat_id"]))


# -------------------------- subcategories --------------------------
@router.get("/subCategory/{sub_cat_id}")
@router.get("/subCategory/{sub_cat_id}/{page_num}")
def get_subcategory(sub_cat_id: str, page_num: str | None = None):
    values = validate(SUBCATEGORY_GET, path={"sub_cat_id": sub_cat_id, "page_num": page_num})
    return send_json(service.get_subcategory(values["sub_cat_id"], values["page_num"]))


@router.post("/subCategory")
def add_subcategory(subject: str | None = Form(None), main_cat_id: str | None = Form(None)):
    values = validate(SUBCATEGORY_CREATE, body={"subject": subject, "main_cat_id": main_cat_id})
    return send_json(service.add_subcategory(values["subject"], values["main_cat_id"]))


@router.put("/subCategory")
def update_subcategory(sub_cat_id: str | None = Form(None), subject: str | None = Form(None)):
    values = validate(SUBCATEGORY_UPDATE, body={"sub_cat_id": sub_cat_id, "subject": subject})
    return send_json(service.update_subcategory(values["sub_cat_id"], values["subject"]))


@router.delete("/subCategory")
def delete_subcategory(sub_cat_id: str | None = Form(None)):
    values = validate(SUBCATEGORY_DELETE, body={"sub_cat_id": sub_cat_id})
    return send_json(service.delete_subcategory(values["sub_cat_id"]))
