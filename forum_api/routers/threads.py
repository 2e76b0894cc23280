from __future__ import annotations

from fastapi import APIRouter, Form

from forum_api.core.responses import send_json
from forum_api.core.validation import Rule, validate
from forum_api.services.thread_service import ThreadService

router = APIRouter(prefix="/v1", tags=["threads"])
service = ThreadService()

THREAD_CREATE = (
    Rule("subject", "Subject"),
    Rule("sub_cat_id", "subcategory Id", kind="int"),
    Rule("content", "content"),
)
THREAD_GET = (
    Rule("thread_id", "Thread Id", kind="int", location="path"),
    Rule("page_num", "Page Number", kind="page", location="path", required=False),
)
THREAD_UPDATE = (
    Rule("thread_id", "Thread Id", kind="int"),
    Rule("subject", "Subject"),
)
THREAD_DELETE = (Rule("thread_id", "Thread Id", kind="int"),)

POST_CREATE = (
    Rule("content", "Content"),
    Rule("thread_id", "Thread Id", kind="int"),
)
POST_GET = (Rule("post_id", "Post Id", kind="int", location="path"),)
POST_UPDATE = (
    Rule("post_id", "Post Id", kind="int"),
    Rule("thread_id", "Thread Id", kind="int"),
    Rule("content", "Content"),
)
POST_DELETE = (
    Rule("post_id", "Post Id", kind="int"),
    Rule("thread_id", "Thread Id", kind="int"),
)


@router.get("/AllNewThreads")
def all_new_threads():
    return send_json(service.latest_threads())


# -------------------------- threads --------------------------
@router.post("/pages/thread")
def add_thread(
    subject: str | None = Form(None),
    sub_cat_id: str | None = Form(None),
    content: str | None = Form(None),
):
    values = validate(THREAD_CREATE, body={"subject": subject, "sub_cat_id": sub_cat_id, "content": content})
    return send_json(service.add_thread(values["subject"], values["sub_cat_id"], values["content"]))


@router.get("/pages/thread/{thread_id}")
@router.get("/pages/thread/{thread_id}/{page_num}")
def get_thread(thread_id: str, page_num: str | None = None):
    values = validate(THREAD_GET, path={"thread_id": thread_id, "page_num": page_num})
    return send_json(service.get_thread(values["thread_id"], values["page_num"]))


@router.put("/pages/thread")
def update_thread(thread_id: str | None = Form(None), subject: str | None = Form(None)):
    values = validate(THREAD_UPDATE, body={"thread_id": thread_id, "subject": subject})
    return send_json(service.update_thread(values["thread_id"], values["subject"]))


@router.delete("/pages/thread")
def delete_thread(thread_id: str | None = Form(None)):
    values = validate(THREAD_DELETE, body={"thread_id": thread_id})
    return send_json(service.delete_thread(values["thread_id"]))


# -------------------------- posts --------------------------
@router.post("/pages/post")
def add_post(content: str | None = Form(None), thread_id: str | None = Form(None)):
    values = validate(POST_CREATE, body={"content": content, "thread_id": thread_id})
    return send_json(service.add_post(values["content"], values["thread_id"]))


@router.get("/pages/post/{post_id}")
def get_post(post_id: str):
    values = validate(POST_GET, path={"post_id": post_id})
    return send_json(service.get_post(values["post_id"]))


@router.put("/pages/post")
def update_post(
    post_id: str | None = Form(None),
    thread_id: str | None = Form(None),
    content: str | None = Form(None),
):
    values = validate(POST_UPDATE, body={"post_id": post_id, "thread_id": thread_id, "content": content})
    return send_json(service.update_post(values["post_id"], values["thread_id"], values["content"]))


@router.delete("/pages/post")
def delete_post(post_id: str | None = Form(None), thread_id: str | None = Form(None)):
    values = validate(POST_DELETE, body={"post_id": post_id, "thread_id": thread_id})
    return send_json(service.delete_post(values["post_id"], values["thread_id"]))
