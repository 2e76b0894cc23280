from __future__ import annotations

from fastapi import APIRouter, Form

from forum_api.core.responses import send_json
from forum_api.core.validation import Rule, validate
from forum_api.services.user_service import UserService

router = APIRouter(prefix="/v1/user", tags=["users"])
service = UserService()

USER_CREATE = (
    Rule("name", "Name"),
    Rule("email", "Email", kind="email"),
    Rule("password", "Password", kind="password"),
    Rule("confirmation", "Confirmation", kind="any"),
)
USER_LOOKUP = (Rule("user_account_id", "User Account Id", kind="int", location="path"),)


@router.post("/")
def create_user(
    name: str | None = Form(None),
    email: str | None = Form(None),
    password: str | None = Form(None),
    confirmation: str | None = Form(None),
):
    values = validate(
        USER_CREATE,
        body={"name": name, "email": email, "password": password, "confirmation": confirmation},
    )
    return send_json(
        service.create_user(values["name"], values["email"], values["password"], values["confirmation"])
    )


@router.get("/{user_account_id}")
def get_user(user_account_id: str):
    values = validate(USER_LOOKUP, path={"user_account_id": user_account_id})
    return send_json(service.get_user(values["user_account_id"]))


@router.delete("/{user_account_id}")
def delete_user(user_account_id: str):
    values = validate(USER_LOOKUP, path={"user_account_id": user_account_id})
    return send_json(service.delete_user(values["user_account_id"]))
