"""
User account use cases.

Only creation, lookup and deletion exist; sessions and login are out of
scope for this service.
"""
from __future__ import annotations

import logging

from forum_api.core.security import hash_password
from forum_api.core.validation import ValidationError
from forum_api.repositories.sql_repository import SQLRepository
from forum_api.services.errors import InsertFailedError, NotFoundError, insert_guard

logger = logging.getLogger(__name__)

PUBLIC_FIELDS = ("user_account_id", "name", "email")


class UserService:
    def __init__(self) -> None:
        self.repository = SQLRepository()

    def create_user(self, name: str, email: str, password: str, confirmation: str) -> dict:
        if password != confirmation:
            raise ValidationError(
                [{"location": "body", "param": "confirmation", "msg": "Passwords do not match", "value": None}]
            )
        if self.repository.get_user_by_email(email):
            raise InsertFailedError("Unable to create the user", {"email": "already registered"})
        with insert_guard("user"):
            entity = self.repository.create_user(name, email, hash_password(password))
        if entity.user_account_id is None:
            raise InsertFailedError("Unable to create the user")
        logger.info("User account %s created", entity.user_account_id)
        return {field: getattr(entity, field) for field in PUBLIC_FIELDS}

    def get_user(self, user_account_id: int) -> dict:
        entity = self.repository.get_user(user_account_id)
        if entity is None:
            raise NotFoundError(f"No user with user_account_id: {user_account_id}")
        return {field: getattr(entity, field) for field in PUBLIC_FIELDS}

    def delete_user(self, user_account_id: int) -> dict:
        if not self.repository.delete_user(user_account_id):
            raise NotFoundError(f"No user with user_account_id: {user_account_id}")
        logger.info("User account %s deleted", user_account_id)
        return {"user_account_id": user_account_id}
