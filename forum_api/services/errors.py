"""Errors raised by the forum use cases."""
from __future__ import annotations

import logging
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class ForumError(Exception):
    def __init__(
        self,
        message: str,
        code: str = "invalid",
        status_code: int = 400,
        additional_information: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.additional_information = additional_information or {}


class NotFoundError(ForumError):
    """Raised when the targeted row does not exist."""

    def __init__(self, message: str, additional_information: dict | None = None):
        super().__init__(message, "not_found", 404, additional_information)


class InsertFailedError(ForumError):
    """Raised when the store rejects an insert or hands back no identifier."""

    def __init__(self, message: str, additional_information: dict | None = None):
        super().__init__(message, "insert_failed", 400, additional_information)


@contextmanager
def insert_guard(label: str):
    """Turn a store-level rejection of an insert into InsertFailedError."""
    try:
        yield
    except IntegrityError as exc:
        logger.warning("Insert of %s rejected by the store: %s", label, exc.orig)
        raise InsertFailedError(f"Unable to insert the {label}", {"detail": str(exc.orig)}) from exc
