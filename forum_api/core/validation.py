"""
Declarative request validation.

Every endpoint declares a tuple of ``Rule`` objects; ``validate`` checks all
of them against the raw values collected from the request and either returns
the cleaned values or raises ``ValidationError`` with one entry per failed
field. Nothing touches the database before validation succeeds.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

TEXT_PATTERN = re.compile(r"[a-zA-Z0-9 ]+")
INT_PATTERN = re.compile(r"[+-]?[0-9]+")
# Identifier columns are 32-bit INTEGER on PostgreSQL
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
EMAIL_MAX_LENGTH = 255
PASSWORD_MIN_LENGTH = 8

KINDS = {"text", "int", "page", "email", "password", "any"}
LOCATIONS = {"body", "path", "query"}


class ValidationError(Exception):
    """Raised when one or more request fields fail their rules."""

    def __init__(self, errors: list[dict]):
        super().__init__("Invalid request parameters")
        self.message = "Invalid request parameters"
        self.errors = errors


@dataclass(frozen=True)
class Rule:
    name: str
    label: str
    kind: str = "text"
    location: str = "body"
    required: bool = True

    def __post_init__(self) -> None:
        if self.kind not in KINDS:
            raise ValueError(f"Unknown rule kind: {self.kind}")
        if self.location not in LOCATIONS:
            raise ValueError(f"Unknown rule location: {self.location}")

    @property
    def missing_message(self) -> str:
        return f"Missing {self.label} Parameter"

    @property
    def invalid_message(self) -> str:
        return f"Invalid {self.label} Parameter"

    def clean(self, value: Any) -> Any:
        """Return the converted value or raise ValueError with the rule's message."""
        if self.kind == "any":
            return value
        text = str(value)
        if self.kind == "text":
            if not TEXT_PATTERN.fullmatch(text):
                raise ValueError(self.invalid_message)
            return text
        if self.kind in ("int", "page"):
            if not INT_PATTERN.fullmatch(text.strip()):
                raise ValueError(self.invalid_message)
            number = int(text)
            if not INT_MIN <= number <= INT_MAX:
                raise ValueError(self.invalid_message)
            if self.kind == "page" and number < 1:
                raise ValueError(self.invalid_message)
            return number
        if self.kind == "email":
            candidate = text.strip()
            if len(candidate) > EMAIL_MAX_LENGTH or not EMAIL_PATTERN.fullmatch(candidate):
                raise ValueError(self.invalid_message)
            return candidate.lower()
        if len(text) < PASSWORD_MIN_LENGTH:
            raise ValueError(self.invalid_message)
        return text


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def validate(rules: Sequence[Rule], **sources: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Check ``rules`` against the given sources (``body=``, ``path=``, ``query=``).

    Each field stops at its first failure but every field is checked, so the
    caller receives the complete list of problems at once. Optional fields
    that are absent come back as None.
    """
    cleaned: dict[str, Any] = {}
    errors: list[dict] = []
    for rule in rules:
        values = sources.get(rule.location) or {}
        raw = values.get(rule.name)
        if _is_missing(raw):
            if rule.required:
                errors.append(
                    {"location": rule.location, "param": rule.name, "msg": rule.missing_message, "value": raw}
                )
            else:
                cleaned[rule.name] = None
            continue
        try:
            cleaned[rule.name] = rule.clean(raw)
        except ValueError as exc:
            errors.append({"location": rule.location, "param": rule.name, "msg": str(exc), "value": raw})
    if errors:
        raise ValidationError(errors)
    return cleaned
