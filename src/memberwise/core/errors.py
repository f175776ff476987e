"""Errors raised while building comparers or loading settings."""
from __future__ import annotations

from typing import Any


class MemberwiseError(Exception):
    """Base class for memberwise errors."""


class UnsupportedMemberError(MemberwiseError):
    """A member's declared type could not be placed into a category."""

    def __init__(
        self,
        reason: str,
        *,
        owner: type | None = None,
        member: str | None = None,
        annotation: Any = None,
    ) -> None:
        self.reason = reason
        self.owner = owner
        self.member = member
        self.annotation = annotation
        where = ""
        if owner is not None:
            where = owner.__qualname__ if member is None else f"{owner.__qualname__}.{member}"
        super().__init__(f"{where}: {reason}" if where else reason)


class ConfigError(MemberwiseError):
    """Settings value is missing, malformed or out of range."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        self.message = message
        super().__init__(f"[{key}] {message}")
