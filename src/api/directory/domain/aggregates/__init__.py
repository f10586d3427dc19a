"""Aggregates for the directory bounded context."""

from directory.domain.aggregates.user import DEFAULT_AVATAR, User

__all__ = ["DEFAULT_AVATAR", "User"]
