"""Helpers for flattening nested Jira field objects."""

from typing import Any

UNASSIGNED = "Unassigned"
UNKNOWN_USER = "Unknown"
NO_PRIORITY = "None"


def display_name(user: dict[str, Any] | None, default: str) -> str:
    """Return a user's displayName, or ``default`` for a missing user."""
    if not user:
        return default
    return user.get("displayName") or default


def field_name(value: dict[str, Any] | None, default: str | None = None) -> str | None:
    """Return the ``name`` of a status/priority/issuetype object."""
    if not value:
        return default
    return value.get("name") or default
