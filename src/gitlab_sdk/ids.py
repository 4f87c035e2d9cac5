"""Helpers for turning caller-supplied identifiers into URL path segments."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from gitlab_sdk.errors import InvalidIDError


def parse_id(value: Any) -> str:
    """Normalize a numeric ID or a full path (``"group/subgroup"``) to a string."""
    # bool is an int subclass but never a valid ID
    if isinstance(value, bool):
        raise InvalidIDError(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    raise InvalidIDError(value)


def path_escape(segment: str) -> str:
    """Escape a value for use as a single path segment.

    Slashes are encoded so namespaced paths stay one segment, and dots are
    encoded so paths ending in ``.json`` or similar are not read as a format.
    """
    return quote(segment, safe="").replace(".", "%2E")


def parse_int_id(value: Any) -> str:
    """Normalize an ID that must be a plain integer, such as a member role ID."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidIDError(value, f"invalid ID type {value!r}, the ID must be an int")
    return str(value)
