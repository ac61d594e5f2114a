"""Conversation identity for two-party message threads."""
from __future__ import annotations

from typing import Any


SEPARATOR = "_"


def conversation_id(first_user_id: Any, second_user_id: Any) -> str:
    """Return the key shared by every message between two users.

    The ids are compared as strings, so the result does not depend on argument
    order and can be recomputed from either side without a lookup. Passing the
    same id twice yields ``"<id>_<id>"``; callers reject self-messaging before
    getting here.
    """

    low, high = sorted((str(first_user_id), str(second_user_id)))
    return f"{low}{SEPARATOR}{high}"


def participants(conversation_key: str) -> tuple[str, str]:
    first, sep, second = conversation_key.partition(SEPARATOR)
    if not sep or not first or not second:
        raise ValueError(f"malformed conversation id: {conversation_key!r}")
    return first, second


def other_participant(conversation_key: str, viewer_id: Any) -> str:
    first, second = participants(conversation_key)
    return second if first == str(viewer_id) else first
