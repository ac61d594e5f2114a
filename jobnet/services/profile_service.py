# profile_service.py
import logging
from typing import Any, Iterable

from sqlalchemy.orm import Session

from jobnet.models.user import User


logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("name", "bio", "linkedin_url", "wallet_address", "profile_image")


def merge_skills(existing: Iterable[str] | None, additions: Iterable[str] | None) -> list[str]:
    """Append each new skill unless a case-insensitive match is already present.

    Existing entries are kept untouched, including their casing and order.
    """

    merged: list[str] = list(existing or [])
    seen = {skill.strip().lower() for skill in merged if skill}
    for skill in additions or []:
        value = (skill or "").strip()
        if not value:
            continue
        key = value.lower()
        if key in seen:
            continue
        seen.add(key)
        merged.append(value)
    return merged


def update_profile(db: Session, user: User, changes: dict[str, Any]) -> User:
    for field_name in PROFILE_FIELDS:
        if field_name not in changes:
            continue
        value = changes[field_name]
        # A blank name is ignored; the other fields may be cleared.
        if field_name == "name" and not value:
            continue
        if value is None:
            value = ""
        setattr(user, field_name, value)

    additions = changes.get("skills")
    if additions is not None:
        existing = list(user.skills or [])
        # Reassign so the JSON column is flagged dirty.
        user.skills = merge_skills(existing, additions)
        logger.info(
            "profile.skills_merged user_id=%s existing=%s new=%s total=%s",
            user.id,
            len(existing),
            len(additions),
            len(user.skills),
        )

    db.add(user)
    db.commit()
    db.refresh(user)
    return user
