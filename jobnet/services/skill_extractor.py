from __future__ import annotations

import random
from typing import Sequence

from jobnet.data.skills import COMMON_SKILLS


DEFAULT_LIMIT = 5
FALLBACK_SAMPLE_SIZE = 3


def extract_skills(
    text: str | None,
    *,
    vocabulary: Sequence[str] = COMMON_SKILLS,
    limit: int = DEFAULT_LIMIT,
    fallback: bool = False,
    rng: random.Random | None = None,
) -> list[str]:
    """Return vocabulary skills mentioned in ``text``.

    Matching is a case-insensitive substring scan in vocabulary order, so
    "Java" is also reported for text that only says "JavaScript". When nothing
    matches the result is empty unless ``fallback`` asks for a random sample
    of the vocabulary instead.
    """

    if limit < 1:
        return []

    haystack = (text or "").lower()
    found = [skill for skill in vocabulary if skill and skill.lower() in haystack] if haystack.strip() else []

    if not found and fallback and vocabulary:
        source = rng or random.Random()
        found = source.sample(list(vocabulary), min(FALLBACK_SAMPLE_SIZE, len(vocabulary)))

    return found[:limit]
