from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Sequence

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity


SKILL_WEIGHT = 0.6
EXPERIENCE_WEIGHT = 0.4

EXPERIENCE_RANDOM_RANGE = (60.0, 100.0)
CULTURE_RANDOM_RANGE = (70.0, 100.0)

GENERIC_RECOMMENDATIONS = (
    "Highlight relevant project experience",
    "Emphasize transferable skills",
    "Show enthusiasm for the role",
)


class MatchStrategy(str, Enum):
    exact = "exact"
    substring = "substring"
    fuzzy = "fuzzy"


class PlaceholderMode(str, Enum):
    fixed = "fixed"
    random = "random"


class InvalidSkillListError(ValueError):
    pass


@dataclass(frozen=True)
class MatchingConfig:
    strategy: MatchStrategy = MatchStrategy.substring
    fuzzy_threshold: float = 0.6
    placeholder_mode: PlaceholderMode = PlaceholderMode.fixed
    # Placeholder sub-scores: shape the response only, no signal behind them.
    experience_placeholder: float = 80.0
    culture_placeholder: float = 85.0


@dataclass(frozen=True)
class MatchResult:
    overall_match_score: int
    skill_match_score: int
    experience_match_score: int
    culture_fit_score: int
    matching_skills: list[str]
    reasoning: str
    recommendations: list[str] = field(default_factory=lambda: list(GENERIC_RECOMMENDATIONS))
    strategy: str = MatchStrategy.substring.value

    def to_dict(self) -> dict[str, Any]:
        return {
            "overall_match_score": self.overall_match_score,
            "skill_match_score": self.skill_match_score,
            "experience_match_score": self.experience_match_score,
            "culture_fit_score": self.culture_fit_score,
            "matching_skills": list(self.matching_skills),
            "reasoning": self.reasoning,
            "recommendations": list(self.recommendations),
            "strategy": self.strategy,
        }


def normalize_skill_name(value: str) -> str:
    return value.strip().lower()


def ensure_skill_list(value: Any, *, field_name: str = "skills") -> list[str]:
    """Validate a raw skills value before it reaches the heuristic.

    ``None`` becomes an empty list. Anything that is not a list/tuple of
    strings is rejected.
    """

    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise InvalidSkillListError(f"{field_name} must be a list of strings")
    for item in value:
        if not isinstance(item, str):
            raise InvalidSkillListError(f"{field_name} must contain only strings, got {type(item).__name__}")
    return list(value)


def _clean(skills: Iterable[str] | None) -> list[str]:
    if not skills:
        return []
    return [skill.strip() for skill in skills if skill and skill.strip()]


def _substring_match(job_skill: str, candidate_skills: Sequence[str]) -> bool:
    needle = job_skill.lower()
    for candidate in candidate_skills:
        other = candidate.lower()
        if needle in other or other in needle:
            return True
    return False


def _exact_matches(job_skills: Sequence[str], candidate_skills: Sequence[str]) -> list[str]:
    candidate_set = {normalize_skill_name(skill) for skill in candidate_skills}
    return [skill for skill in job_skills if normalize_skill_name(skill) in candidate_set]


def _fuzzy_matches(job_skills: Sequence[str], candidate_skills: Sequence[str], threshold: float) -> list[str]:
    # Character n-grams so "PostgreSQL" and "Postgres" land close together.
    vectorizer = TfidfVectorizer(analyzer="char_wb", ngram_range=(2, 3), lowercase=True)
    matrix = vectorizer.fit_transform(list(job_skills) + list(candidate_skills))
    job_vectors = matrix[: len(job_skills)]
    candidate_vectors = matrix[len(job_skills):]
    best = np.asarray(cosine_similarity(job_vectors, candidate_vectors).max(axis=1)).ravel()
    return [skill for skill, score in zip(job_skills, best) if float(score) >= threshold]


def find_matching_skills(
    job_skills: Sequence[str] | None,
    candidate_skills: Sequence[str] | None,
    strategy: MatchStrategy = MatchStrategy.substring,
    *,
    fuzzy_threshold: float = 0.6,
) -> list[str]:
    """Return the job skills satisfied by the candidate, in job order."""

    required = _clean(job_skills)
    offered = _clean(candidate_skills)
    if not required or not offered:
        return []

    if strategy is MatchStrategy.exact:
        return _exact_matches(required, offered)
    if strategy is MatchStrategy.fuzzy:
        return _fuzzy_matches(required, offered, fuzzy_threshold)
    return [skill for skill in required if _substring_match(skill, offered)]


def compute_skill_match_score(matched_count: int, required_count: int) -> float:
    if required_count <= 0:
        return 0.0
    return (matched_count / required_count) * 100.0


def _placeholder_scores(config: MatchingConfig, rng: random.Random | None) -> tuple[float, float]:
    if config.placeholder_mode is PlaceholderMode.random:
        source = rng or random.Random()
        experience = min(100.0, source.uniform(*EXPERIENCE_RANDOM_RANGE))
        culture = min(100.0, source.uniform(*CULTURE_RANDOM_RANGE))
        return experience, culture
    return config.experience_placeholder, config.culture_placeholder


def calculate_job_match(
    job_skills: Sequence[str] | None,
    candidate_skills: Sequence[str] | None,
    *,
    config: MatchingConfig | None = None,
    rng: random.Random | None = None,
) -> MatchResult:
    """Score a candidate's skills against a job's required skills.

    Only the skill portion carries signal. Experience and culture-fit are
    placeholders (fixed or drawn from ``rng``), and the overall score blends
    skill and experience 60/40.
    """

    cfg = config or MatchingConfig()
    required = _clean(job_skills)
    matching = find_matching_skills(
        required,
        candidate_skills,
        cfg.strategy,
        fuzzy_threshold=cfg.fuzzy_threshold,
    )

    skill_score = compute_skill_match_score(len(matching), len(required))
    experience_score, culture_score = _placeholder_scores(cfg, rng)
    overall = round(skill_score * SKILL_WEIGHT + experience_score * EXPERIENCE_WEIGHT)

    return MatchResult(
        overall_match_score=int(max(0, min(100, overall))),
        skill_match_score=int(round(skill_score)),
        experience_match_score=int(round(experience_score)),
        culture_fit_score=int(round(culture_score)),
        matching_skills=matching,
        reasoning=f"Candidate has {len(matching)} matching skills out of {len(required)} required skills.",
        strategy=cfg.strategy.value,
    )
