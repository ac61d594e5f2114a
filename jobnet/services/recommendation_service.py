import logging
import random
from dataclasses import dataclass
from typing import Any, Callable, Generic, Sequence, TypeVar

from jobnet.services.skill_matcher import MatchingConfig, MatchResult, calculate_job_match, ensure_skill_list


logger = logging.getLogger(__name__)

JobT = TypeVar("JobT")


@dataclass(frozen=True)
class JobMatch(Generic[JobT]):
    job: JobT
    match: MatchResult


def skills_of(item: Any) -> Sequence[str] | None:
    if isinstance(item, dict):
        return item.get("skills")
    return getattr(item, "skills", None)


def rank_jobs(
    candidate_skills: Sequence[str] | None,
    jobs: Sequence[JobT],
    limit: int,
    *,
    config: MatchingConfig | None = None,
    rng: random.Random | None = None,
    get_skills: Callable[[JobT], Sequence[str] | None] = skills_of,
) -> list[JobMatch[JobT]]:
    """Score each job for the candidate and return the best ``limit`` of them.

    Ties keep the order the jobs were given in. A job that fails to score is
    logged and left out rather than failing the whole ranking.
    """

    if limit < 1:
        raise ValueError("limit must be a positive integer")
    offered = ensure_skill_list(candidate_skills, field_name="candidate skills")

    scored: list[JobMatch[JobT]] = []
    for index, job in enumerate(jobs):
        try:
            job_skills = ensure_skill_list(get_skills(job), field_name="job skills")
            match = calculate_job_match(job_skills, offered, config=config, rng=rng)
        except Exception:
            logger.warning("ranking.skip index=%s job=%r", index, getattr(job, "id", None), exc_info=True)
            continue
        scored.append(JobMatch(job=job, match=match))

    # list.sort is stable, also with reverse=True.
    scored.sort(key=lambda item: item.match.overall_match_score, reverse=True)
    return scored[:limit]
