from __future__ import annotations

import pytest

from jobnet.services.recommendation_service import rank_jobs
from jobnet.services.skill_matcher import InvalidSkillListError


CANDIDATE = ["Python", "SQL"]


def _jobs() -> list[dict]:
    return [
        {"id": "a", "skills": ["Go"]},
        {"id": "b", "skills": ["Python"]},
        {"id": "c", "skills": ["SQL"]},
    ]


def test_ties_keep_input_order_and_limit_is_respected() -> None:
    ranked = rank_jobs(CANDIDATE, _jobs(), 2)
    assert [item.job["id"] for item in ranked] == ["b", "c"]
    assert [item.match.overall_match_score for item in ranked] == [92, 92]


def test_limit_larger_than_job_count_returns_everything() -> None:
    ranked = rank_jobs(CANDIDATE, _jobs(), 10)
    assert [item.job["id"] for item in ranked] == ["b", "c", "a"]


def test_empty_job_list() -> None:
    assert rank_jobs(CANDIDATE, [], 5) == []


def test_non_positive_limit_is_rejected() -> None:
    with pytest.raises(ValueError):
        rank_jobs(CANDIDATE, _jobs(), 0)


def test_malformed_job_is_skipped() -> None:
    jobs = _jobs() + [{"id": "bad", "skills": "Python"}]
    ranked = rank_jobs(CANDIDATE, jobs, 10)
    assert "bad" not in [item.job["id"] for item in ranked]
    assert len(ranked) == 3


def test_malformed_candidate_fails_fast() -> None:
    with pytest.raises(InvalidSkillListError):
        rank_jobs("Python", _jobs(), 3)


def test_custom_skill_accessor() -> None:
    jobs = [("x", ["SQL"]), ("y", ["Rust"])]
    ranked = rank_jobs(CANDIDATE, jobs, 1, get_skills=lambda job: job[1])
    assert ranked[0].job[0] == "x"


def test_accessor_failure_skips_only_that_job() -> None:
    jobs = [{"id": "a", "skills": ["Python"]}, {"id": "b"}]
    ranked = rank_jobs(["Python"], jobs, 5, get_skills=lambda job: job["skills"])
    assert [item.job["id"] for item in ranked] == ["a"]
