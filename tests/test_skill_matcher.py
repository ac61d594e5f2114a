from __future__ import annotations

import random

import pytest

from jobnet.services.skill_matcher import (
    GENERIC_RECOMMENDATIONS,
    InvalidSkillListError,
    MatchingConfig,
    MatchStrategy,
    PlaceholderMode,
    calculate_job_match,
    compute_skill_match_score,
    ensure_skill_list,
    find_matching_skills,
)


def test_half_of_required_skills_scores_fifty() -> None:
    result = calculate_job_match(["React", "Node.js"], ["React", "Python"])
    assert result.skill_match_score == 50
    assert result.matching_skills == ["React"]
    # 50 * 0.6 + 80 * 0.4
    assert result.overall_match_score == 62
    assert result.experience_match_score == 80
    assert result.culture_fit_score == 85
    assert result.reasoning == "Candidate has 1 matching skills out of 2 required skills."
    assert result.recommendations == list(GENERIC_RECOMMENDATIONS)


def test_no_required_skills_scores_zero() -> None:
    result = calculate_job_match([], ["React"])
    assert result.skill_match_score == 0
    assert result.matching_skills == []
    assert result.overall_match_score == 32


def test_missing_lists_are_treated_as_empty() -> None:
    result = calculate_job_match(None, None)
    assert result.skill_match_score == 0
    assert result.reasoning == "Candidate has 0 matching skills out of 0 required skills."


def test_substring_matching_is_bidirectional_and_case_insensitive() -> None:
    assert find_matching_skills(["Java"], ["JavaScript"]) == ["Java"]
    assert find_matching_skills(["javascript"], ["JAVA"]) == ["javascript"]


def test_exact_strategy_rejects_partial_names() -> None:
    assert find_matching_skills(["Java"], ["JavaScript"], MatchStrategy.exact) == []
    assert find_matching_skills(["Java", "SQL"], [" sql "], MatchStrategy.exact) == ["SQL"]


def test_fuzzy_strategy_matches_similar_names_only() -> None:
    matched = find_matching_skills(["Python", "Kubernetes"], ["python"], MatchStrategy.fuzzy, fuzzy_threshold=0.6)
    assert matched == ["Python"]


def test_blank_job_skills_are_ignored() -> None:
    result = calculate_job_match(["Python", " ", ""], ["python"])
    assert result.skill_match_score == 100
    assert result.reasoning.endswith("out of 1 required skills.")


def test_overall_score_is_clamped() -> None:
    config = MatchingConfig(experience_placeholder=100.0)
    result = calculate_job_match(["Go"], ["Go"], config=config)
    assert result.overall_match_score == 100


def test_fixed_placeholders_come_from_config() -> None:
    config = MatchingConfig(experience_placeholder=0.0, culture_placeholder=10.0)
    result = calculate_job_match(["Go"], ["Go"], config=config)
    assert result.overall_match_score == 60
    assert result.culture_fit_score == 10


def test_random_placeholders_are_reproducible_with_a_seed() -> None:
    config = MatchingConfig(placeholder_mode=PlaceholderMode.random)
    first = calculate_job_match(["Go"], ["Go"], config=config, rng=random.Random(7))
    second = calculate_job_match(["Go"], ["Go"], config=config, rng=random.Random(7))
    assert first == second
    assert 60 <= first.experience_match_score <= 100
    assert 70 <= first.culture_fit_score <= 100


def test_result_reports_strategy() -> None:
    config = MatchingConfig(strategy=MatchStrategy.exact)
    assert calculate_job_match(["Go"], ["Go"], config=config).to_dict()["strategy"] == "exact"


def test_compute_skill_match_score() -> None:
    assert compute_skill_match_score(3, 4) == 75.0
    assert compute_skill_match_score(0, 0) == 0.0


def test_ensure_skill_list_validates_shape() -> None:
    assert ensure_skill_list(None) == []
    assert ensure_skill_list(("Python",)) == ["Python"]
    with pytest.raises(InvalidSkillListError):
        ensure_skill_list("Python")
    with pytest.raises(InvalidSkillListError, match="job skills"):
        ensure_skill_list(["Python", 3], field_name="job skills")
