import random

from jobnet.data.skills import COMMON_SKILLS
from jobnet.services.skill_extractor import FALLBACK_SAMPLE_SIZE, extract_skills


def test_extracts_in_vocabulary_order() -> None:
    assert extract_skills("I build REST APIs with Python and Flask") == ["Python", "Flask", "REST API"]


def test_result_is_capped() -> None:
    text = "JavaScript TypeScript React Docker Kubernetes Python"
    assert extract_skills(text) == ["JavaScript", "Python", "React", "Docker", "TypeScript"]
    assert extract_skills(text, limit=2) == ["JavaScript", "Python"]


def test_java_is_reported_for_javascript() -> None:
    assert extract_skills("JavaScript only") == ["JavaScript", "Java"]


def test_no_match_returns_empty_without_fallback() -> None:
    assert extract_skills("I like baking bread") == []
    assert extract_skills("") == []
    assert extract_skills(None) == []


def test_fallback_samples_vocabulary() -> None:
    skills = extract_skills("I like baking bread", fallback=True, rng=random.Random(3))
    assert len(skills) == FALLBACK_SAMPLE_SIZE
    assert len(set(skills)) == FALLBACK_SAMPLE_SIZE
    assert set(skills) <= set(COMMON_SKILLS)


def test_zero_limit() -> None:
    assert extract_skills("Python", limit=0) == []
