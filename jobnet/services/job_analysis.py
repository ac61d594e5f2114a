from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Sequence


SENIOR_MARKERS = ("senior", "lead", "principal")
JUNIOR_MARKERS = ("junior", "entry", "graduate")
REMOTE_MARKERS = ("remote", "work from home", "wfh")
HIGH_PAY_MARKERS = ("competitive", "high", "excellent")
REQUIREMENT_KEYWORDS = ("experience", "knowledge", "proficiency", "familiarity", "expertise")

COVER_LETTER_TIPS = (
    "Highlight relevant experience",
    "Show enthusiasm for the role",
    "Demonstrate cultural fit",
    "Address specific requirements",
)
INTERVIEW_PREP = (
    "Research the company thoroughly",
    "Prepare for technical questions",
    "Practice behavioral questions",
    "Have questions ready for the interviewer",
)


@dataclass
class JobAnalysis:
    key_requirements: list[str] = field(default_factory=list)
    experience_level: str = "mid"
    industry: str = "tech"
    remote_friendly: bool = False
    salary_indication: str = "medium"
    company_culture: list[str] = field(default_factory=list)
    growth_opportunities: bool = True

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _contains_any(text: str, markers: Sequence[str]) -> bool:
    return any(marker in text for marker in markers)


def analyze_job_description(description: str) -> JobAnalysis:
    """Keyword read of a job description. No model is involved."""

    text = (description or "").lower()
    analysis = JobAnalysis()

    if _contains_any(text, SENIOR_MARKERS):
        analysis.experience_level = "senior"
    elif _contains_any(text, JUNIOR_MARKERS):
        analysis.experience_level = "junior"

    analysis.remote_friendly = _contains_any(text, REMOTE_MARKERS)

    if _contains_any(text, HIGH_PAY_MARKERS):
        analysis.salary_indication = "high"
    elif "entry" in text or "junior" in text:
        analysis.salary_indication = "low"

    analysis.key_requirements = [
        f"Strong {keyword} in relevant technologies" for keyword in REQUIREMENT_KEYWORDS if keyword in text
    ]

    if "team" in text or "collaboration" in text:
        analysis.company_culture.append("Team-oriented")
    if "fast-paced" in text or "startup" in text:
        analysis.company_culture.append("Fast-paced environment")

    return analysis


def application_suggestions(candidate_skills: Sequence[str] | None) -> dict[str, Any]:
    return {
        "cover_letter_tips": list(COVER_LETTER_TIPS),
        "skill_highlights": list(candidate_skills or [])[:3],
        "experience_relevance": "Focus on transferable skills and achievements",
        "interview_prep": list(INTERVIEW_PREP),
        "red_flags": [],
    }
