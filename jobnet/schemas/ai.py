from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field

from jobnet.schemas.job import JobRead, Pagination


AIModel = Literal["open-source", "openai"]


class ExtractSkillsRequest(BaseModel):
    content: str = Field(min_length=1)
    model: AIModel = "open-source"


class ExtractSkillsResponse(BaseModel):
    success: bool = True
    skills: list[str]
    count: int
    model: AIModel


class MatchResultSchema(BaseModel):
    overall_match_score: int = Field(ge=0, le=100)
    skill_match_score: int = Field(ge=0, le=100)
    # Placeholder sub-scores, not derived from the profile.
    experience_match_score: int
    culture_fit_score: int
    matching_skills: list[str] = Field(default_factory=list)
    reasoning: str
    recommendations: list[str] = Field(default_factory=list)
    strategy: str


class JobMatchRequest(BaseModel):
    job_id: int
    model: AIModel = "open-source"


class MatchedJob(BaseModel):
    id: int
    title: str
    company: str
    skills: list[str] = Field(default_factory=list)


class MatchedCandidate(BaseModel):
    id: int
    name: str
    skills: list[str] = Field(default_factory=list)


class JobMatchResponse(BaseModel):
    success: bool = True
    match: MatchResultSchema
    model: AIModel
    job: MatchedJob
    candidate: MatchedCandidate


class JobRecommendation(BaseModel):
    job: JobRead
    match: MatchResultSchema


class JobRecommendationsResponse(BaseModel):
    success: bool = True
    recommendations: list[JobRecommendation]
    pagination: Pagination


class AnalyzeJobRequest(BaseModel):
    job_description: str = Field(min_length=1)


class JobAnalysisSchema(BaseModel):
    key_requirements: list[str]
    experience_level: str
    industry: str
    remote_friendly: bool
    salary_indication: str
    company_culture: list[str]
    growth_opportunities: bool


class AnalyzeJobResponse(BaseModel):
    success: bool = True
    analysis: JobAnalysisSchema


class ApplicationSuggestionsRequest(BaseModel):
    job_id: int


class ApplicationSuggestions(BaseModel):
    cover_letter_tips: list[str]
    skill_highlights: list[str]
    experience_relevance: str
    interview_prep: list[str]
    red_flags: list[str]


class SuggestionJob(BaseModel):
    id: int
    title: str
    company: str


class ApplicationSuggestionsResponse(BaseModel):
    success: bool = True
    suggestions: ApplicationSuggestions
    job: SuggestionJob


class ContentItem(BaseModel):
    text: str


class BatchSkillExtractionRequest(BaseModel):
    # Each entry may be a bare string or {"text": ...}.
    contents: list[Union[str, ContentItem]]


class BatchSkillResult(BaseModel):
    content: str
    skills: list[str]
    count: int


class BatchSkillExtractionResponse(BaseModel):
    success: bool = True
    results: list[BatchSkillResult]
    total_processed: int


class MatchHistoryJob(BaseModel):
    id: int
    title: str
    company: str
    applied_at: Optional[datetime] = None


class MatchHistoryItem(BaseModel):
    job: MatchHistoryJob
    match: MatchResultSchema


class MatchHistoryResponse(BaseModel):
    success: bool = True
    match_history: list[MatchHistoryItem]
    pagination: Pagination
