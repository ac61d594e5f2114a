from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from jobnet.config import settings
from jobnet.database import get_db
from jobnet.models.job import Job, JobApplication
from jobnet.models.user import User
from jobnet.routers.dependencies import get_current_user, get_matching_config
from jobnet.routers.jobs import filter_active_jobs, get_job_or_404
from jobnet.schemas.ai import (
    AnalyzeJobRequest,
    AnalyzeJobResponse,
    ApplicationSuggestions,
    ApplicationSuggestionsRequest,
    ApplicationSuggestionsResponse,
    BatchSkillExtractionRequest,
    BatchSkillExtractionResponse,
    BatchSkillResult,
    ExtractSkillsRequest,
    ExtractSkillsResponse,
    JobAnalysisSchema,
    JobMatchRequest,
    JobMatchResponse,
    JobRecommendation,
    JobRecommendationsResponse,
    MatchedCandidate,
    MatchedJob,
    MatchHistoryItem,
    MatchHistoryJob,
    MatchHistoryResponse,
    MatchResultSchema,
    SuggestionJob,
)
from jobnet.schemas.job import JobRead, JobType, Pagination
from jobnet.services.job_analysis import analyze_job_description, application_suggestions
from jobnet.services.recommendation_service import rank_jobs
from jobnet.services.skill_extractor import extract_skills
from jobnet.services.skill_matcher import (
    InvalidSkillListError,
    MatchingConfig,
    MatchResult,
    calculate_job_match,
    ensure_skill_list,
)


router = APIRouter(prefix="/ai", tags=["ai"])

logger = logging.getLogger(__name__)

MAX_BATCH_SIZE = 10


def _skills_or_422(value, field_name: str) -> list[str]:
    try:
        return ensure_skill_list(value, field_name=field_name)
    except InvalidSkillListError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc


def _match_schema(match: MatchResult) -> MatchResultSchema:
    return MatchResultSchema(**match.to_dict())


def _extract(text: str) -> list[str]:
    return extract_skills(
        text,
        limit=settings.skill_extraction_limit,
        fallback=settings.skill_extraction_fallback,
    )


@router.post("/extract-skills", response_model=ExtractSkillsResponse)
def extract_skills_from_text(
    payload: ExtractSkillsRequest,
    current_user: User = Depends(get_current_user),
) -> ExtractSkillsResponse:
    if not payload.content.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Content is required")
    # Both model names resolve to the local keyword extractor.
    logger.debug("ai.extract_skills user_id=%s model=%s", current_user.id, payload.model)
    skills = _extract(payload.content)
    return ExtractSkillsResponse(skills=skills, count=len(skills), model=payload.model)


@router.post("/job-match", response_model=JobMatchResponse)
def match_job(
    payload: JobMatchRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    config: MatchingConfig = Depends(get_matching_config),
) -> JobMatchResponse:
    job = get_job_or_404(db, payload.job_id)
    job_skills = _skills_or_422(job.skills, "job skills")
    candidate_skills = _skills_or_422(current_user.skills, "candidate skills")

    match = calculate_job_match(job_skills, candidate_skills, config=config)
    logger.info(
        "ai.job_match user_id=%s job_id=%s score=%s strategy=%s",
        current_user.id,
        job.id,
        match.overall_match_score,
        match.strategy,
    )
    return JobMatchResponse(
        match=_match_schema(match),
        model=payload.model,
        job=MatchedJob(id=job.id, title=job.title, company=job.company, skills=job_skills),
        candidate=MatchedCandidate(id=current_user.id, name=current_user.name, skills=candidate_skills),
    )


@router.get("/job-recommendations", response_model=JobRecommendationsResponse)
def recommend_jobs(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    location: Optional[str] = None,
    type: Optional[JobType] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    config: MatchingConfig = Depends(get_matching_config),
) -> JobRecommendationsResponse:
    candidate_skills = _skills_or_422(current_user.skills, "candidate skills")
    jobs = filter_active_jobs(db, location=location, job_type=type).all()

    # Rank every filtered job so pages do not overlap and the total excludes skipped jobs.
    ranked = rank_jobs(candidate_skills, jobs, max(len(jobs), 1), config=config)
    start = (page - 1) * limit
    recommendations = [
        JobRecommendation(job=JobRead.from_model(item.job), match=_match_schema(item.match))
        for item in ranked[start:start + limit]
    ]
    return JobRecommendationsResponse(
        recommendations=recommendations,
        pagination=Pagination.build(page=page, limit=limit, total=len(ranked)),
    )


@router.post("/analyze-job", response_model=AnalyzeJobResponse)
def analyze_job(
    payload: AnalyzeJobRequest,
    current_user: User = Depends(get_current_user),
) -> AnalyzeJobResponse:
    if not payload.job_description.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Job description is required")
    analysis = analyze_job_description(payload.job_description)
    return AnalyzeJobResponse(analysis=JobAnalysisSchema(**analysis.to_dict()))


@router.post("/application-suggestions", response_model=ApplicationSuggestionsResponse)
def suggest_application(
    payload: ApplicationSuggestionsRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ApplicationSuggestionsResponse:
    job = get_job_or_404(db, payload.job_id)
    candidate_skills = _skills_or_422(current_user.skills, "candidate skills")
    return ApplicationSuggestionsResponse(
        suggestions=ApplicationSuggestions(**application_suggestions(candidate_skills)),
        job=SuggestionJob(id=job.id, title=job.title, company=job.company),
    )


@router.post("/batch-skill-extraction", response_model=BatchSkillExtractionResponse)
def batch_extract_skills(
    payload: BatchSkillExtractionRequest,
    current_user: User = Depends(get_current_user),
) -> BatchSkillExtractionResponse:
    if len(payload.contents) > MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Maximum {MAX_BATCH_SIZE} content pieces allowed per request",
        )

    results = []
    for item in payload.contents:
        text = item if isinstance(item, str) else item.text
        skills = _extract(text)
        results.append(BatchSkillResult(content=text, skills=skills, count=len(skills)))
    return BatchSkillExtractionResponse(results=results, total_processed=len(results))


@router.get("/match-history", response_model=MatchHistoryResponse)
def match_history(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    config: MatchingConfig = Depends(get_matching_config),
) -> MatchHistoryResponse:
    candidate_skills = _skills_or_422(current_user.skills, "candidate skills")
    applications = (
        db.query(JobApplication)
        .join(Job, Job.id == JobApplication.job_id)
        .filter(JobApplication.applicant_id == current_user.id)
        .order_by(JobApplication.applied_at.desc(), JobApplication.id.desc())
        .all()
    )

    start = (page - 1) * limit
    history = []
    for application in applications[start:start + limit]:
        job = application.job
        try:
            match = calculate_job_match(ensure_skill_list(job.skills), candidate_skills, config=config)
        except InvalidSkillListError:
            logger.warning("ai.match_history skip job_id=%s", job.id, exc_info=True)
            continue
        history.append(
            MatchHistoryItem(
                job=MatchHistoryJob(
                    id=job.id,
                    title=job.title,
                    company=job.company,
                    applied_at=application.applied_at,
                ),
                match=_match_schema(match),
            )
        )

    return MatchHistoryResponse(
        match_history=history,
        pagination=Pagination.build(page=page, limit=limit, total=len(applications)),
    )
