from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import or_
from sqlalchemy.orm import Query as SAQuery, Session

from jobnet.database import get_db
from jobnet.models.job import Job, JobApplication
from jobnet.models.user import User
from jobnet.routers.dependencies import get_current_user
from jobnet.schemas.job import (
    ApplicationEnvelope,
    ApplicationRead,
    ApplicationStatusUpdate,
    ApplyRequest,
    JobCreate,
    JobEnvelope,
    JobListResponse,
    JobRead,
    JobsResponse,
    JobsWithApplicationsResponse,
    JobType,
    JobUpdate,
    JobWithApplications,
    Pagination,
)


router = APIRouter(prefix="/jobs", tags=["jobs"])

logger = logging.getLogger(__name__)


def get_job_or_404(db: Session, job_id: int) -> Job:
    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    return job


def filter_active_jobs(
    db: Session,
    *,
    search: str | None = None,
    location: str | None = None,
    job_type: str | None = None,
    min_salary: float | None = None,
    max_salary: float | None = None,
) -> SAQuery:
    query = db.query(Job).filter(Job.is_active.is_(True))
    if search:
        like = f"%{search.strip()}%"
        query = query.filter(or_(Job.title.ilike(like), Job.description.ilike(like), Job.company.ilike(like)))
    if location:
        query = query.filter(Job.location.ilike(f"%{location.strip()}%"))
    if job_type:
        query = query.filter(Job.type == job_type)
    if min_salary is not None:
        query = query.filter(Job.budget_min >= min_salary)
    if max_salary is not None:
        query = query.filter(Job.budget_max <= max_salary)
    return query.order_by(Job.created_at.desc(), Job.id.desc())


def _split_csv(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def _require_owner(job: Job, user: User, action: str) -> None:
    if job.employer_id != user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=f"Not authorized to {action} this job")


@router.get("", response_model=JobListResponse)
def list_jobs(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    search: Optional[str] = None,
    skills: Optional[str] = Query(default=None, description="Comma-separated skill names"),
    location: Optional[str] = None,
    type: Optional[JobType] = None,
    min_salary: Optional[float] = None,
    max_salary: Optional[float] = None,
    db: Session = Depends(get_db),
) -> JobListResponse:
    jobs = filter_active_jobs(
        db,
        search=search,
        location=location,
        job_type=type,
        min_salary=min_salary,
        max_salary=max_salary,
    ).all()

    wanted = {skill.lower() for skill in _split_csv(skills)}
    if wanted:
        jobs = [job for job in jobs if any(s.strip().lower() in wanted for s in job.skills or [])]

    start = (page - 1) * limit
    return JobListResponse(
        jobs=[JobRead.from_model(job) for job in jobs[start:start + limit]],
        pagination=Pagination.build(page=page, limit=limit, total=len(jobs)),
    )


@router.get("/user/my-jobs", response_model=JobsResponse)
def list_my_jobs(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)) -> JobsResponse:
    jobs = (
        db.query(Job)
        .filter(Job.employer_id == current_user.id)
        .order_by(Job.created_at.desc(), Job.id.desc())
        .all()
    )
    return JobsResponse(jobs=[JobRead.from_model(job) for job in jobs])


@router.get("/user/applications", response_model=JobsResponse)
def list_my_applications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> JobsResponse:
    jobs = (
        db.query(Job)
        .join(JobApplication, JobApplication.job_id == Job.id)
        .filter(JobApplication.applicant_id == current_user.id)
        .order_by(Job.created_at.desc(), Job.id.desc())
        .all()
    )
    return JobsResponse(jobs=[JobRead.from_model(job) for job in jobs])


@router.get("/user/my-job-applications", response_model=JobsWithApplicationsResponse)
def list_applications_to_my_jobs(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> JobsWithApplicationsResponse:
    jobs = (
        db.query(Job)
        .filter(Job.employer_id == current_user.id)
        .order_by(Job.created_at.desc(), Job.id.desc())
        .all()
    )
    return JobsWithApplicationsResponse(jobs=[JobWithApplications.from_model(job) for job in jobs])


@router.get("/{job_id}", response_model=JobRead)
def read_job(job_id: int, db: Session = Depends(get_db)) -> JobRead:
    return JobRead.from_model(get_job_or_404(db, job_id))


@router.post("", response_model=JobEnvelope, status_code=status.HTTP_201_CREATED)
def create_job(
    payload: JobCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> JobEnvelope:
    if not payload.payment_verified and not payload.payment_tx_hash.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Payment verification required for job posting",
        )

    job = Job(
        title=payload.title,
        description=payload.description,
        company=payload.company,
        location=(payload.location or "").strip() or "Remote",
        type=payload.type,
        skills=payload.skills,
        tags=payload.tags,
        budget_min=payload.budget.min,
        budget_max=payload.budget.max,
        budget_currency=payload.budget.currency,
        employer_id=current_user.id,
        payment_verified=payload.payment_verified,
        payment_tx_hash=payload.payment_tx_hash.strip(),
        payment_amount=payload.payment_amount,
        wallet_address=payload.wallet_address.strip(),
        blockchain_job_id=payload.blockchain_job_id,
    )
    db.add(job)
    db.commit()
    db.refresh(job)
    logger.info("jobs.create job_id=%s employer_id=%s verified=%s", job.id, current_user.id, job.payment_verified)
    return JobEnvelope(message="Job posted successfully", job=JobRead.from_model(job))


@router.put("/{job_id}", response_model=JobEnvelope)
def update_job(
    job_id: int,
    payload: JobUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> JobEnvelope:
    job = get_job_or_404(db, job_id)
    _require_owner(job, current_user, "update")

    changes = payload.model_dump(exclude_unset=True, exclude={"budget"})
    for field_name, value in changes.items():
        if value is None:
            continue
        setattr(job, field_name, value)
    if payload.budget is not None:
        job.budget_min = payload.budget.min
        job.budget_max = payload.budget.max
        job.budget_currency = payload.budget.currency

    db.add(job)
    db.commit()
    db.refresh(job)
    return JobEnvelope(message="Job updated successfully", job=JobRead.from_model(job))


@router.delete("/{job_id}")
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict[str, str]:
    job = get_job_or_404(db, job_id)
    _require_owner(job, current_user, "delete")
    db.delete(job)
    db.commit()
    logger.info("jobs.delete job_id=%s employer_id=%s", job_id, current_user.id)
    return {"message": "Job deleted successfully"}


@router.post("/{job_id}/apply")
def apply_for_job(
    job_id: int,
    payload: ApplyRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict[str, str]:
    job = get_job_or_404(db, job_id)
    if not job.is_active:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="This job is no longer active")
    if job.find_application(current_user.id) is not None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="You have already applied for this job")
    cover_letter = (payload.cover_letter or "").strip()
    if not cover_letter:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cover letter is required")

    job.applications.append(JobApplication(applicant_id=current_user.id, cover_letter=cover_letter))
    db.commit()
    return {"message": "Application submitted successfully"}


@router.delete("/{job_id}/apply")
def cancel_application(
    job_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict[str, str]:
    job = get_job_or_404(db, job_id)
    application = job.find_application(current_user.id)
    if application is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="You have not applied for this job")
    job.applications.remove(application)
    db.commit()
    return {"message": "Application cancelled successfully"}


@router.put("/{job_id}/applications/{application_id}", response_model=ApplicationEnvelope)
def update_application_status(
    job_id: int,
    application_id: int,
    payload: ApplicationStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ApplicationEnvelope:
    job = get_job_or_404(db, job_id)
    _require_owner(job, current_user, "review applications for")
    application = next((a for a in job.applications if a.id == application_id), None)
    if application is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")
    application.status = payload.status
    db.commit()
    db.refresh(application)
    return ApplicationEnvelope(
        message="Application status updated",
        application=ApplicationRead.model_validate(application),
    )
