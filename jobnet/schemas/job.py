from __future__ import annotations

from datetime import datetime
from math import ceil
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from jobnet.models.job import Job
from jobnet.schemas.user import UserContact, UserPublic, UserSummary


JobType = Literal["full-time", "part-time", "contract", "internship", "freelance"]
ApplicationStatus = Literal["pending", "reviewed", "accepted", "rejected"]


def _strip_items(values: list[str] | None) -> list[str]:
    return [v.strip() for v in values or [] if v and v.strip()]


class Budget(BaseModel):
    min: float = Field(ge=0)
    max: float = Field(ge=0)
    currency: str = "USD"

    @model_validator(mode="after")
    def _check_range(self) -> "Budget":
        if self.min > self.max:
            raise ValueError("budget min must not exceed max")
        return self


class Pagination(BaseModel):
    current_page: int
    total_pages: int
    total_docs: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def build(cls, *, page: int, limit: int, total: int) -> "Pagination":
        total_pages = ceil(total / limit) if limit else 0
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_docs=total,
            has_next_page=page * limit < total,
            has_prev_page=page > 1,
        )


class JobCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    company: str = Field(min_length=1, max_length=255)
    location: Optional[str] = None
    type: JobType = "full-time"
    skills: list[str] = Field(default_factory=list)
    budget: Budget
    tags: list[str] = Field(default_factory=list)
    payment_verified: bool = False
    payment_tx_hash: str = ""
    payment_amount: float = 0.0
    wallet_address: str = ""
    blockchain_job_id: Optional[int] = None

    @field_validator("skills", "tags")
    @classmethod
    def _strip_lists(cls, v: list[str]) -> list[str]:
        return _strip_items(v)

    @field_validator("title", "company")
    @classmethod
    def _strip(cls, v: str) -> str:
        value = v.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class JobUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, min_length=1)
    company: Optional[str] = Field(default=None, min_length=1, max_length=255)
    location: Optional[str] = None
    type: Optional[JobType] = None
    skills: Optional[list[str]] = None
    budget: Optional[Budget] = None
    tags: Optional[list[str]] = None
    is_active: Optional[bool] = None

    @field_validator("skills", "tags")
    @classmethod
    def _strip_lists(cls, v: Optional[list[str]]) -> Optional[list[str]]:
        return None if v is None else _strip_items(v)

    @field_validator("title", "company")
    @classmethod
    def _strip(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        value = v.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("location")
    @classmethod
    def _default_location(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return v.strip() or "Remote"


class ApplicationRead(BaseModel):
    id: int
    applicant: Optional[UserSummary] = None
    cover_letter: str
    status: ApplicationStatus
    applied_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ApplicationDetail(ApplicationRead):
    applicant: Optional[UserContact] = None


class JobRead(BaseModel):
    id: int
    title: str
    description: str
    company: str
    location: str
    type: str
    skills: list[str] = Field(default_factory=list)
    budget: Budget
    tags: list[str] = Field(default_factory=list)
    employer: Optional[UserPublic] = None
    applications: list[ApplicationRead] = Field(default_factory=list)
    payment_verified: bool = False
    payment_tx_hash: str = ""
    payment_amount: float = 0.0
    wallet_address: str = ""
    blockchain_job_id: Optional[int] = None
    is_active: bool = True
    created_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, job: Job) -> "JobRead":
        return cls(
            id=job.id,
            title=job.title,
            description=job.description,
            company=job.company,
            location=job.location,
            type=job.type,
            skills=list(job.skills or []),
            budget=Budget(min=job.budget_min, max=job.budget_max, currency=job.budget_currency),
            tags=list(job.tags or []),
            employer=UserPublic.model_validate(job.employer) if job.employer else None,
            applications=[ApplicationRead.model_validate(a) for a in job.applications],
            payment_verified=bool(job.payment_verified),
            payment_tx_hash=job.payment_tx_hash or "",
            payment_amount=float(job.payment_amount or 0.0),
            wallet_address=job.wallet_address or "",
            blockchain_job_id=job.blockchain_job_id,
            is_active=bool(job.is_active),
            created_at=job.created_at,
        )


class JobListResponse(BaseModel):
    jobs: list[JobRead]
    pagination: Pagination


class JobEnvelope(BaseModel):
    message: str
    job: JobRead


class JobsResponse(BaseModel):
    jobs: list[JobRead]


class ApplyRequest(BaseModel):
    cover_letter: str = ""


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus


class ApplicationEnvelope(BaseModel):
    message: str
    application: ApplicationRead


class JobWithApplications(BaseModel):
    id: int
    title: str
    company: str
    location: str
    type: str
    is_active: bool
    created_at: Optional[datetime] = None
    applications: list[ApplicationDetail]
    total_applications: int

    @classmethod
    def from_model(cls, job: Job) -> "JobWithApplications":
        applications = [ApplicationDetail.model_validate(a) for a in job.applications]
        return cls(
            id=job.id,
            title=job.title,
            company=job.company,
            location=job.location,
            type=job.type,
            is_active=bool(job.is_active),
            created_at=job.created_at,
            applications=applications,
            total_applications=len(applications),
        )


class JobsWithApplicationsResponse(BaseModel):
    jobs: list[JobWithApplications]
