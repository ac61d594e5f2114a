from __future__ import annotations

from sqlalchemy import BigInteger, Boolean, Column, DateTime, Float, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobnet.database import Base


JOB_TYPES = ("full-time", "part-time", "contract", "internship", "freelance")
APPLICATION_STATUSES = ("pending", "reviewed", "accepted", "rejected")


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), index=True, nullable=False)
    description = Column(Text, nullable=False)
    company = Column(String(255), index=True, nullable=False)
    location = Column(String(255), nullable=False, default="Remote")
    type = Column(String(32), nullable=False, default="full-time")
    skills = Column(JSON, nullable=False, default=list)
    tags = Column(JSON, nullable=False, default=list)

    # min <= max is enforced by schemas.job.Budget on create and update.
    budget_min = Column(Float, nullable=False)
    budget_max = Column(Float, nullable=False)
    budget_currency = Column(String(16), nullable=False, default="USD")

    # Nullable so legacy rows without an owner can still be loaded and audited.
    employer_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)

    # Wallet payment fields; authoritative for posting state.
    payment_verified = Column(Boolean, nullable=False, default=False)
    payment_tx_hash = Column(String(128), nullable=False, default="")
    payment_amount = Column(Float, nullable=False, default=0.0)
    wallet_address = Column(String(128), nullable=False, default="")
    blockchain_job_id = Column(BigInteger().with_variant(Integer, "sqlite"), nullable=True)

    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    employer = relationship("User", lazy="joined")
    applications = relationship(
        "JobApplication",
        back_populates="job",
        cascade="all, delete-orphan",
        order_by="JobApplication.id",
    )

    def find_application(self, applicant_id: int) -> "JobApplication | None":
        for application in self.applications:
            if application.applicant_id == applicant_id:
                return application
        return None


class JobApplication(Base):
    __tablename__ = "job_applications"

    id = Column(Integer, primary_key=True, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    applicant_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    cover_letter = Column(Text, nullable=False)
    status = Column(String(16), nullable=False, default="pending")
    applied_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    job = relationship("Job", back_populates="applications")
    applicant = relationship("User", lazy="joined")
