from __future__ import annotations

from sqlalchemy import BigInteger, Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.sql import func

from jobnet.database import Base


PAYMENT_STATUSES = ("pending", "confirmed", "failed")
PAYMENT_PURPOSES = ("job-posting", "premium-feature", "subscription")


class PaymentLog(Base):
    """Record of a wallet payment.

    Kept for auditing only: whether a job may be posted is decided by the
    job's own payment fields, not by this table.
    """

    __tablename__ = "payment_logs"

    id = Column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        index=True,
    )
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="SET NULL"), nullable=True)
    amount = Column(Float, nullable=False)
    currency = Column(String(16), nullable=False, default="ETH")
    transaction_hash = Column(String(128), nullable=False, unique=True, index=True)
    from_address = Column(String(128), nullable=False)
    to_address = Column(String(128), nullable=False)
    status = Column(String(16), nullable=False, default="pending")
    block_number = Column(BigInteger().with_variant(Integer, "sqlite"), nullable=True)
    gas_used = Column(BigInteger().with_variant(Integer, "sqlite"), nullable=True)
    gas_price = Column(String(64), nullable=True)
    network = Column(String(32), nullable=False, default="ethereum")
    purpose = Column(String(32), nullable=False, default="job-posting")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
