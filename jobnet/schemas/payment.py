from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


PaymentStatus = Literal["pending", "confirmed", "failed"]
PaymentPurpose = Literal["job-posting", "premium-feature", "subscription"]


class PaymentCreate(BaseModel):
    job_id: Optional[int] = None
    amount: float = Field(gt=0)
    currency: str = "ETH"
    transaction_hash: str = Field(min_length=1, max_length=128)
    from_address: str = Field(min_length=1, max_length=128)
    to_address: str = Field(min_length=1, max_length=128)
    status: PaymentStatus = "pending"
    block_number: Optional[int] = None
    gas_used: Optional[int] = None
    gas_price: Optional[str] = None
    network: str = "ethereum"
    purpose: PaymentPurpose = "job-posting"


class PaymentStatusUpdate(BaseModel):
    status: PaymentStatus
    block_number: Optional[int] = None
    gas_used: Optional[int] = None
    gas_price: Optional[str] = None


class PaymentRead(BaseModel):
    id: int
    user_id: int
    job_id: Optional[int] = None
    amount: float
    currency: str
    transaction_hash: str
    from_address: str
    to_address: str
    status: PaymentStatus
    block_number: Optional[int] = None
    gas_used: Optional[int] = None
    gas_price: Optional[str] = None
    network: str
    purpose: PaymentPurpose
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PaymentsResponse(BaseModel):
    payments: list[PaymentRead]
