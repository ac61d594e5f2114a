import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobnet.database import get_db
from jobnet.models.job import Job
from jobnet.models.payment_log import PaymentLog
from jobnet.models.user import User
from jobnet.routers.dependencies import get_current_user
from jobnet.schemas.payment import PaymentCreate, PaymentRead, PaymentStatusUpdate, PaymentsResponse


router = APIRouter(prefix="/payments", tags=["payments"])

logger = logging.getLogger(__name__)


@router.post("", response_model=PaymentRead, status_code=status.HTTP_201_CREATED)
def record_payment(
    payload: PaymentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PaymentRead:
    tx_hash = payload.transaction_hash.strip()
    if db.query(PaymentLog).filter(PaymentLog.transaction_hash == tx_hash).first():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Transaction already recorded")
    if payload.job_id is not None and not db.query(Job).filter(Job.id == payload.job_id).first():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")

    log = PaymentLog(user_id=current_user.id, **payload.model_dump(exclude={"transaction_hash"}))
    log.transaction_hash = tx_hash
    db.add(log)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Transaction already recorded") from exc
    db.refresh(log)
    logger.info("payments.record user_id=%s tx=%s status=%s", current_user.id, tx_hash, log.status)
    return PaymentRead.model_validate(log)


@router.get("/me", response_model=PaymentsResponse)
def list_my_payments(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PaymentsResponse:
    logs = (
        db.query(PaymentLog)
        .filter(PaymentLog.user_id == current_user.id)
        .order_by(PaymentLog.created_at.desc(), PaymentLog.id.desc())
        .all()
    )
    return PaymentsResponse(payments=[PaymentRead.model_validate(log) for log in logs])


@router.put("/{tx_hash}/status", response_model=PaymentRead)
def update_payment_status(
    tx_hash: str,
    payload: PaymentStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PaymentRead:
    log = db.query(PaymentLog).filter(PaymentLog.transaction_hash == tx_hash).first()
    if not log:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payment not found")
    if log.user_id != current_user.id and not current_user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized to update this payment")

    for field_name, value in payload.model_dump(exclude_unset=True).items():
        setattr(log, field_name, value)
    db.commit()
    db.refresh(log)
    return PaymentRead.model_validate(log)
