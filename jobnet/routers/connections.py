from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import String, cast, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobnet.database import get_db
from jobnet.models.connection import Connection
from jobnet.models.user import User
from jobnet.routers.dependencies import get_current_user
from jobnet.schemas.connection import (
    ConnectionEnvelope,
    ConnectionListResponse,
    ConnectionRead,
    ConnectionRequest,
    ConnectionView,
    PendingConnectionsResponse,
    UserSearchResponse,
    UserSearchResult,
)
from jobnet.schemas.user import UserContact
from jobnet.services.conversation import conversation_id


router = APIRouter(prefix="/connections", tags=["connections"])

logger = logging.getLogger(__name__)


def find_connection(db: Session, user_a: int, user_b: int) -> Optional[Connection]:
    return db.query(Connection).filter(Connection.pair_key == conversation_id(user_a, user_b)).first()


def is_connected(db: Session, user_a: int, user_b: int) -> bool:
    connection = find_connection(db, user_a, user_b)
    return connection is not None and connection.is_active


def _get_connection_or_404(db: Session, connection_id: int, detail: str) -> Connection:
    connection = db.query(Connection).filter(Connection.id == connection_id).first()
    if not connection:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return connection


def _respond_to_request(db: Session, connection_id: int, user: User, new_status: str) -> Connection:
    connection = _get_connection_or_404(db, connection_id, "Connection request not found")
    action = "accept" if new_status == "accepted" else "reject"
    if connection.recipient_id != user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not authorized to {action} this request",
        )
    if connection.status != "pending":
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Connection request is not pending")
    connection.status = new_status
    db.commit()
    db.refresh(connection)
    logger.info("connections.%s connection_id=%s user_id=%s", action, connection.id, user.id)
    return connection


@router.get("", response_model=ConnectionListResponse)
def list_connections(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ConnectionListResponse:
    connections = (
        db.query(Connection)
        .filter(or_(Connection.requester_id == current_user.id, Connection.recipient_id == current_user.id))
        .order_by(Connection.updated_at.desc(), Connection.id.desc())
        .all()
    )
    views = []
    for connection in connections:
        is_requester = connection.requester_id == current_user.id
        other = connection.recipient if is_requester else connection.requester
        views.append(
            ConnectionView(
                id=connection.id,
                other_user=UserContact.model_validate(other),
                status=connection.status,
                message=connection.message or "",
                created_at=connection.created_at,
                updated_at=connection.updated_at,
                is_requester=is_requester,
            )
        )
    return ConnectionListResponse(connections=views)


@router.post("/request", response_model=ConnectionEnvelope, status_code=status.HTTP_201_CREATED)
def send_connection_request(
    payload: ConnectionRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ConnectionEnvelope:
    if payload.recipient_id == current_user.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot connect with yourself")

    recipient = db.query(User).filter(User.id == payload.recipient_id).first()
    if not recipient:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    existing = find_connection(db, current_user.id, recipient.id)
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "Connection request already exists", "status": existing.status},
        )

    connection = Connection.between(current_user.id, recipient.id, payload.message.strip())
    db.add(connection)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Connection request already exists",
        ) from exc
    db.refresh(connection)
    logger.info("connections.request requester_id=%s recipient_id=%s", current_user.id, recipient.id)
    return ConnectionEnvelope(
        message="Connection request sent successfully",
        connection=ConnectionRead.model_validate(connection),
    )


@router.put("/{connection_id}/accept", response_model=ConnectionEnvelope)
def accept_connection(
    connection_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ConnectionEnvelope:
    connection = _respond_to_request(db, connection_id, current_user, "accepted")
    return ConnectionEnvelope(
        message="Connection request accepted",
        connection=ConnectionRead.model_validate(connection),
    )


@router.put("/{connection_id}/reject", response_model=ConnectionEnvelope)
def reject_connection(
    connection_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ConnectionEnvelope:
    connection = _respond_to_request(db, connection_id, current_user, "rejected")
    return ConnectionEnvelope(
        message="Connection request rejected",
        connection=ConnectionRead.model_validate(connection),
    )


@router.delete("/{connection_id}")
def remove_connection(
    connection_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict[str, str]:
    connection = _get_connection_or_404(db, connection_id, "Connection not found")
    if not connection.involves(current_user.id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized to remove this connection")
    db.delete(connection)
    db.commit()
    return {"message": "Connection removed successfully"}


@router.get("/pending", response_model=PendingConnectionsResponse)
def list_pending_requests(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PendingConnectionsResponse:
    connections = (
        db.query(Connection)
        .filter(Connection.recipient_id == current_user.id, Connection.status == "pending")
        .order_by(Connection.created_at.desc(), Connection.id.desc())
        .all()
    )
    return PendingConnectionsResponse(connections=[ConnectionRead.model_validate(c) for c in connections])


@router.get("/search", response_model=UserSearchResponse)
def search_users(
    q: Optional[str] = None,
    limit: int = Query(default=10, ge=1, le=50),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserSearchResponse:
    query = db.query(User).filter(User.id != current_user.id)
    term = (q or "").strip()
    if term:
        like = f"%{term}%"
        query = query.filter(
            or_(User.name.ilike(like), User.bio.ilike(like), cast(User.skills, String).ilike(like))
        )
    users = query.order_by(User.name.asc(), User.id.asc()).limit(limit).all()

    results = []
    for user in users:
        connection = find_connection(db, current_user.id, user.id)
        results.append(
            UserSearchResult(
                **UserContact.model_validate(user).model_dump(),
                connection_status=connection.status if connection else None,
                connection_id=connection.id if connection else None,
            )
        )
    return UserSearchResponse(users=results)
