from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import and_, case, func, or_
from sqlalchemy.orm import Session

from jobnet.database import get_db
from jobnet.models.connection import Connection
from jobnet.models.message import Message
from jobnet.models.user import User
from jobnet.routers.connections import is_connected
from jobnet.routers.dependencies import get_current_user
from jobnet.schemas.message import (
    ConversationMessagesResponse,
    ConversationSummary,
    ConversationsResponse,
    MessageEnvelope,
    MessageRead,
    SendMessageRequest,
    UnreadCountResponse,
)
from jobnet.schemas.user import UserContact
from jobnet.services.conversation import conversation_id, other_participant


router = APIRouter(prefix="/messages", tags=["messages"])

logger = logging.getLogger(__name__)


def mark_conversation_read(db: Session, conversation_key: str, reader_id: int) -> int:
    updated = (
        db.query(Message)
        .filter(
            Message.conversation_id == conversation_key,
            Message.recipient_id == reader_id,
            Message.is_read.is_(False),
        )
        .update({"is_read": True, "read_at": datetime.now(timezone.utc)}, synchronize_session=False)
    )
    db.commit()
    return updated


def _require_connection(db: Session, user_id: int, other_id: int) -> None:
    if not is_connected(db, user_id, other_id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="You can only message connected users")


@router.get("/conversations", response_model=ConversationsResponse)
def list_conversations(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ConversationsResponse:
    connections = (
        db.query(Connection)
        .filter(
            or_(Connection.requester_id == current_user.id, Connection.recipient_id == current_user.id),
            Connection.status == "accepted",
        )
        .all()
    )
    keys = [conversation_id(current_user.id, c.other_user_id(current_user.id)) for c in connections]
    if not keys:
        return ConversationsResponse(conversations=[])

    unread = func.sum(
        case((and_(Message.recipient_id == current_user.id, Message.is_read.is_(False)), 1), else_=0)
    )
    rows = (
        db.query(Message.conversation_id, func.max(Message.id), unread)
        .filter(Message.conversation_id.in_(keys))
        .group_by(Message.conversation_id)
        .all()
    )
    if not rows:
        return ConversationsResponse(conversations=[])

    last_messages = {
        m.id: m for m in db.query(Message).filter(Message.id.in_([last_id for _, last_id, _ in rows])).all()
    }
    summaries = []
    for key, last_id, unread_count in rows:
        last = last_messages[last_id]
        other = db.query(User).filter(User.id == int(other_participant(key, current_user.id))).first()
        summaries.append(
            ConversationSummary(
                conversation_id=key,
                other_user=UserContact.model_validate(other) if other else None,
                last_message=MessageRead.model_validate(last),
                unread_count=int(unread_count or 0),
            )
        )
    summaries.sort(key=lambda s: (s.last_message.created_at, s.last_message.id), reverse=True)
    return ConversationsResponse(conversations=summaries)


@router.get("/conversation/{user_id}", response_model=ConversationMessagesResponse)
def read_conversation(
    user_id: int,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=50, ge=1, le=200),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ConversationMessagesResponse:
    _require_connection(db, current_user.id, user_id)
    key = conversation_id(current_user.id, user_id)

    newest_first = (
        db.query(Message)
        .filter(Message.conversation_id == key)
        .order_by(Message.created_at.desc(), Message.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    messages = [MessageRead.model_validate(m) for m in reversed(newest_first)]
    mark_conversation_read(db, key, current_user.id)

    return ConversationMessagesResponse(
        messages=messages,
        conversation_id=key,
        has_more=len(newest_first) == limit,
    )


@router.post("/send", response_model=MessageEnvelope, status_code=status.HTTP_201_CREATED)
def send_message(
    payload: SendMessageRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageEnvelope:
    if payload.recipient_id == current_user.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot message yourself")
    _require_connection(db, current_user.id, payload.recipient_id)

    message = Message(
        sender_id=current_user.id,
        recipient_id=payload.recipient_id,
        content=payload.content,
        message_type=payload.message_type,
        attachment=payload.attachment.model_dump() if payload.attachment else None,
        conversation_id=conversation_id(current_user.id, payload.recipient_id),
    )
    db.add(message)
    db.commit()
    db.refresh(message)
    logger.info("messages.send message_id=%s conversation_id=%s", message.id, message.conversation_id)
    return MessageEnvelope(message="Message sent successfully", data=MessageRead.model_validate(message))


@router.put("/read/{conversation_key}")
def mark_read(
    conversation_key: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict[str, str]:
    mark_conversation_read(db, conversation_key, current_user.id)
    return {"message": "Messages marked as read"}


@router.get("/unread-count", response_model=UnreadCountResponse)
def unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UnreadCountResponse:
    count = (
        db.query(func.count(Message.id))
        .filter(Message.recipient_id == current_user.id, Message.is_read.is_(False))
        .scalar()
    )
    return UnreadCountResponse(unread_count=count or 0)


@router.delete("/{message_id}")
def delete_message(
    message_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict[str, str]:
    message = db.query(Message).filter(Message.id == message_id).first()
    if not message:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    if message.sender_id != current_user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized to delete this message")
    db.delete(message)
    db.commit()
    return {"message": "Message deleted successfully"}
