from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jobnet.schemas.user import UserContact, UserSummary


MessageType = Literal["text", "image", "file"]


class Attachment(BaseModel):
    url: Optional[str] = None
    filename: Optional[str] = None
    file_type: Optional[str] = None
    file_size: Optional[int] = None


class SendMessageRequest(BaseModel):
    recipient_id: int
    content: str = Field(min_length=1, max_length=2000)
    message_type: MessageType = "text"
    attachment: Optional[Attachment] = None

    @field_validator("content")
    @classmethod
    def _strip_content(cls, v: str) -> str:
        value = v.strip()
        if not value:
            raise ValueError("content must not be blank")
        return value


class MessageRead(BaseModel):
    id: int
    sender: UserSummary
    recipient: UserSummary
    content: str
    message_type: MessageType
    attachment: Optional[Attachment] = None
    is_read: bool
    read_at: Optional[datetime] = None
    conversation_id: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class MessageEnvelope(BaseModel):
    message: str
    data: MessageRead


class ConversationSummary(BaseModel):
    conversation_id: str
    other_user: Optional[UserContact] = None
    last_message: MessageRead
    unread_count: int


class ConversationsResponse(BaseModel):
    conversations: list[ConversationSummary]


class ConversationMessagesResponse(BaseModel):
    messages: list[MessageRead]
    conversation_id: str
    has_more: bool


class UnreadCountResponse(BaseModel):
    unread_count: int
