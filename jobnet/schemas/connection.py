from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from jobnet.schemas.user import UserContact


ConnectionStatus = Literal["pending", "accepted", "rejected"]


class ConnectionRequest(BaseModel):
    recipient_id: int
    message: str = Field(default="", max_length=500)


class ConnectionRead(BaseModel):
    id: int
    requester: UserContact
    recipient: UserContact
    status: ConnectionStatus
    message: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ConnectionView(BaseModel):
    """A connection as seen by one of its two users."""

    id: int
    other_user: UserContact
    status: ConnectionStatus
    message: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    is_requester: bool


class ConnectionEnvelope(BaseModel):
    message: str
    connection: ConnectionRead


class ConnectionListResponse(BaseModel):
    connections: list[ConnectionView]


class PendingConnectionsResponse(BaseModel):
    connections: list[ConnectionRead]


class UserSearchResult(UserContact):
    connection_status: Optional[ConnectionStatus] = None
    connection_id: Optional[int] = None


class UserSearchResponse(BaseModel):
    users: list[UserSearchResult]
