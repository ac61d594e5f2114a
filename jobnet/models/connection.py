from __future__ import annotations

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobnet.database import Base
from jobnet.services.conversation import conversation_id


CONNECTION_STATUSES = ("pending", "accepted", "rejected")


class Connection(Base):
    __tablename__ = "connections"

    id = Column(Integer, primary_key=True, index=True)
    requester_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    recipient_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    status = Column(String(16), nullable=False, default="pending")
    message = Column(String(500), nullable=False, default="")

    # Order-independent key for the pair, same value as the pair's conversation id.
    pair_key = Column(String(64), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    requester = relationship("User", foreign_keys=[requester_id], lazy="joined")
    recipient = relationship("User", foreign_keys=[recipient_id], lazy="joined")

    __table_args__ = (
        UniqueConstraint("pair_key", name="uq_connections_pair_key"),
    )

    @classmethod
    def between(cls, requester_id: int, recipient_id: int, message: str = "") -> "Connection":
        return cls(
            requester_id=requester_id,
            recipient_id=recipient_id,
            message=message,
            pair_key=conversation_id(requester_id, recipient_id),
        )

    @property
    def is_active(self) -> bool:
        return self.status == "accepted"

    def involves(self, user_id: int) -> bool:
        return user_id in (self.requester_id, self.recipient_id)

    def other_user_id(self, viewer_id: int) -> int:
        return self.recipient_id if self.requester_id == viewer_id else self.requester_id
