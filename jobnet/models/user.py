# user.py
from sqlalchemy import Boolean, Column, DateTime, Integer, JSON, String, Text
from sqlalchemy.sql import func
from jobnet.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    # Stored lower-cased so uniqueness is case-insensitive.
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    bio = Column(Text, nullable=False, default="")
    linkedin_url = Column(String(512), nullable=False, default="")
    skills = Column(JSON, nullable=False, default=list)
    wallet_address = Column(String(128), nullable=False, default="")
    profile_image = Column(Text, nullable=False, default="")
    is_verified = Column(Boolean, nullable=False, default=False)
    role = Column(String(16), nullable=False, default="user")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
