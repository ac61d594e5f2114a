from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserSummary(BaseModel):
    id: int
    name: str
    profile_image: str = ""

    model_config = ConfigDict(from_attributes=True)


class UserPublic(UserSummary):
    bio: str = ""
    linkedin_url: str = ""
    skills: list[str] = Field(default_factory=list)
    is_verified: bool = False
    role: Literal["user", "admin"] = "user"
    created_at: Optional[datetime] = None


class UserRead(UserPublic):
    email: str
    wallet_address: str = ""


class UserContact(UserSummary):
    email: str
    bio: str = ""
    skills: list[str] = Field(default_factory=list)


class UserUpdate(BaseModel):
    name: Optional[str] = Field(default=None, max_length=255)
    bio: Optional[str] = Field(default=None, max_length=500)
    linkedin_url: Optional[str] = None
    # New skills are merged into the existing list, never replacing it.
    skills: Optional[list[str]] = None
    wallet_address: Optional[str] = None
    profile_image: Optional[str] = None


class UserUpdateResponse(BaseModel):
    message: str = "Profile updated successfully"
    user: UserRead
    skills_added: int
    total_skills: int


class TokenData(BaseModel):
    user_id: int
