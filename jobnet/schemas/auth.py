from pydantic import BaseModel, Field, field_validator

from jobnet.schemas.user import UserRead


def normalize_email(v: str) -> str:
    value = (v or "").strip().lower()
    if "@" not in value:
        raise ValueError("email must contain '@'")
    left, right = value.split("@", 1)
    if not left or not right:
        raise ValueError("email must have text before and after '@'")
    return value


class RegisterRequest(BaseModel):
    email: str
    # bcrypt only looks at the first 72 bytes.
    password: str = Field(min_length=6, max_length=72)
    name: str = Field(min_length=1, max_length=255)

    @field_validator("email")
    @classmethod
    def _validate_email_like(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str) -> str:
        value = v.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def _validate_email_like(cls, v: str) -> str:
        return normalize_email(v)


class AuthResponse(BaseModel):
    message: str
    access_token: str
    token_type: str = "bearer"
    user: UserRead
