# auth.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from jobnet.database import get_db
from jobnet.models.user import User
from jobnet.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from jobnet.schemas.user import UserRead
from jobnet.utils.jwt_handler import create_token_for_user
from jobnet.utils.password_hash import hash_password, verify_password


router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register_user(user_in: RegisterRequest, db: Session = Depends(get_db)) -> AuthResponse:
    existing_user = db.query(User).filter(User.email == user_in.email).first()
    if existing_user:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists")
    user = User(
        email=user_in.email,
        password=hash_password(user_in.password),
        name=user_in.name,
        skills=[],
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("auth.register user_id=%s", user.id)
    return AuthResponse(
        message="User registered successfully",
        access_token=create_token_for_user(user.id),
        user=UserRead.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login_user(user_in: LoginRequest, db: Session = Depends(get_db)) -> AuthResponse:
    user = db.query(User).filter(User.email == user_in.email).first()
    if not user or not verify_password(user_in.password, user.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return AuthResponse(
        message="Login successful",
        access_token=create_token_for_user(user.id),
        user=UserRead.model_validate(user),
    )
