# dependencies.py
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from jobnet.config import settings
from jobnet.database import get_db
from jobnet.models.user import User
from jobnet.schemas.user import TokenData
from jobnet.services.skill_matcher import MatchingConfig, MatchStrategy, PlaceholderMode
from jobnet.utils.jwt_handler import decode_access_token


oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.api_prefix}/auth/login")


def get_current_user(db: Session = Depends(get_db), token: str = Depends(oauth2_scheme)) -> User:
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    payload = decode_access_token(token)
    user_id = payload.get("sub")
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload")
    try:
        token_data = TokenData(user_id=int(user_id))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token subject") from exc
    user = db.query(User).filter(User.id == token_data.user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


def get_matching_config() -> MatchingConfig:
    try:
        strategy = MatchStrategy(settings.match_strategy)
        placeholder_mode = PlaceholderMode(settings.placeholder_mode)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Matching is misconfigured",
        ) from exc
    return MatchingConfig(
        strategy=strategy,
        fuzzy_threshold=settings.fuzzy_match_threshold,
        placeholder_mode=placeholder_mode,
        experience_placeholder=settings.experience_placeholder,
        culture_placeholder=settings.culture_placeholder,
    )
