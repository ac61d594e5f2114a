# users.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from jobnet.database import get_db
from jobnet.models.user import User
from jobnet.routers.dependencies import get_current_user
from jobnet.schemas.user import UserPublic, UserRead, UserUpdate, UserUpdateResponse
from jobnet.services.profile_service import update_profile


router = APIRouter()


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)) -> UserRead:
    return UserRead.model_validate(current_user)


@router.put("/me", response_model=UserUpdateResponse)
def update_current_user(
    update: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserUpdateResponse:
    changes = update.model_dump(exclude_unset=True)
    user = update_profile(db, current_user, changes)
    return UserUpdateResponse(
        user=UserRead.model_validate(user),
        skills_added=len(update.skills or []),
        total_skills=len(user.skills or []),
    )


@router.get("/{user_id}", response_model=UserPublic)
def read_user(user_id: int, db: Session = Depends(get_db)) -> UserPublic:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserPublic.model_validate(user)
