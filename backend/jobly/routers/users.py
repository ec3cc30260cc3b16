from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from jobly.database import get_db
from jobly.dependencies import require_admin, require_admin_or_self
from jobly.repositories import users
from jobly.schemas import (
    AppliedResponse,
    DeletedUserResponse,
    UserDetailResult,
    UserListResult,
    UserNew,
    UserResult,
    UserTokenResult,
    UserUpdate,
)
from jobly.services import create_user_token

router = APIRouter()


@router.post("", response_model=UserTokenResult, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserNew,
    admin: dict = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Add a user as an admin. The new user may itself be an admin.

    This is not the registration endpoint; see POST /api/auth/register.
    """
    user = users.register(db, user_data.model_dump(by_alias=True))
    return {"user": user, "token": create_user_token(user)}


@router.get("", response_model=UserListResult)
def list_users(admin: dict = Depends(require_admin), db: Session = Depends(get_db)):
    """List every user with the ids of the jobs they applied to."""
    return {"users": users.find_all(db)}


@router.get("/{username}", response_model=UserDetailResult)
def get_user(
    username: str,
    current_user: dict = Depends(require_admin_or_self),
    db: Session = Depends(get_db),
):
    return {"user": users.get(db, username)}


@router.patch("/{username}", response_model=UserResult)
def update_user(
    username: str,
    user_data: UserUpdate,
    current_user: dict = Depends(require_admin_or_self),
    db: Session = Depends(get_db),
):
    """Partially update a user. Only admins may change isAdmin."""
    data = user_data.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)
    if "isAdmin" in data and not current_user["isAdmin"]:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only admins can change admin status",
        )
    return {"user": users.update(db, username, data)}


@router.delete("/{username}", response_model=DeletedUserResponse)
def delete_user(
    username: str,
    current_user: dict = Depends(require_admin_or_self),
    db: Session = Depends(get_db),
):
    users.remove(db, username)
    return {"deleted": username}


@router.post(
    "/{username}/jobs/{job_id}",
    response_model=AppliedResponse,
    status_code=status.HTTP_201_CREATED,
)
def apply_to_job(
    username: str,
    job_id: int,
    current_user: dict = Depends(require_admin_or_self),
    db: Session = Depends(get_db),
):
    """Apply a user to a job (or an admin applies on their behalf)."""
    application = users.apply(db, username, job_id)
    return {"applied": application["jobId"]}
