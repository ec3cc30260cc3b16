from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from jobly.database import get_db
from jobly.repositories import users
from jobly.schemas import LoginRequest, TokenResponse, UserCreate
from jobly.services import create_user_token

router = APIRouter()


@router.post("/token", response_model=TokenResponse)
def login(login_data: LoginRequest, db: Session = Depends(get_db)):
    """Exchange a username/password for a JWT."""
    user = users.authenticate(db, login_data.username, login_data.password)
    return TokenResponse(token=create_user_token(user))


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new (non-admin) user and return a JWT for them."""
    user = users.register(db, {**user_data.model_dump(by_alias=True), "isAdmin": False})
    return TokenResponse(token=create_user_token(user))
