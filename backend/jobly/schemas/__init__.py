from jobly.schemas.user import (
    UserCreate,
    UserNew,
    UserUpdate,
    UserResponse,
    UserDetail,
    UserResult,
    UserDetailResult,
    UserListResult,
    UserTokenResult,
    DeletedUserResponse,
    AppliedResponse,
)
from jobly.schemas.auth import LoginRequest, TokenResponse
from jobly.schemas.job import (
    JobCreate,
    JobUpdate,
    JobResponse,
    JobResult,
    JobListResponse,
    DeletedJobResponse,
)

__all__ = [
    "UserCreate",
    "UserNew",
    "UserUpdate",
    "UserResponse",
    "UserDetail",
    "UserResult",
    "UserDetailResult",
    "UserListResult",
    "UserTokenResult",
    "DeletedUserResponse",
    "AppliedResponse",
    "LoginRequest",
    "TokenResponse",
    "JobCreate",
    "JobUpdate",
    "JobResponse",
    "JobResult",
    "JobListResponse",
    "DeletedJobResponse",
]
