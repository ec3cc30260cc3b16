from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class UserCreate(CamelModel):
    """Self-registration payload. New users are never admins."""
    username: str = Field(min_length=1, max_length=25)
    password: str
    first_name: str = Field(min_length=1, max_length=30)
    last_name: str = Field(min_length=1, max_length=30)
    email: EmailStr

    class Config:
        extra = "forbid"

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if len(v) < 5:
            raise ValueError("Password must be at least 5 characters long")
        if len(v) > 72:
            raise ValueError("Password must be at most 72 characters long")
        return v


class UserNew(UserCreate):
    """Admin-only user creation; may create other admins."""
    is_admin: bool = False


class UserUpdate(CamelModel):
    password: str | None = None
    first_name: str | None = Field(default=None, min_length=1, max_length=30)
    last_name: str | None = Field(default=None, min_length=1, max_length=30)
    email: EmailStr | None = None
    is_admin: bool | None = None

    class Config:
        extra = "forbid"

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str | None) -> str | None:
        if v is None:
            return v
        if len(v) < 5:
            raise ValueError("Password must be at least 5 characters long")
        if len(v) > 72:
            raise ValueError("Password must be at most 72 characters long")
        return v


class UserResponse(CamelModel):
    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool


class UserDetail(UserResponse):
    jobs: list[int] = []


class UserResult(BaseModel):
    user: UserResponse


class UserDetailResult(BaseModel):
    user: UserDetail


class UserListResult(BaseModel):
    users: list[UserDetail]


class UserTokenResult(BaseModel):
    user: UserResponse
    token: str


class DeletedUserResponse(BaseModel):
    deleted: str


class AppliedResponse(BaseModel):
    applied: int
