from decimal import Decimal

from pydantic import Field

from jobly.schemas.user import CamelModel


class JobCreate(CamelModel):
    title: str = Field(min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: Decimal | None = Field(default=None, ge=0, le=1)
    company_handle: str = Field(min_length=1, max_length=25)

    class Config:
        extra = "forbid"


class JobUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: Decimal | None = Field(default=None, ge=0, le=1)
    company_handle: str | None = Field(default=None, min_length=1, max_length=25)

    class Config:
        extra = "forbid"


class JobResponse(CamelModel):
    id: int
    title: str
    salary: int | None = None
    equity: str | None = None  # decimal string, e.g. "0" or "0.5"
    company_handle: str


class JobResult(CamelModel):
    job: JobResponse


class JobListResponse(CamelModel):
    jobs: list[JobResponse]


class DeletedJobResponse(CamelModel):
    deleted: str
