from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from jobly.database import get_db
from jobly.dependencies import require_admin
from jobly.repositories import jobs
from jobly.schemas import DeletedJobResponse, JobCreate, JobListResponse, JobResult, JobUpdate

router = APIRouter()


@router.post("", response_model=JobResult, status_code=status.HTTP_201_CREATED)
def create_job(
    job_data: JobCreate,
    admin: dict = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return {"job": jobs.create(db, job_data.model_dump(by_alias=True))}


@router.get("", response_model=JobListResponse)
def list_jobs(
    title: str | None = Query(None, description="Case-insensitive substring of the title"),
    min_salary: int | None = Query(None, alias="minSalary", ge=0, description="Inclusive minimum salary"),
    has_equity: bool = Query(False, alias="hasEquity", description="Only jobs offering equity"),
    company_handle: str | None = Query(None, alias="companyHandle", description="Exact company handle"),
    sort_by: str = Query("title", alias="sortBy", description="id, title, salary, equity or companyHandle"),
    ascending: bool = Query(True, description="Sort direction when listing without filters"),
    db: Session = Depends(get_db),
):
    """List jobs.

    With any of title, minSalary, hasEquity or companyHandle this is a search
    and results come back in store order; otherwise every job is returned
    sorted by sortBy.
    """
    if title or min_salary is not None or has_equity or company_handle:
        results = jobs.find(
            db,
            title=title,
            min_salary=min_salary,
            has_equity=has_equity,
            company_handle=company_handle,
        )
    else:
        results = jobs.find_all(db, sort_by=sort_by, ascending=ascending)
    return {"jobs": results}


@router.get("/{job_id}", response_model=JobResult)
def get_job(job_id: int, db: Session = Depends(get_db)):
    return {"job": jobs.get(db, job_id)}


@router.patch("/{job_id}", response_model=JobResult)
def update_job(
    job_id: int,
    job_data: JobUpdate,
    admin: dict = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return {"job": jobs.update(db, job_id, job_data.model_dump(by_alias=True, exclude_unset=True))}


@router.delete("/{job_id}", response_model=DeletedJobResponse)
def delete_job(job_id: int, admin: dict = Depends(require_admin), db: Session = Depends(get_db)):
    jobs.remove(db, job_id)
    return {"deleted": str(job_id)}
