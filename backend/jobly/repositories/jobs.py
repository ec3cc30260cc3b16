"""Data access for job postings."""

import logging
from decimal import Decimal

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.errors import JoblyError
from jobly.repositories.sql import bind_name, sql_for_job_filters, sql_for_partial_update

logger = logging.getLogger(__name__)

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

# The only identifiers that may be placed in ORDER BY
SORT_COLUMNS = {
    "id": "id",
    "title": "title",
    "salary": "salary",
    "equity": "equity",
    "companyHandle": "company_handle",
}

UPDATABLE_FIELDS = {"title", "salary", "equity", "companyHandle"}


def _equity_to_db(value):
    # Bound as text so both SQLite and PostgreSQL store an exact NUMERIC
    if value is None:
        return None
    return str(value)


def _equity_from_db(value) -> str | None:
    if value is None:
        return None
    return format(Decimal(str(value)), "f")


def _job_projection(row) -> dict:
    return {
        "id": row["id"],
        "title": row["title"],
        "salary": row["salary"],
        "equity": _equity_from_db(row["equity"]),
        "companyHandle": row["companyHandle"],
    }


def create(db: Session, data: dict) -> dict:
    """Create a job from {title, salary, equity, companyHandle}.

    Returns {id, title, salary, equity, companyHandle}.
    """
    params = {
        "p1": data["title"],
        "p2": data.get("salary"),
        "p3": _equity_to_db(data.get("equity")),
        "p4": data["companyHandle"],
    }
    try:
        row = db.execute(
            text(f"""INSERT INTO jobs (title, salary, equity, company_handle)
                     VALUES (:p1, :p2, :p3, :p4)
                     RETURNING {JOB_COLUMNS}"""),
            params,
        ).mappings().one()
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Rejected job for company %s: %s", data["companyHandle"], e.orig)
        raise JoblyError.validation(f"Invalid job data for company: {data['companyHandle']}") from e

    logger.info("Created job %s (%s)", row["id"], row["title"])
    return _job_projection(row)


def find_all(db: Session, sort_by: str = "title", ascending: bool = True) -> list[dict]:
    """All jobs sorted by one of id, title, salary, equity, companyHandle."""
    column = SORT_COLUMNS.get(sort_by)
    if column is None:
        raise JoblyError.validation(f"Unknown sort field: {sort_by}")
    direction = "ASC" if ascending else "DESC"

    rows = db.execute(
        text(f"""SELECT {JOB_COLUMNS}
                 FROM jobs
                 ORDER BY {column} {direction}""")
    ).mappings().all()
    return [_job_projection(row) for row in rows]


def get(db: Session, job_id: int) -> dict:
    """One job by id. Raises a not-found error if there is no such job."""
    row = db.execute(
        text(f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = :p1"),
        {"p1": job_id},
    ).mappings().first()

    if row is None:
        raise JoblyError.not_found(f"No job: {job_id}")
    return _job_projection(row)


def find(
    db: Session,
    title: str | None = None,
    min_salary: int | None = None,
    has_equity: bool = False,
    company_handle: str | None = None,
) -> list[dict]:
    """Jobs matching every filter supplied; no filters returns every job.

    title matches case-insensitively anywhere in the job title, min_salary is
    inclusive, has_equity keeps only jobs with equity above zero and
    company_handle must match exactly.
    """
    where = sql_for_job_filters(
        title=title,
        min_salary=min_salary,
        has_equity=has_equity,
        company_handle=company_handle,
    )
    rows = db.execute(
        text(f"""SELECT {JOB_COLUMNS}
                 FROM jobs
                 WHERE {where.sql}"""),
        where.params(),
    ).mappings().all()
    return [_job_projection(row) for row in rows]


def update(db: Session, job_id: int, data: dict) -> dict:
    """Partially update a job; data can include {title, salary, equity, companyHandle}."""
    unknown = set(data) - UPDATABLE_FIELDS
    if unknown:
        raise JoblyError.validation(f"Cannot update fields: {', '.join(sorted(unknown))}")

    data = dict(data)
    if "equity" in data:
        data["equity"] = _equity_to_db(data["equity"])

    set_clause = sql_for_partial_update(data, {"companyHandle": "company_handle"})
    id_bind = bind_name(len(set_clause.values) + 1)
    params = set_clause.params()
    params[id_bind] = job_id

    try:
        row = db.execute(
            text(f"""UPDATE jobs
                     SET {set_clause.sql}
                     WHERE id = :{id_bind}
                     RETURNING {JOB_COLUMNS}"""),
            params,
        ).mappings().first()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Rejected update of job %s: %s", job_id, e.orig)
        raise JoblyError.validation(f"Invalid job data for job: {job_id}") from e

    if row is None:
        db.rollback()
        raise JoblyError.not_found(f"No job: {job_id}")

    db.commit()
    logger.info("Updated job %s (%s)", job_id, ", ".join(sorted(data)))
    return _job_projection(row)


def remove(db: Session, job_id: int) -> None:
    """Delete a job. Raises a not-found error if there is no such job."""
    row = db.execute(
        text("DELETE FROM jobs WHERE id = :p1 RETURNING id"),
        {"p1": job_id},
    ).first()

    if row is None:
        db.rollback()
        raise JoblyError.not_found(f"No job: {job_id}")

    db.commit()
    logger.info("Deleted job %s", job_id)
