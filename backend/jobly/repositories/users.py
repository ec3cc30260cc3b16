"""Data access for users and their job applications.

Functions take a SQLAlchemy Session, issue parameterized SQL through
``text()``, and return plain dicts keyed the way the API spells fields
(``firstName``, ``isAdmin``, ...). The password hash never leaves this module.
"""

import logging
from itertools import groupby
from operator import itemgetter

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.errors import JoblyError
from jobly.repositories.sql import bind_name, sql_for_partial_update
from jobly.services.auth import dummy_verify, hash_password, verify_password

logger = logging.getLogger(__name__)

USER_COLUMNS = (
    'username, first_name AS "firstName", last_name AS "lastName", '
    'email, is_admin AS "isAdmin"'
)

UPDATABLE_FIELDS = {"firstName", "lastName", "password", "email", "isAdmin"}

COLUMN_NAMES = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}


def _user_projection(row) -> dict:
    return {
        "username": row["username"],
        "firstName": row["firstName"],
        "lastName": row["lastName"],
        "email": row["email"],
        "isAdmin": bool(row["isAdmin"]),
    }


def _group_user_rows(rows) -> list[dict]:
    """Fold user/application join rows into one dict per user.

    Rows must be ordered by username. Users without applications come back
    from the LEFT JOIN with a NULL job id and get an empty ``jobs`` list.
    """
    users = []
    for _, user_rows in groupby(rows, key=itemgetter("username")):
        user_rows = list(user_rows)
        user = _user_projection(user_rows[0])
        user["jobs"] = [r["jobId"] for r in user_rows if r["jobId"] is not None]
        users.append(user)
    return users


def authenticate(db: Session, username: str, password: str) -> dict:
    """Return the user for a username/password pair.

    Raises an unauthorized error for an unknown username or a wrong password
    alike, so callers can't tell which one it was.
    """
    row = db.execute(
        text(f"""SELECT password,
                        {USER_COLUMNS}
                 FROM users
                 WHERE username = :p1"""),
        {"p1": username},
    ).mappings().first()

    if row is None:
        dummy_verify()
    elif verify_password(password, row["password"]):
        return _user_projection(row)

    raise JoblyError.unauthorized("Invalid username/password")


def register(db: Session, data: dict) -> dict:
    """Create a user from {username, password, firstName, lastName, email, isAdmin}.

    Raises a validation error if the username is taken.
    """
    username = data["username"]
    duplicate = db.execute(
        text("SELECT username FROM users WHERE username = :p1"),
        {"p1": username},
    ).first()
    if duplicate:
        raise JoblyError.validation(f"Duplicate username: {username}")

    params = {
        "p1": username,
        "p2": hash_password(data["password"]),
        "p3": data["firstName"],
        "p4": data["lastName"],
        "p5": data["email"],
        "p6": bool(data.get("isAdmin", False)),
    }
    try:
        row = db.execute(
            text(f"""INSERT INTO users
                     (username, password, first_name, last_name, email, is_admin)
                     VALUES (:p1, :p2, :p3, :p4, :p5, :p6)
                     RETURNING {USER_COLUMNS}"""),
            params,
        ).mappings().one()
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Registration of %s lost a race with another insert", username)
        raise JoblyError.validation(f"Duplicate username: {username}") from e

    logger.info("Registered user %s", username)
    return _user_projection(row)


def find_all(db: Session) -> list[dict]:
    """All users ordered by username, each with the job ids they applied to."""
    rows = db.execute(
        text("""SELECT u.username,
                       u.first_name AS "firstName",
                       u.last_name AS "lastName",
                       u.email,
                       u.is_admin AS "isAdmin",
                       a.job_id AS "jobId"
                FROM users u
                LEFT JOIN applications a ON a.username = u.username
                ORDER BY u.username, a.job_id""")
    ).mappings().all()
    return _group_user_rows(rows)


def get(db: Session, username: str) -> dict:
    """One user with the job ids they applied to.

    Raises a not-found error if there is no such user.
    """
    rows = db.execute(
        text("""SELECT u.username,
                       u.first_name AS "firstName",
                       u.last_name AS "lastName",
                       u.email,
                       u.is_admin AS "isAdmin",
                       a.job_id AS "jobId"
                FROM users u
                LEFT JOIN applications a ON a.username = u.username
                WHERE u.username = :p1
                ORDER BY a.job_id"""),
        {"p1": username},
    ).mappings().all()

    if not rows:
        raise JoblyError.not_found(f"No user: {username}")
    return _group_user_rows(rows)[0]


def update(db: Session, username: str, data: dict) -> dict:
    """Partially update a user; only the supplied fields change.

    Data can include {firstName, lastName, password, email, isAdmin}. A new
    password is hashed before it is stored. Callers must have decided the
    caller is allowed to set these fields, isAdmin in particular.
    """
    unknown = set(data) - UPDATABLE_FIELDS
    if unknown:
        raise JoblyError.validation(f"Cannot update fields: {', '.join(sorted(unknown))}")

    data = dict(data)
    if "password" in data:
        if not data["password"]:
            raise JoblyError.validation("Password must not be empty")
        data["password"] = hash_password(data["password"])

    set_clause = sql_for_partial_update(data, COLUMN_NAMES)
    username_bind = bind_name(len(set_clause.values) + 1)
    params = set_clause.params()
    params[username_bind] = username

    try:
        row = db.execute(
            text(f"""UPDATE users
                     SET {set_clause.sql}
                     WHERE username = :{username_bind}
                     RETURNING {USER_COLUMNS}"""),
            params,
        ).mappings().first()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Rejected update of user %s: %s", username, e.orig)
        raise JoblyError.validation(f"Invalid user data for user: {username}") from e

    if row is None:
        db.rollback()
        raise JoblyError.not_found(f"No user: {username}")

    db.commit()
    logger.info("Updated user %s (%s)", username, ", ".join(sorted(data)))
    return _user_projection(row)


def remove(db: Session, username: str) -> None:
    """Delete a user. Raises a not-found error if there is no such user."""
    row = db.execute(
        text("DELETE FROM users WHERE username = :p1 RETURNING username"),
        {"p1": username},
    ).first()

    if row is None:
        db.rollback()
        raise JoblyError.not_found(f"No user: {username}")

    db.commit()
    logger.info("Deleted user %s", username)


def _check_can_apply(db: Session, username: str, job_id: int) -> None:
    """Raise if the user or job is missing or the pair is already recorded."""
    check = db.execute(
        text("""SELECT EXISTS (SELECT 1 FROM users WHERE username = :p1) AS "userExists",
                       EXISTS (SELECT 1 FROM jobs WHERE id = :p2) AS "jobExists",
                       EXISTS (SELECT 1 FROM applications
                               WHERE username = :p1 AND job_id = :p2) AS "applied"
                """),
        {"p1": username, "p2": job_id},
    ).mappings().one()

    if not check["userExists"]:
        raise JoblyError.not_found(f"No user: {username}")
    if not check["jobExists"]:
        raise JoblyError.not_found(f"No job: {job_id}")
    if check["applied"]:
        raise JoblyError.conflict(f"{username} has already applied to job {job_id}")


def apply(db: Session, username: str, job_id: int) -> dict:
    """Record that a user applied to a job.

    One read checks that the user and the job exist and that the pair isn't
    already recorded, then one insert adds it. The composite primary key on
    applications catches two identical applies racing past the check; that
    violation is reported as the same conflict. A user or job deleted between
    the check and the insert is reported as not found.

    Returns {username, jobId}.
    """
    _check_can_apply(db, username, job_id)

    try:
        row = db.execute(
            text("""INSERT INTO applications (username, job_id)
                    VALUES (:p1, :p2)
                    RETURNING username, job_id AS "jobId"
                """),
            {"p1": username, "p2": job_id},
        ).mappings().one()
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Application %s -> job %s rejected at insert: %s", username, job_id, e.orig)
        # The user or job may have been deleted since the first check
        _check_can_apply(db, username, job_id)
        raise JoblyError.conflict(f"{username} has already applied to job {job_id}") from e

    logger.info("User %s applied to job %s", username, job_id)
    return {"username": row["username"], "jobId": row["jobId"]}
