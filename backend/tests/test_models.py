"""Tests for SQLAlchemy models and their constraints."""

import pytest
from sqlalchemy import func, select, text
from sqlalchemy.exc import IntegrityError

from jobly.models import Application, Company, Job, User


def count(db, model):
    return db.execute(select(func.count()).select_from(model)).scalar_one()


class TestUserModel:
    """Tests for the User model."""

    def test_is_admin_defaults_to_false(self, db):
        user = User(
            username="plain",
            password="hash",
            first_name="F",
            last_name="L",
            email="plain@example.com",
        )
        db.add(user)
        db.commit()
        db.refresh(user)

        assert user.is_admin is False

    def test_username_is_unique(self, db, sample_users):
        db.add(
            User(
                username="u1",
                password="hash",
                first_name="F",
                last_name="L",
                email="other@example.com",
            )
        )
        with pytest.raises(IntegrityError):
            db.commit()

    def test_password_required(self, db):
        db.add(User(username="nopass", first_name="F", last_name="L", email="x@example.com"))
        with pytest.raises(IntegrityError):
            db.commit()


class TestJobModel:
    """Tests for the Job model."""

    def test_company_required(self, db, sample_companies):
        db.add(Job(title="orphan", salary=1, equity=0))
        with pytest.raises(IntegrityError):
            db.commit()

    def test_company_must_exist(self, db, sample_companies):
        db.add(Job(title="orphan", salary=1, equity=0, company_handle="nope"))
        with pytest.raises(IntegrityError):
            db.commit()

    def test_negative_salary_rejected(self, db, sample_companies):
        db.add(Job(title="bad", salary=-1, equity=0, company_handle="c1"))
        with pytest.raises(IntegrityError):
            db.commit()

    def test_equity_above_one_rejected(self, db, sample_companies):
        db.add(Job(title="bad", salary=1, equity=1.5, company_handle="c1"))
        with pytest.raises(IntegrityError):
            db.commit()

    def test_negative_equity_rejected(self, db, sample_companies):
        db.add(Job(title="bad", salary=1, equity=-0.5, company_handle="c1"))
        with pytest.raises(IntegrityError):
            db.commit()

    def test_salary_and_equity_nullable(self, db, sample_companies):
        job = Job(title="vague", company_handle="c1")
        db.add(job)
        db.commit()
        db.refresh(job)

        assert job.id is not None
        assert job.salary is None
        assert job.equity is None


class TestApplicationModel:
    """Tests for the Application model."""

    def test_one_application_per_user_and_job(self, db, sample_users, sample_jobs):
        db.add(Application(username="u1", job_id=1))
        db.commit()

        db.add(Application(username="u1", job_id=1))
        with pytest.raises(IntegrityError):
            db.commit()

    def test_job_must_exist(self, db, sample_users, sample_jobs):
        db.add(Application(username="u1", job_id=999))
        with pytest.raises(IntegrityError):
            db.commit()

    def test_deleting_user_removes_applications(self, db, sample_users, sample_jobs):
        db.add_all([Application(username="u2", job_id=1), Application(username="u2", job_id=2)])
        db.commit()

        db.execute(text("DELETE FROM users WHERE username = 'u2'"))
        db.commit()

        assert count(db, Application) == 0
        assert count(db, Job) == 6

    def test_deleting_company_removes_jobs_and_applications(self, db, sample_users, sample_jobs):
        db.add(Application(username="u1", job_id=1))
        db.commit()

        db.execute(text("DELETE FROM companies WHERE handle = 'c1'"))
        db.commit()

        assert count(db, Job) == 4
        assert count(db, Application) == 0
        assert count(db, Company) == 2
