from sqlalchemy import Column, Integer, String, Text, Numeric, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship

from jobly.database import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=False)
    salary = Column(Integer, nullable=True)
    equity = Column(Numeric, nullable=True)  # fraction in [0, 1]
    company_handle = Column(
        String(25), ForeignKey("companies.handle", ondelete="CASCADE"), nullable=False
    )

    company = relationship("Company", back_populates="jobs")
    applications = relationship("Application", back_populates="job", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        CheckConstraint("equity >= 0 AND equity <= 1.0", name="ck_jobs_equity"),
        Index("ix_jobs_company_handle", "company_handle"),
    )
