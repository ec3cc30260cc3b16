from sqlalchemy import Column, Integer, String, Text, CheckConstraint
from sqlalchemy.orm import relationship

from jobly.database import Base


class Company(Base):
    """Employer that job postings belong to.

    Only the foreign-key target of ``jobs.company_handle``; the API exposes
    no company operations.
    """
    __tablename__ = "companies"

    handle = Column(String(25), primary_key=True)
    name = Column(Text, unique=True, nullable=False)
    num_employees = Column(Integer, nullable=True)
    description = Column(Text, nullable=False, default="")
    logo_url = Column(Text, nullable=True)

    jobs = relationship("Job", back_populates="company", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),
    )
