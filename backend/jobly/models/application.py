from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from jobly.database import Base


class Application(Base):
    __tablename__ = "applications"

    # Composite primary key: one application per (username, job_id)
    username = Column(
        String(25), ForeignKey("users.username", ondelete="CASCADE"), primary_key=True
    )
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), primary_key=True)

    user = relationship("User", back_populates="applications")
    job = relationship("Job", back_populates="applications")
