from sqlalchemy import Column, String, Boolean, Text
from sqlalchemy.orm import relationship

from jobly.database import Base


class User(Base):
    __tablename__ = "users"

    username = Column(String(25), primary_key=True)
    password = Column(Text, nullable=False)  # bcrypt hash, never returned
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False)

    applications = relationship("Application", back_populates="user", cascade="all, delete-orphan")
