from jobly.models.company import Company
from jobly.models.user import User
from jobly.models.job import Job
from jobly.models.application import Application

__all__ = ["Company", "User", "Job", "Application"]
