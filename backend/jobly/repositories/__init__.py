"""Data-access layer: one module per entity, plus the shared SQL builders.

Routers call these functions with a Session and get plain dicts back.
"""

from jobly.repositories import jobs, users

__all__ = ["jobs", "users"]
