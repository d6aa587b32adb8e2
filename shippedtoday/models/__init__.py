"""
Data models package

- database: database models (SQLAlchemy ORM)
- schemas: data transfer objects (Pydantic)
"""

from .database import Base, LaunchRecord
from .schemas import ErrorResponse, Launch, LaunchListResponse, LaunchSubmission

__all__ = [
    # Database models
    "Base",
    "LaunchRecord",
    # Schemas
    "Launch",
    "LaunchSubmission",
    "LaunchListResponse",
    "ErrorResponse",
]
