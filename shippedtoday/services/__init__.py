"""
Services package

Contains business logic services:
- content_filter: sanitization, spam patterns and content hashing
- submission_guard: cooldown, rate limit and duplicate tracking
- launch_service: launch listing and the submission pipeline
"""

from . import content_filter
from .submission_guard import SubmissionGuard
from .launch_service import LaunchService, launch_service

__all__ = [
    "content_filter",
    "SubmissionGuard",
    "LaunchService",
    "launch_service",
]
