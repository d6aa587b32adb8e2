"""
Controllers package

Contains FastAPI route controllers:
- launch_controller: launch listing and submission endpoints
"""

from .launch_controller import router as launch_router

__all__ = ["launch_router"]
