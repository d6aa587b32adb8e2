"""
Clients package

- launch_client: async HTTP client for the launches API
"""

from .launch_client import LaunchClient, LaunchClientError

__all__ = ["LaunchClient", "LaunchClientError"]
