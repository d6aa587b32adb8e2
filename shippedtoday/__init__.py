"""
ShippedToday - community feed of product launches

A FastAPI service where users submit a launch (title, URL, description,
tags) and browse past submissions newest first.
"""

__version__ = "1.0.0"

__all__ = []
