"""
Application package.

Each domain (genres, customers, movies, rentals, returns, users) has a
schema module, a service and a router under ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
