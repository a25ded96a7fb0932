"""
Version 1 of the API.

Mounted under ``/api`` for compatibility with existing clients.
"""
