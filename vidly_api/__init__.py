"""Vidly video-rental REST API."""
