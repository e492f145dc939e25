"""
Top-level package for the User Records API.

The service lives in ``user_records_api.app``; a small HTTP client for
it lives in ``user_records_api.client``.
"""

__all__ = []
