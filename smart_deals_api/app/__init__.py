"""
Application package initializer.

The API serves two resources, deals (product listings) and bids (offers
against listings), stored in two MongoDB collections.  Each resource has
its schemas in ``schemas``, its store queries in ``services`` and its
routes in ``api/endpoints``.
"""

from .main import app  # noqa: F401
