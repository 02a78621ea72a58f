"""Business directory endpoint specs and response adapters.

Each module exposes ``SPEC`` (URL construction) and ``Adapter`` (response
parsing) for one resource.
"""

from . import accounts, admins, location, locations, reviews

__all__ = ["accounts", "admins", "location", "locations", "reviews"]
