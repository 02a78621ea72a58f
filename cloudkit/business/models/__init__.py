"""Data models for business directory resources.

Architecture:
    Pydantic v2 models used at the (de)serialization boundary. All models are
    immutable (frozen=True) so results can be shared between concurrent
    sub-queries without copying.

Design Decisions:
    - camelCase aliases: parse API payloads as-is, expose snake_case attributes
    - Location keeps unknown fields: read masks decide what the API returns
    - PageAdmins validates admin_count against the admin list
"""

from .account import Account, Accounts
from .admin import Admin, Admins, PageAdmins
from .location import Location
from .review import ReviewSummary

__all__ = [
    "Account",
    "Accounts",
    "Admin",
    "Admins",
    "Location",
    "PageAdmins",
    "ReviewSummary",
]
