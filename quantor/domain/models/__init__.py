"""Domain models package."""

from .accounts import AccountNode, AccountRecord

__all__ = [
    "AccountNode",
    "AccountRecord",
]
