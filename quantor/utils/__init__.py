"""Shared utilities package."""

from .utils import get_project_root

__all__ = ["get_project_root"]
