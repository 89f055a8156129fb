"""Reusable interaction components shared by the games."""

from .search_dropdown import SearchDropdown

__all__ = ['SearchDropdown']
