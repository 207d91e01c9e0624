"""
teamgen/models/__init__.py - Export tất cả models
"""
from .group import Group
from .match import Match

__all__ = [
    "Group",
    "Match",
]
