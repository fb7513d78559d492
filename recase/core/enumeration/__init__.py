"""Enumeration module for ReCase."""

from .case_style import CaseStyle

__all__ = [
    "CaseStyle",
]
