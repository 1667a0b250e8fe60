"""
Unified data model exports for relnames.

Example:
    >>> from relnames.models import BranchName, TagName, Version
"""

from __future__ import annotations

from relnames.models.version import Version
from relnames.models.tag_name import TagName
from relnames.models.branch_name import BranchName, BranchShape, safe_branch_name

__all__ = [
    "Version",
    "TagName",
    "BranchName",
    "BranchShape",
    "safe_branch_name",
]
