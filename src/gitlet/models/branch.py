"""Branch domain models for Gitlet.

Branch is the persisted named pointer; BranchInfo is what listing returns.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class Branch(BaseModel):
    """A named, movable pointer into the commit graph.

    ``head`` holds a commit id rather than a live reference, so branches
    sharing ancestors never alias mutable nodes. It is None only before
    the first commit.
    """

    name: str
    head: Optional[str] = None


class BranchInfo(BaseModel):
    """Branch listing entry."""

    name: str
    commit_id: Optional[str] = None
    is_current: bool = False
