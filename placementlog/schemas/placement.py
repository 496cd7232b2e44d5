"""
Placement schemas.
"""
from datetime import date, datetime
from typing import Dict, List, Optional
from pydantic import Field
from placementlog.schemas.base import BaseSchema


class BranchCount(BaseSchema):
    """Students placed from one branch."""

    branch: str
    count: int


class CompanyCount(BaseSchema):
    """Students placed by one company (within a branch view)."""

    company: str
    count: int


class PlacementCreate(BaseSchema):
    """Admin request to record a placement event."""

    company: str = Field(..., max_length=255)
    ctc: float
    placement_date: Optional[date] = None
    students: List[str] = []


class PlacementCreated(BaseSchema):
    """Response after recording a placement event."""

    placement_id: int
    company: str
    ctc: float
    placement_date: date
    branch_counts: List[BranchCount]


class PlacementResponse(BaseSchema):
    """A recorded placement event with its branch tallies."""

    id: int
    company: str
    ctc: float
    placement_date: date
    created_at: datetime
    branch_counts: List[BranchCount] = []


CompanyBranchMap = Dict[str, List[BranchCount]]
BranchCompanyMap = Dict[str, List[CompanyCount]]
