"""
Placement statistics routes (public, read-only).

Recording placements is an admin action, see ``admin.py``.
"""
from typing import List

from fastapi import APIRouter, Depends

from placementlog.api.deps import get_placement_service
from placementlog.schemas.base import Envelope, ok
from placementlog.schemas.placement import (
    BranchCompanyMap,
    CompanyBranchMap,
    PlacementResponse,
)
from placementlog.services.placement_service import PlacementService

router = APIRouter(prefix="/placements", tags=["placements"])


@router.get("", response_model=Envelope[List[PlacementResponse]])
async def list_placements(
    placement_service: PlacementService = Depends(get_placement_service),
):
    """All placement events, newest first, with branch tallies."""
    return ok(await placement_service.list_all())


@router.get("/company-branch", response_model=Envelope[CompanyBranchMap])
async def company_branch_map(
    placement_service: PlacementService = Depends(get_placement_service),
):
    """Students placed per branch, grouped by company."""
    return ok(await placement_service.company_branch_map())


@router.get("/branch-company", response_model=Envelope[BranchCompanyMap])
async def branch_company_map(
    placement_service: PlacementService = Depends(get_placement_service),
):
    """Students placed per company, grouped by branch."""
    return ok(await placement_service.branch_company_map())
