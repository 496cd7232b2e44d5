"""
Placement aggregation service - records placement events and serves
company/branch statistics derived from them.

Branch codes come from the registration number itself: ``22bcs1234`` was
placed from branch ``bcs``.
"""
from collections import Counter
from datetime import date
from typing import Iterable, List, Optional

from placementlog.core.logging import get_logger
from placementlog.models.placement import PlacementCompany
from placementlog.repositories.protocols import PlacementStore
from placementlog.schemas.placement import (
    BranchCompanyMap,
    BranchCount,
    CompanyBranchMap,
    CompanyCount,
    PlacementCreated,
    PlacementResponse,
)

logger = get_logger(__name__)


def branch_from_registration_number(registration_number: str) -> str:
    """
    Return the lowercase branch code (characters 2-4), or "" if too short.

    >>> branch_from_registration_number("22BCS1234")
    'bcs'
    """
    if len(registration_number) >= 5:
        return registration_number[2:5].lower()
    return ""


def count_branches(registration_numbers: Iterable[str]) -> List[BranchCount]:
    """Tally students per branch; numbers too short to carry a branch are dropped."""
    counts = Counter(
        branch
        for branch in map(branch_from_registration_number, registration_numbers)
        if branch
    )
    return [BranchCount(branch=branch, count=count) for branch, count in sorted(counts.items())]


class PlacementService:
    """Handles placement recording and statistics."""

    def __init__(self, placements: PlacementStore):
        self.placements = placements

    async def add_placement(
        self,
        *,
        company: str,
        ctc: float,
        students: Iterable[str],
        placement_date: Optional[date] = None,
    ) -> PlacementCreated:
        """
        Record a placement event with its per-branch tallies.

        The event and all tallies are written atomically.
        """
        placement_date = placement_date or date.today()
        branch_counts = count_branches(students)

        placement = await self.placements.create_with_branch_counts(
            company=company,
            ctc=ctc,
            placement_date=placement_date,
            branch_counts=[(bc.branch, bc.count) for bc in branch_counts],
        )
        logger.info(
            "placement_recorded",
            placement_id=placement.id,
            company=company,
            branches=len(branch_counts),
        )

        return PlacementCreated(
            placement_id=placement.id,
            company=placement.company,
            ctc=placement.ctc,
            placement_date=placement.placement_date,
            branch_counts=branch_counts,
        )

    async def list_all(self) -> List[PlacementResponse]:
        """All events, newest placement date first, tallies attached."""
        return [self._to_response(p) for p in await self.placements.list_newest_first()]

    async def company_branch_map(self) -> CompanyBranchMap:
        """company -> [(branch, total)], branches alphabetical within each company."""
        grouped: CompanyBranchMap = {}
        for company, branch, total in await self.placements.company_branch_totals():
            grouped.setdefault(company, []).append(BranchCount(branch=branch, count=total))
        return grouped

    async def branch_company_map(self) -> BranchCompanyMap:
        """branch -> [(company, total)], companies alphabetical within each branch."""
        grouped: BranchCompanyMap = {}
        for branch, company, total in await self.placements.branch_company_totals():
            grouped.setdefault(branch, []).append(CompanyCount(company=company, count=total))
        return grouped

    def _to_response(self, placement: PlacementCompany) -> PlacementResponse:
        return PlacementResponse(
            id=placement.id,
            company=placement.company,
            ctc=placement.ctc,
            placement_date=placement.placement_date,
            created_at=placement.created_at,
            branch_counts=[
                BranchCount(branch=record.branch, count=record.count)
                for record in placement.branch_records
            ],
        )
