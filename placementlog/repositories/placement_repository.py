"""
Placement repository - placement events, branch tallies and their aggregates.
"""
from datetime import date
from typing import List, Sequence, Tuple

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from placementlog.models.placement import PlacementBranchRecord, PlacementCompany
from placementlog.repositories.base import BaseRepository
from placementlog.repositories.protocols import GroupedTotal


class PlacementRepository(BaseRepository[PlacementCompany]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, PlacementCompany)

    async def create_with_branch_counts(
        self,
        *,
        company: str,
        ctc: float,
        placement_date: date,
        branch_counts: Sequence[Tuple[str, int]],
    ) -> PlacementCompany:
        """
        Insert the event and its tallies in one transaction.

        If either insert fails, nothing is committed.
        """
        placement = PlacementCompany(
            company=company,
            ctc=ctc,
            placement_date=placement_date,
            branch_records=[
                PlacementBranchRecord(branch=branch, count=count)
                for branch, count in branch_counts
            ],
        )
        self.db.add(placement)
        try:
            await self.db.flush()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            raise self._store_error("insert", exc) from exc
        await self._commit("insert")
        return await self._get_with_branches(placement.id)

    async def list_newest_first(self) -> List[PlacementCompany]:
        result = await self._execute(
            "fetch",
            select(PlacementCompany)
            .options(selectinload(PlacementCompany.branch_records))
            .order_by(PlacementCompany.placement_date.desc(), PlacementCompany.id.desc()),
        )
        return list(result.scalars().all())

    async def company_branch_totals(self) -> List[GroupedTotal]:
        """SUM(count) grouped by (company, branch)."""
        return await self._grouped_totals(PlacementCompany.company, PlacementBranchRecord.branch)

    async def branch_company_totals(self) -> List[GroupedTotal]:
        """SUM(count) grouped by (branch, company)."""
        return await self._grouped_totals(PlacementBranchRecord.branch, PlacementCompany.company)

    async def _grouped_totals(self, outer, inner) -> List[GroupedTotal]:
        result = await self._execute(
            "aggregate",
            select(outer, inner, func.sum(PlacementBranchRecord.count))
            .select_from(PlacementCompany)
            .join(PlacementBranchRecord, PlacementBranchRecord.placement_id == PlacementCompany.id)
            .group_by(outer, inner)
            .order_by(outer, inner),
        )
        return [(key, counterpart, int(total)) for key, counterpart, total in result.all()]

    async def _get_with_branches(self, placement_id: int) -> PlacementCompany:
        result = await self._execute(
            "fetch",
            select(PlacementCompany)
            .options(selectinload(PlacementCompany.branch_records))
            .where(PlacementCompany.id == placement_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one()
