"""
Placement models - a recruiting event and its per-branch tallies.
"""
from datetime import date, datetime, timezone
from typing import List
from sqlalchemy import Date, DateTime, ForeignKey, Integer, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from placementlog.core.database import Base


class PlacementCompany(Base):
    """
    One placement event: a company hired students at a given CTC on a date.

    Uses a sequential integer id rather than a UUID. Immutable once recorded.
    """

    __tablename__ = "placement_companies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    ctc: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    placement_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    branch_records: Mapped[List["PlacementBranchRecord"]] = relationship(
        "PlacementBranchRecord",
        back_populates="placement",
        cascade="all, delete-orphan",
        order_by="PlacementBranchRecord.branch",
    )

    def __repr__(self) -> str:
        return f"<PlacementCompany {self.company} {self.placement_date}>"


class PlacementBranchRecord(Base):
    """Number of students from one branch placed in one event."""

    __tablename__ = "placement_branch_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    placement_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("placement_companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    branch: Mapped[str] = mapped_column(String(8), nullable=False, index=True)
    count: Mapped[int] = mapped_column(Integer, nullable=False)

    placement: Mapped["PlacementCompany"] = relationship(
        "PlacementCompany",
        back_populates="branch_records",
    )

    def __repr__(self) -> str:
        return f"<PlacementBranchRecord {self.branch}={self.count}>"
