"""Tests for the SQL repositories against an in-memory SQLite database."""
import uuid
from datetime import date

import pytest
from sqlalchemy import func, select

from placementlog.core.exceptions import IdentifierAlreadyExistsException, StoreException
from placementlog.models.placement import PlacementBranchRecord, PlacementCompany
from placementlog.repositories.admin_repository import AdminRepository
from placementlog.repositories.placement_repository import PlacementRepository
from placementlog.repositories.post_repository import PostRepository
from placementlog.repositories.user_repository import UserRepository

pytestmark = pytest.mark.anyio

BODY = {"company": "Acme", "role": "SDE", "rounds": []}


@pytest.fixture
async def user(db_session):
    return await UserRepository(db_session).create(
        registration_number="22bcs1111",
        password_hash="hash",
        display_name="Asha",
    )


async def test_user_roundtrip(db_session, user):
    repo = UserRepository(db_session)

    found = await repo.get_by_registration_number("22bcs1111")

    assert found.id == user.id
    assert found.created_at is not None
    assert await repo.registration_number_exists("22bcs1111") is True
    assert await repo.registration_number_exists("22bcs2222") is False


async def test_duplicate_registration_number_hits_unique_constraint(db_session, user):
    repo = UserRepository(db_session)

    with pytest.raises(IdentifierAlreadyExistsException):
        await repo.create(registration_number="22bcs1111", password_hash="other")

    # Session stays usable after the rollback
    assert await repo.get_by_registration_number("22bcs1111") is not None


async def test_duplicate_admin_username(db_session):
    repo = AdminRepository(db_session)
    await repo.create(username="root", password_hash="hash")

    with pytest.raises(IdentifierAlreadyExistsException):
        await repo.create(username="root", password_hash="hash")
    assert await repo.username_exists("root") is True


async def test_post_create_and_owner_scoped_update(db_session, user):
    repo = PostRepository(db_session)
    post = await repo.create(user_id=user.id, post_body=BODY)
    await repo.set_reviewed(post.id, True)

    stranger = await UserRepository(db_session).create(
        registration_number="22mec2222",
        password_hash="hash",
    )
    assert await repo.update_body(post.id, stranger.id, {"company": "X", "role": "Y"}) is None

    updated = await repo.update_body(post.id, user.id, {"company": "Acme", "role": "SRE"})
    assert updated.post_body == {"company": "Acme", "role": "SRE"}
    assert updated.reviewed is False


async def test_edit_after_review_in_same_session_resets_flag(db_session, user):
    repo = PostRepository(db_session)
    post = await repo.create(user_id=user.id, post_body=BODY)
    await repo.set_reviewed(post.id, True)

    assert post.reviewed is True
    assert [p.id for p in await repo.list_reviewed()] == [post.id]

    edited = await repo.update_body(post.id, user.id, {"company": "Acme", "role": "SRE"})

    assert edited.reviewed is False
    assert await repo.list_reviewed() == []


async def test_deleted_post_leaves_session(db_session, user):
    repo = PostRepository(db_session)
    post = await repo.create(user_id=user.id, post_body=BODY)

    assert await repo.delete(post.id) is True
    assert await repo.get_by_id(post.id) is None


async def test_post_review_and_listings(session_maker, user):
    async with session_maker() as session:
        repo = PostRepository(session)
        hidden = await repo.create(user_id=user.id, post_body=BODY)
        shown = await repo.create(user_id=user.id, post_body=BODY)
        assert await repo.set_reviewed(shown.id, True) is True

    async with session_maker() as session:
        repo = PostRepository(session)
        assert [p.id for p in await repo.list_reviewed()] == [shown.id]
        assert [p.id for p in await repo.list_reviewed_by_user(user.id)] == [shown.id]
        assert [p.id for p in await repo.list_all_newest_first()] == [shown.id, hidden.id]


async def test_set_reviewed_on_missing_post(db_session):
    assert await PostRepository(db_session).set_reviewed(uuid.uuid4(), True) is False


async def test_post_deletes(db_session, user):
    repo = PostRepository(db_session)
    post = await repo.create(user_id=user.id, post_body=BODY)
    other = await repo.create(user_id=user.id, post_body=BODY)

    assert await repo.delete_owned(post.id, uuid.uuid4()) is False
    assert await repo.delete_owned(post.id, user.id) is True
    assert await repo.delete(other.id) is True
    assert await repo.delete(other.id) is False


async def test_placement_insert_with_tallies(db_session):
    repo = PlacementRepository(db_session)

    placement = await repo.create_with_branch_counts(
        company="Acme",
        ctc=12.5,
        placement_date=date(2024, 3, 1),
        branch_counts=[("bcs", 2), ("mec", 1)],
    )

    assert isinstance(placement.id, int)
    assert placement.ctc == 12.5
    assert [(r.branch, r.count) for r in placement.branch_records] == [("bcs", 2), ("mec", 1)]


async def test_placement_insert_is_atomic(db_session):
    repo = PlacementRepository(db_session)

    with pytest.raises(StoreException):
        await repo.create_with_branch_counts(
            company="Acme",
            ctc=12.5,
            placement_date=date(2024, 3, 1),
            branch_counts=[("bcs", 2), ("mec", None)],
        )

    companies = await db_session.scalar(select(func.count()).select_from(PlacementCompany))
    records = await db_session.scalar(select(func.count()).select_from(PlacementBranchRecord))
    assert (companies, records) == (0, 0)


async def test_placement_listing_and_grouped_totals(db_session):
    repo = PlacementRepository(db_session)
    await repo.create_with_branch_counts(
        company="Zeta", ctc=9, placement_date=date(2023, 6, 1), branch_counts=[("bcs", 1)],
    )
    await repo.create_with_branch_counts(
        company="Acme", ctc=10, placement_date=date(2024, 1, 1), branch_counts=[("mec", 1), ("bcs", 2)],
    )
    await repo.create_with_branch_counts(
        company="Acme", ctc=11, placement_date=date(2024, 2, 1), branch_counts=[("bcs", 3)],
    )

    listed = await repo.list_newest_first()
    assert [(p.company, p.placement_date) for p in listed] == [
        ("Acme", date(2024, 2, 1)),
        ("Acme", date(2024, 1, 1)),
        ("Zeta", date(2023, 6, 1)),
    ]

    assert await repo.company_branch_totals() == [
        ("Acme", "bcs", 5),
        ("Acme", "mec", 1),
        ("Zeta", "bcs", 1),
    ]
    assert await repo.branch_company_totals() == [
        ("bcs", "Acme", 5),
        ("bcs", "Zeta", 1),
        ("mec", "Acme", 1),
    ]
