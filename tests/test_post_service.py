"""Tests for the post moderation workflow."""
import uuid

import pytest

from fakes import InMemoryPostStore
from placementlog.core.exceptions import (
    InvalidActionException,
    PostNotFoundException,
    PostNotFoundOrForbiddenException,
    ValidationException,
)
from placementlog.services.post_service import PostService

pytestmark = pytest.mark.anyio

BODY = {"company": "Acme", "role": "SDE", "rounds": [{"content": "DSA round"}]}


@pytest.fixture
def store():
    return InMemoryPostStore()


@pytest.fixture
def service(store):
    return PostService(store)


@pytest.fixture
def owner():
    return str(uuid.uuid4())


async def test_new_post_is_unreviewed_and_hidden(service, owner):
    post = await service.create(owner, BODY)

    assert post.reviewed is False
    assert str(post.user_id) == owner
    assert post.post_body == BODY
    assert await service.list_public() == []


async def test_create_without_owner_is_rejected(service, store):
    with pytest.raises(ValidationException):
        await service.create("", BODY)
    assert store.writes == 0


async def test_create_with_malformed_owner_is_rejected(service):
    with pytest.raises(ValidationException):
        await service.create("not-a-uuid", BODY)


async def test_approve_publishes_post(service, owner):
    post = await service.create(owner, BODY)

    assert await service.review(post.id, "approve") is True

    assert [p.id for p in await service.list_public()] == [post.id]


async def test_reject_hides_approved_post(service, owner):
    post = await service.create(owner, BODY)
    await service.review(post.id, "approve")

    assert await service.review(post.id, "reject") is False

    assert await service.list_public() == []


async def test_review_is_idempotent(service, owner):
    post = await service.create(owner, BODY)

    await service.review(post.id, "approve")
    await service.review(post.id, "approve")

    assert len(await service.list_public()) == 1


@pytest.mark.parametrize("action", ["", "Approve", "publish", "delete"])
async def test_invalid_action_changes_nothing(service, store, owner, action):
    post = await service.create(owner, BODY)
    writes_before = store.writes

    with pytest.raises(InvalidActionException) as exc_info:
        await service.review(post.id, action)

    assert exc_info.value.status_code == 400
    assert store.writes == writes_before
    assert store.rows[post.id].reviewed is False


async def test_review_unknown_post(service):
    with pytest.raises(PostNotFoundException):
        await service.review(uuid.uuid4(), "approve")


async def test_edit_replaces_body_and_resets_review(service, owner):
    post = await service.create(owner, BODY)
    await service.review(post.id, "approve")
    new_body = {"company": "Acme", "role": "SRE", "rounds": []}

    edited = await service.edit(post.id, owner, new_body)

    assert edited.post_body == new_body
    assert edited.reviewed is False
    assert await service.list_public() == []


async def test_edit_by_other_user_looks_like_missing_post(service, store, owner):
    post = await service.create(owner, BODY)

    with pytest.raises(PostNotFoundOrForbiddenException) as foreign:
        await service.edit(post.id, str(uuid.uuid4()), {"company": "X", "role": "Y"})
    with pytest.raises(PostNotFoundOrForbiddenException) as missing:
        await service.edit(uuid.uuid4(), owner, {"company": "X", "role": "Y"})

    assert foreign.value.message == missing.value.message == "post not found or unauthorized"
    assert store.rows[post.id].post_body == BODY


async def test_owner_deletes_own_post_in_any_state(service, store, owner):
    pending = await service.create(owner, BODY)
    approved = await service.create(owner, BODY)
    await service.review(approved.id, "approve")

    await service.delete(pending.id, owner)
    await service.delete(approved.id, owner)

    assert store.rows == {}


async def test_delete_by_other_user_is_refused(service, store, owner):
    post = await service.create(owner, BODY)

    with pytest.raises(PostNotFoundOrForbiddenException):
        await service.delete(post.id, str(uuid.uuid4()))
    assert post.id in store.rows


async def test_admin_deletes_any_post(service, store, owner):
    post = await service.create(owner, BODY)

    await service.delete_as_admin(post.id)

    assert store.rows == {}
    with pytest.raises(PostNotFoundException):
        await service.delete_as_admin(post.id)


async def test_list_own_returns_only_approved_posts_of_owner(service, owner):
    other = str(uuid.uuid4())
    mine_approved = await service.create(owner, BODY)
    await service.create(owner, BODY)
    theirs = await service.create(other, BODY)
    await service.review(mine_approved.id, "approve")
    await service.review(theirs.id, "approve")

    own = await service.list_own(owner)

    assert [p.id for p in own] == [mine_approved.id]


async def test_admin_listing_is_newest_first_and_includes_pending(service, owner):
    first = await service.create(owner, BODY)
    second = await service.create(owner, BODY)
    await service.review(first.id, "approve")

    listed = await service.list_all_for_admin()

    assert [p.id for p in listed] == [second.id, first.id]
    assert [p.reviewed for p in listed] == [False, True]
