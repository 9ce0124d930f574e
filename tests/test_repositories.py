from __future__ import annotations

import pytest

from matchengine.db.collections import LIKES_COLLECTION, MATCHES_COLLECTION
from matchengine.models.likes import Like, Match
from matchengine.repositories import InMemoryMatchRepository, MatchRepository
from matchengine.repositories.exceptions import (
    DuplicateKeyRepositoryError,
    NotFoundRepositoryError,
)


def test_backends_satisfy_protocol(memory_repo) -> None:
    assert isinstance(memory_repo, MatchRepository)


@pytest.mark.asyncio
async def test_profile_crud(repo, make_profile) -> None:
    alice = make_profile("alice", age=27)
    await repo.insert_profile(alice)

    with pytest.raises(DuplicateKeyRepositoryError):
        await repo.insert_profile(make_profile("alice"))

    fetched = await repo.get_profile_by_user_id("alice")
    assert fetched == alice

    await repo.replace_profile(alice.model_copy(update={"age": 28}))
    assert (await repo.get_profile_by_user_id("alice")).age == 28

    with pytest.raises(NotFoundRepositoryError):
        await repo.replace_profile(make_profile("ghost"))
    assert await repo.get_profile_by_user_id("ghost") is None


@pytest.mark.asyncio
async def test_profiles_keep_insertion_order(repo, make_profile) -> None:
    for user_id in ("zoe", "adam", "mia"):
        await repo.insert_profile(make_profile(user_id))

    assert [p.user_id for p in await repo.list_profiles()] == ["zoe", "adam", "mia"]


@pytest.mark.asyncio
async def test_like_filters(repo) -> None:
    assert await repo.append_like(Like(liker_id="a", liked_id="b", created_at=1)) is True
    assert await repo.append_like(Like(liker_id="a", liked_id="b", created_at=2)) is False
    await repo.append_like(Like(liker_id="c", liked_id="b"))

    assert [(l.liker_id, l.liked_id) for l in await repo.list_likes()] == [("a", "b"), ("c", "b")]
    assert len(await repo.list_likes(liked_id="b")) == 2
    assert [l.liker_id for l in await repo.list_likes(liker_id="c")] == ["c"]
    assert (await repo.list_likes(liker_id="a"))[0].created_at == 1


@pytest.mark.asyncio
async def test_match_lookup_is_unordered(repo) -> None:
    stored, created = await repo.append_match(Match(user1_id="a", user2_id="b"))
    duplicate, duplicate_created = await repo.append_match(Match(user1_id="b", user2_id="a"))
    await repo.append_match(Match(user1_id="c", user2_id="a"))

    assert created is True
    assert duplicate_created is False
    assert duplicate.id == stored.id
    assert (await repo.get_match_for_pair("b", "a")).id == stored.id
    assert await repo.get_match_for_pair("b", "c") is None
    assert len(await repo.list_matches(user_id="a")) == 2
    assert len(await repo.list_matches(user_id="b")) == 1


@pytest.mark.asyncio
async def test_mongo_documents_use_storage_aliases(mongo_repo) -> None:
    await mongo_repo.append_like(Like(liker_id="a", liked_id="b", created_at=5))
    match, _ = await mongo_repo.append_match(Match(user1_id="b", user2_id="a"))

    like_doc = await mongo_repo.database[LIKES_COLLECTION].find_one({"likerId": "a"})
    match_doc = await mongo_repo.database[MATCHES_COLLECTION].find_one({"_id": match.id})

    assert like_doc["likedId"] == "b"
    assert like_doc["createdAt"] == 5
    assert match_doc["pairKey"] == "1:a|b"
    assert match_doc["user1Id"] == "b"


@pytest.mark.asyncio
async def test_memory_seed_keeps_raw_duplicates(make_profile) -> None:
    repo = InMemoryMatchRepository(
        profiles=[make_profile("a")],
        likes=[Like(liker_id="a", liked_id="b"), Like(liker_id="a", liked_id="b")],
    )

    assert len(await repo.list_likes()) == 2
    assert await repo.append_like(Like(liker_id="a", liked_id="b")) is False
