from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import ASCENDING

from .collections import (
    DISLIKES_COLLECTION,
    LIKES_COLLECTION,
    MATCHES_COLLECTION,
    PROFILES_COLLECTION,
)


async def ensure_profiles_indexes(db: AsyncIOMotorDatabase) -> None:
    await db[PROFILES_COLLECTION].create_index("userId", name="profiles_user_id_unique", unique=True)


async def ensure_likes_indexes(db: AsyncIOMotorDatabase) -> None:
    collection = db[LIKES_COLLECTION]
    await collection.create_index(
        [("likerId", ASCENDING), ("likedId", ASCENDING)],
        name="likes_liker_liked_unique",
        unique=True,
    )


async def ensure_matches_indexes(db: AsyncIOMotorDatabase) -> None:
    collection = db[MATCHES_COLLECTION]
    # One match per unordered pair; concurrent reciprocal likes race on this index
    await collection.create_index("pairKey", name="matches_pair_key_unique", unique=True)
    await collection.create_index("user1Id", name="matches_user1_idx")
    await collection.create_index("user2Id", name="matches_user2_idx")


async def ensure_dislikes_indexes(db: AsyncIOMotorDatabase) -> None:
    await db[DISLIKES_COLLECTION].create_index(
        [("dislikerId", ASCENDING), ("dislikedId", ASCENDING)],
        name="dislikes_pair_unique",
        unique=True,
    )


def get_profiles_collection(db: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    return db[PROFILES_COLLECTION]


def get_likes_collection(db: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    return db[LIKES_COLLECTION]


def get_matches_collection(db: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    return db[MATCHES_COLLECTION]


def get_dislikes_collection(db: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    return db[DISLIKES_COLLECTION]


__all__ = [
    "ensure_dislikes_indexes",
    "ensure_likes_indexes",
    "ensure_matches_indexes",
    "ensure_profiles_indexes",
    "get_dislikes_collection",
    "get_likes_collection",
    "get_matches_collection",
    "get_profiles_collection",
]
