"""Repository layer abstracting where profiles, likes and matches live."""

from .base import MatchRepository
from .memory import InMemoryMatchRepository
from .mongo import MongoMatchRepository

__all__ = ["InMemoryMatchRepository", "MatchRepository", "MongoMatchRepository"]
