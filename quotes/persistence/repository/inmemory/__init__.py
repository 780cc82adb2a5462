"""In-memory repository implementations for testing."""

from .like import InMemoryLikeRepository
from .quote import InMemoryQuoteRepository
from .store import InMemoryStore

__all__ = [
    "InMemoryLikeRepository",
    "InMemoryQuoteRepository",
    "InMemoryStore",
]
