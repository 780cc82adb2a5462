"""PostgreSQL repository implementations."""

from quotes.persistence.repository.like import PostgresLikeRepository
from quotes.persistence.repository.quote import PostgresQuoteRepository

__all__ = [
    "PostgresQuoteRepository",
    "PostgresLikeRepository",
]
