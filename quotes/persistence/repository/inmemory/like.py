"""In-memory like ledger repository for testing."""

from typing import Sequence

from quotes.domain.error import AlreadyLikedError, NotFoundError
from quotes.domain.model.like import Like
from quotes.domain.model.quote import Quote, utcnow
from quotes.domain.repository.like import LikeRepository
from quotes.domain.value import QuoteId, VisitorId

from .store import InMemoryStore


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def register(self, like: Like) -> Quote:
        """Record a like and increment the quote's counter.

        Raises:
            AlreadyLikedError: If the visitor already liked the quote
            NotFoundError: If the quote doesn't exist
        """
        key = (like.quote_id, like.visitor_id)
        if key in self._store.likes:
            raise AlreadyLikedError(str(like.quote_id), like.visitor_id)

        quote = self._store.quotes.get(like.quote_id)
        if quote is None:
            raise NotFoundError("Quote", str(like.quote_id))

        updated = quote.model_copy(
            update={"likes_count": quote.likes_count + 1, "updated_at": utcnow()}
        )
        self._store.quotes[quote.id] = updated
        self._store.likes[key] = like
        return updated

    async def exists(self, quote_id: QuoteId, visitor_id: VisitorId) -> bool:
        """Check whether a visitor liked a quote."""
        return (quote_id, visitor_id) in self._store.likes

    async def find_liked_quote_ids(
        self, quote_ids: Sequence[QuoteId], visitor_id: VisitorId
    ) -> set[QuoteId]:
        """Find which of the given quotes a visitor liked (batch query)."""
        return {qid for qid in quote_ids if (qid, visitor_id) in self._store.likes}

    async def reset(self) -> int:
        """Zero every counter and delete every ledger entry."""
        removed = len(self._store.likes)
        now = utcnow()
        for quote_id, quote in list(self._store.quotes.items()):
            self._store.quotes[quote_id] = quote.model_copy(
                update={"likes_count": 0, "updated_at": now}
            )
        self._store.likes.clear()
        return removed
