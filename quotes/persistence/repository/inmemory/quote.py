"""In-memory quote repository for testing."""

import random
from datetime import datetime
from typing import Optional

from quotes.domain.model.quote import Quote, utcnow
from quotes.domain.repository.quote import QuoteRepository
from quotes.domain.value import QuoteId

from .store import InMemoryStore


class InMemoryQuoteRepository(QuoteRepository):
    """In-memory implementation of QuoteRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    def _matching(self, search: Optional[str]) -> list[Quote]:
        quotes = list(self._store.quotes.values())
        if search:
            needle = search.lower()
            quotes = [
                q
                for q in quotes
                if needle in q.text.lower() or needle in q.author.lower()
            ]
        return quotes

    async def find_by_id(self, quote_id: QuoteId) -> Optional[Quote]:
        """Find a quote by ID."""
        return self._store.quotes.get(quote_id)

    async def find_random(self) -> Optional[Quote]:
        """Pick one quote uniformly at random."""
        if not self._store.quotes:
            return None
        return random.choice(list(self._store.quotes.values()))

    async def find_all(
        self,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Quote]:
        """Find quotes with search filter and pagination."""
        quotes = self._matching(search)
        quotes.sort(key=lambda q: (q.created_at, str(q.id)), reverse=True)
        return quotes[offset : offset + limit]

    async def count(self, search: Optional[str] = None) -> int:
        """Count quotes matching the search filter."""
        return len(self._matching(search))

    async def save(self, quote: Quote) -> Quote:
        """Insert a quote."""
        self._store.quotes[quote.id] = quote
        return quote

    async def update(
        self,
        quote_id: QuoteId,
        text: Optional[str] = None,
        author: Optional[str] = None,
    ) -> Optional[Quote]:
        """Update text and/or author."""
        quote = self._store.quotes.get(quote_id)
        if quote is None:
            return None

        changes: dict[str, object] = {"updated_at": utcnow()}
        if text is not None:
            changes["text"] = text
        if author is not None:
            changes["author"] = author

        updated = quote.model_copy(update=changes)
        self._store.quotes[quote_id] = updated
        return updated

    async def delete(self, quote_id: QuoteId) -> bool:
        """Delete a quote and cascade its likes."""
        if self._store.quotes.pop(quote_id, None) is None:
            return False

        for key in [k for k in self._store.likes if k[0] == quote_id]:
            del self._store.likes[key]
        return True

    async def find_top(self, created_since: Optional[datetime] = None) -> Optional[Quote]:
        """Find the most liked quote, newest first among ties."""
        quotes = list(self._store.quotes.values())
        if created_since is not None:
            quotes = [q for q in quotes if q.created_at >= created_since]
        if not quotes:
            return None
        return max(quotes, key=lambda q: (q.likes_count, q.created_at))
