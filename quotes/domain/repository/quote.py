"""Quote repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from quotes.domain.model.quote import Quote
from quotes.domain.value import QuoteId


class QuoteRepository(ABC):
    """Repository for Quote aggregate.

    Defines the contract for quote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, quote_id: QuoteId) -> Optional[Quote]:
        """Find a quote by ID.

        Args:
            quote_id: The quote's unique identifier

        Returns:
            The quote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_random(self) -> Optional[Quote]:
        """Pick one quote uniformly at random.

        Returns:
            A random quote, or None if there are no quotes
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Quote]:
        """Find quotes ordered by creation time (newest first).

        Args:
            search: Case-insensitive substring matched against text or author
            limit: Maximum number of quotes to return
            offset: Number of quotes to skip

        Returns:
            List of quotes matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, search: Optional[str] = None) -> int:
        """Count quotes matching the search filter.

        Args:
            search: Case-insensitive substring matched against text or author

        Returns:
            Total number of matching quotes
        """
        pass

    @abstractmethod
    async def save(self, quote: Quote) -> Quote:
        """Insert a new quote.

        Args:
            quote: The quote to insert

        Returns:
            The saved quote
        """
        pass

    @abstractmethod
    async def update(
        self,
        quote_id: QuoteId,
        text: Optional[str] = None,
        author: Optional[str] = None,
    ) -> Optional[Quote]:
        """Update text and/or author in a single conditional statement.

        Fields passed as None keep their current value. The updated timestamp
        is always refreshed.

        Args:
            quote_id: ID of the quote to update
            text: New text, or None to keep the current one
            author: New author, or None to keep the current one

        Returns:
            Updated quote, or None if the quote doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, quote_id: QuoteId) -> bool:
        """Delete a quote (hard delete, likes cascade).

        Args:
            quote_id: The quote ID to delete

        Returns:
            True if a quote was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def find_top(self, created_since: Optional[datetime] = None) -> Optional[Quote]:
        """Find the most liked quote.

        Ordered by likes_count DESC, then created_at DESC.

        Args:
            created_since: Only consider quotes created at or after this time
                (None for all quotes)

        Returns:
            The top quote, or None if no quote qualifies
        """
        pass
