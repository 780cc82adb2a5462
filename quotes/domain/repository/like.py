"""Like ledger repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence, Set

from quotes.domain.model.like import Like
from quotes.domain.model.quote import Quote
from quotes.domain.value import QuoteId, VisitorId


class LikeRepository(ABC):
    """Repository for the like ledger.

    The ledger owns the denormalized ``likes_count`` of quotes: every method
    that writes ledger entries also adjusts the counters, atomically.
    """

    @abstractmethod
    async def register(self, like: Like) -> Quote:
        """Record a like and increment the quote's counter atomically.

        Either both the ledger entry and the counter increment become
        visible, or neither does.

        Args:
            like: The ledger entry to record

        Returns:
            The quote with its incremented counter

        Raises:
            AlreadyLikedError: If the visitor already liked this quote
            NotFoundError: If the quote doesn't exist
        """
        pass

    @abstractmethod
    async def exists(self, quote_id: QuoteId, visitor_id: VisitorId) -> bool:
        """Check whether a visitor liked a quote.

        Args:
            quote_id: ID of the quote
            visitor_id: Visitor identifier

        Returns:
            True if a ledger entry exists
        """
        pass

    @abstractmethod
    async def find_liked_quote_ids(
        self, quote_ids: Sequence[QuoteId], visitor_id: VisitorId
    ) -> Set[QuoteId]:
        """Find which of the given quotes a visitor liked (batch query).

        Args:
            quote_ids: IDs of the quotes to check
            visitor_id: Visitor identifier

        Returns:
            Subset of quote_ids the visitor liked
        """
        pass

    @abstractmethod
    async def reset(self) -> int:
        """Delete every ledger entry and zero every quote counter atomically.

        Returns:
            Number of ledger entries removed
        """
        pass
