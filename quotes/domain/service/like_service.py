"""Like domain service."""

from typing import Optional, Sequence
from uuid import uuid4

import logfire

from quotes.domain.error import AlreadyLikedError, NotFoundError
from quotes.domain.model.like import Like
from quotes.domain.model.quote import Quote, utcnow
from quotes.domain.repository import LikeRepository
from quotes.domain.value import LikeId, QuoteId, VisitorId

from .base import Service


class LikeService(Service):
    """Domain service for like operations."""

    def __init__(self, like_repository: LikeRepository) -> None:
        """Initialize like service.

        Args:
            like_repository: Like ledger repository
        """
        self.like_repository = like_repository

    async def like_quote(
        self,
        quote_id: QuoteId,
        visitor_id: VisitorId,
        user_agent: Optional[str] = None,
    ) -> Quote:
        """Like a quote on behalf of a visitor.

        Creates the ledger entry and increments the quote's counter in one
        transaction.

        Args:
            quote_id: Quote ID
            visitor_id: Visitor identifier
            user_agent: Client user agent, stored for auditing

        Returns:
            The quote with its updated counter

        Raises:
            AlreadyLikedError: If the visitor already liked this quote
            NotFoundError: If the quote doesn't exist
        """
        with logfire.span(
            "like_quote", quote_id=str(quote_id), visitor_id=visitor_id
        ):
            like = Like(
                id=LikeId(uuid4()),
                quote_id=quote_id,
                visitor_id=visitor_id,
                user_agent=user_agent or None,
                created_at=utcnow(),
            )

            try:
                quote = await self.like_repository.register(like)
            except AlreadyLikedError:
                logfire.warn(
                    "Duplicate like attempt", quote_id=str(quote_id), visitor_id=visitor_id
                )
                raise
            except NotFoundError:
                logfire.warn("Like on non-existent quote", quote_id=str(quote_id))
                raise

            logfire.info(
                "Quote liked",
                quote_id=str(quote_id),
                visitor_id=visitor_id,
                likes_count=quote.likes_count,
            )
            return quote

    async def is_liked(self, quote_id: QuoteId, visitor_id: VisitorId) -> bool:
        """Check whether a visitor liked a quote."""
        return await self.like_repository.exists(quote_id, visitor_id)

    async def are_liked(
        self, quote_ids: Sequence[QuoteId], visitor_id: VisitorId
    ) -> dict[QuoteId, bool]:
        """Check which quotes a visitor liked.

        Args:
            quote_ids: Quote IDs to check
            visitor_id: Visitor identifier

        Returns:
            Dictionary mapping every requested quote ID to its like status
        """
        if not quote_ids:
            return {}

        # Batch query to fetch all likes at once (avoid N+1)
        liked_ids = await self.like_repository.find_liked_quote_ids(
            quote_ids, visitor_id
        )
        return {quote_id: quote_id in liked_ids for quote_id in quote_ids}

    async def reset_likes(self) -> int:
        """Remove every like and zero every counter.

        Returns:
            Number of ledger entries removed
        """
        with logfire.span("reset_likes"):
            removed = await self.like_repository.reset()
            logfire.info("All likes reset", removed=removed)
            return removed
