"""Like quote use case."""

from uuid import UUID

from pydantic import BaseModel

from quotes.application.usecase.quote.response import QuoteResponse
from quotes.domain.service import LikeService
from quotes.domain.value import QuoteId, VisitorId


class LikeQuoteRequest(BaseModel):
    """Like quote request."""

    quote_id: UUID
    visitor_id: str
    user_agent: str | None = None


class LikeQuoteUseCase:
    """Use case for liking a quote once per visitor."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize like quote use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: LikeQuoteRequest) -> QuoteResponse:
        """Execute like flow.

        Returns:
            The liked quote with its new counter and is_liked=True

        Raises:
            AlreadyLikedError: If this visitor already liked the quote
            NotFoundError: If the quote doesn't exist
        """
        quote = await self.like_service.like_quote(
            QuoteId(request.quote_id),
            VisitorId(request.visitor_id),
            user_agent=request.user_agent,
        )
        return QuoteResponse.from_quote(quote, is_liked=True)
