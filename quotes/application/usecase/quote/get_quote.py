"""Get quote use case."""

from uuid import UUID

from pydantic import BaseModel

from quotes.domain.service import LikeService, QuoteService
from quotes.domain.value import QuoteId, VisitorId

from .response import QuoteResponse


class GetQuoteRequest(BaseModel):
    """Get quote request.

    Accepts either a quote_id or random=True.
    """

    quote_id: UUID | None = None
    random: bool = False
    visitor_id: str

    def model_post_init(self, __context):
        """Validate that exactly one lookup mode is requested."""
        if self.quote_id is None and not self.random:
            raise ValueError("Either quote_id or random must be provided")
        if self.quote_id is not None and self.random:
            raise ValueError("Provide either quote_id or random, not both")


class GetQuoteUseCase:
    """Use case for retrieving a single quote by ID or at random."""

    def __init__(self, quote_service: QuoteService, like_service: LikeService) -> None:
        """Initialize get quote use case.

        Args:
            quote_service: Quote domain service
            like_service: Like domain service
        """
        self.quote_service = quote_service
        self.like_service = like_service

    async def execute(self, request: GetQuoteRequest) -> QuoteResponse:
        """Execute get quote flow.

        Returns:
            Quote with the visitor's like status

        Raises:
            NotFoundError: If the quote doesn't exist or the catalog is empty
        """
        if request.random:
            quote = await self.quote_service.get_random_quote()
        else:
            quote = await self.quote_service.get_quote_by_id(QuoteId(request.quote_id))

        is_liked = await self.like_service.is_liked(
            quote.id, VisitorId(request.visitor_id)
        )
        return QuoteResponse.from_quote(quote, is_liked=is_liked)
