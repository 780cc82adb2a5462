"""Update quote use case."""

from uuid import UUID

from pydantic import BaseModel

from quotes.domain.service import LikeService, QuoteService
from quotes.domain.value import QuoteId, VisitorId

from .response import QuoteResponse


class UpdateQuoteRequest(BaseModel):
    """Update quote request. Missing or empty fields are left unchanged."""

    quote_id: UUID
    text: str | None = None
    author: str | None = None
    visitor_id: str


class UpdateQuoteUseCase:
    """Use case for editing a quote's text and/or author."""

    def __init__(self, quote_service: QuoteService, like_service: LikeService) -> None:
        """Initialize update quote use case.

        Args:
            quote_service: Quote domain service
            like_service: Like domain service
        """
        self.quote_service = quote_service
        self.like_service = like_service

    async def execute(self, request: UpdateQuoteRequest) -> QuoteResponse:
        """Execute update quote flow.

        Raises:
            NotFoundError: If the quote doesn't exist
        """
        quote = await self.quote_service.update_quote(
            QuoteId(request.quote_id), text=request.text, author=request.author
        )
        is_liked = await self.like_service.is_liked(
            quote.id, VisitorId(request.visitor_id)
        )
        return QuoteResponse.from_quote(quote, is_liked=is_liked)
