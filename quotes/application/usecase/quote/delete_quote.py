"""Delete quote use case."""

from uuid import UUID

from pydantic import BaseModel

from quotes.domain.service import QuoteService
from quotes.domain.value import QuoteId


class DeleteQuoteRequest(BaseModel):
    """Delete quote request."""

    quote_id: UUID


class DeleteQuoteResponse(BaseModel):
    """Delete quote response."""

    deleted: bool


class DeleteQuoteUseCase:
    """Use case for removing a quote and its likes."""

    def __init__(self, quote_service: QuoteService) -> None:
        self.quote_service = quote_service

    async def execute(self, request: DeleteQuoteRequest) -> DeleteQuoteResponse:
        """Execute delete quote flow."""
        deleted = await self.quote_service.delete_quote(QuoteId(request.quote_id))
        return DeleteQuoteResponse(deleted=deleted)
