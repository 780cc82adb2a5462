"""Create quote use case."""

from pydantic import BaseModel

from quotes.domain.service import QuoteService

from .response import QuoteResponse


class CreateQuoteRequest(BaseModel):
    """Create quote request."""

    text: str
    author: str


class CreateQuoteUseCase:
    """Use case for adding a quote to the catalog."""

    def __init__(self, quote_service: QuoteService) -> None:
        """Initialize create quote use case.

        Args:
            quote_service: Quote domain service
        """
        self.quote_service = quote_service

    async def execute(self, request: CreateQuoteRequest) -> QuoteResponse:
        """Execute create quote flow.

        Raises:
            ValidationError: If text or author is empty
        """
        quote = await self.quote_service.create_quote(request.text, request.author)
        # Nobody can have liked a quote that did not exist a moment ago
        return QuoteResponse.from_quote(quote, is_liked=False)
