"""List quotes use case."""

import math

import logfire
from pydantic import BaseModel

from quotes.config import PaginationSettings
from quotes.domain.service import LikeService, QuoteService
from quotes.domain.value import VisitorId

from .response import QuoteResponse


class ListQuotesRequest(BaseModel):
    """List quotes request.

    Out-of-range pagination values are clamped rather than rejected.
    """

    page: int = 1
    page_size: int | None = None  # None means the configured default
    search: str | None = None
    visitor_id: str


class ListQuotesResponse(BaseModel):
    """List quotes response."""

    quotes: list[QuoteResponse]
    total: int
    page: int
    page_size: int
    total_pages: int


def total_pages(total: int, page_size: int) -> int:
    """Number of pages needed to show ``total`` items."""
    return math.ceil(total / page_size)


class ListQuotesUseCase:
    """Use case for listing quotes with search and pagination."""

    def __init__(
        self,
        quote_service: QuoteService,
        like_service: LikeService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list quotes use case.

        Args:
            quote_service: Quote domain service
            like_service: Like domain service
            pagination_settings: Default and maximum page sizes
        """
        self.quote_service = quote_service
        self.like_service = like_service
        self.pagination_settings = pagination_settings

    def _clamp(self, page: int, page_size: int | None) -> tuple[int, int]:
        page = max(1, page)
        if page_size is None:
            page_size = self.pagination_settings.default_page_size
        page_size = max(1, min(self.pagination_settings.max_page_size, page_size))
        return page, page_size

    async def execute(self, request: ListQuotesRequest) -> ListQuotesResponse:
        """Execute list quotes flow.

        Args:
            request: List quotes request with search and pagination

        Returns:
            One page of quotes with the visitor's like status for each
        """
        page, page_size = self._clamp(request.page, request.page_size)

        with logfire.span(
            "list_quotes.execute",
            page=page,
            page_size=page_size,
            search=request.search,
        ):
            quotes, total = await self.quote_service.list_quotes(
                search=request.search,
                limit=page_size,
                offset=(page - 1) * page_size,
            )

            # One batch lookup for the whole page
            liked = await self.like_service.are_liked(
                [quote.id for quote in quotes], VisitorId(request.visitor_id)
            )

            items = [
                QuoteResponse.from_quote(quote, is_liked=liked.get(quote.id, False))
                for quote in quotes
            ]

            logfire.info("Quotes listed", count=len(items), total=total)

            return ListQuotesResponse(
                quotes=items,
                total=total,
                page=page,
                page_size=page_size,
                total_pages=total_pages(total, page_size),
            )
