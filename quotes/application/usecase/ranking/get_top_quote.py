"""Get top quote use case."""

from pydantic import BaseModel

from quotes.application.usecase.quote.response import QuoteResponse
from quotes.domain.service import LikeService, RankingService
from quotes.domain.value import RankingPeriod, VisitorId


class GetTopQuoteRequest(BaseModel):
    """Get top quote request."""

    period: RankingPeriod
    visitor_id: str


class GetTopQuoteUseCase:
    """Use case for the most liked quote of a ranking period."""

    def __init__(
        self, ranking_service: RankingService, like_service: LikeService
    ) -> None:
        """Initialize get top quote use case.

        Args:
            ranking_service: Ranking domain service
            like_service: Like domain service
        """
        self.ranking_service = ranking_service
        self.like_service = like_service

    async def execute(self, request: GetTopQuoteRequest) -> QuoteResponse:
        """Execute top quote flow.

        Raises:
            NotFoundError: If no quote qualifies for the period
        """
        quote = await self.ranking_service.get_top(request.period)
        is_liked = await self.like_service.is_liked(
            quote.id, VisitorId(request.visitor_id)
        )
        return QuoteResponse.from_quote(quote, is_liked=is_liked)
