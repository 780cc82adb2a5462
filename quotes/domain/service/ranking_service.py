"""Ranking domain service."""

from datetime import timedelta

import logfire

from quotes.config import RankingSettings
from quotes.domain.error import NotFoundError
from quotes.domain.model.quote import Quote, utcnow
from quotes.domain.repository import QuoteRepository
from quotes.domain.value import RankingPeriod

from .base import Service


class RankingService(Service):
    """Domain service for "top quote" rankings.

    Quotes are ranked by likes_count, ties broken by the most recent
    created_at.
    """

    def __init__(
        self, quote_repository: QuoteRepository, ranking_settings: RankingSettings
    ) -> None:
        """Initialize ranking service.

        Args:
            quote_repository: Quote repository
            ranking_settings: Ranking window configuration
        """
        self.quote_repository = quote_repository
        self.ranking_settings = ranking_settings

    async def get_top_weekly(self) -> Quote:
        """Top quote among quotes created within the trailing window.

        Raises:
            NotFoundError: If no quote was created within the window
        """
        return await self.get_top(RankingPeriod.WEEKLY)

    async def get_top_all_time(self) -> Quote:
        """Top quote over the whole catalog.

        Raises:
            NotFoundError: If the catalog is empty
        """
        return await self.get_top(RankingPeriod.ALL_TIME)

    async def get_top(self, period: RankingPeriod) -> Quote:
        """Top quote for the given period."""
        with logfire.span("ranking_service.get_top", period=period.value):
            created_since = None
            if period == RankingPeriod.WEEKLY:
                window = timedelta(days=self.ranking_settings.weekly_window_days)
                created_since = utcnow() - window

            quote = await self.quote_repository.find_top(created_since=created_since)
            if quote is None:
                logfire.info("No quote qualifies for ranking", period=period.value)
                raise NotFoundError("Quote", f"top {period.value}")

            return quote
