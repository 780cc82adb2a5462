"""Domain layer DI providers."""

from dishka import Scope, provide

from quotes.config import RankingSettings
from quotes.domain.repository import LikeRepository, QuoteRepository
from quotes.domain.service import LikeService, QuoteService, RankingService
from quotes.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_quote_service(self, quote_repository: QuoteRepository) -> QuoteService:
        """Provide quote domain service."""
        return QuoteService(quote_repository=quote_repository)

    @provide
    def get_like_service(self, like_repository: LikeRepository) -> LikeService:
        """Provide like domain service."""
        return LikeService(like_repository=like_repository)

    @provide
    def get_ranking_service(
        self, quote_repository: QuoteRepository, ranking_settings: RankingSettings
    ) -> RankingService:
        """Provide ranking domain service."""
        return RankingService(
            quote_repository=quote_repository, ranking_settings=ranking_settings
        )
