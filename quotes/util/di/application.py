"""Application layer DI providers."""

from dishka import Scope, provide

from quotes.application.usecase.like import (
    CheckLikeUseCase,
    LikeQuoteUseCase,
    ResetLikesUseCase,
)
from quotes.application.usecase.quote import (
    CreateQuoteUseCase,
    DeleteQuoteUseCase,
    GetQuoteUseCase,
    ListQuotesUseCase,
    UpdateQuoteUseCase,
)
from quotes.application.usecase.ranking import GetTopQuoteUseCase
from quotes.config import PaginationSettings
from quotes.domain.service import LikeService, QuoteService, RankingService
from quotes.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Quote use cases
    @provide(scope=Scope.REQUEST)
    def get_get_quote_use_case(
        self, quote_service: QuoteService, like_service: LikeService
    ) -> GetQuoteUseCase:
        """Provide get quote use case."""
        return GetQuoteUseCase(quote_service=quote_service, like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_list_quotes_use_case(
        self,
        quote_service: QuoteService,
        like_service: LikeService,
        pagination_settings: PaginationSettings,
    ) -> ListQuotesUseCase:
        """Provide list quotes use case."""
        return ListQuotesUseCase(
            quote_service=quote_service,
            like_service=like_service,
            pagination_settings=pagination_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_quote_use_case(
        self, quote_service: QuoteService
    ) -> CreateQuoteUseCase:
        """Provide create quote use case."""
        return CreateQuoteUseCase(quote_service=quote_service)

    @provide(scope=Scope.REQUEST)
    def get_update_quote_use_case(
        self, quote_service: QuoteService, like_service: LikeService
    ) -> UpdateQuoteUseCase:
        """Provide update quote use case."""
        return UpdateQuoteUseCase(
            quote_service=quote_service, like_service=like_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_quote_use_case(
        self, quote_service: QuoteService
    ) -> DeleteQuoteUseCase:
        """Provide delete quote use case."""
        return DeleteQuoteUseCase(quote_service=quote_service)

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_like_quote_use_case(self, like_service: LikeService) -> LikeQuoteUseCase:
        """Provide like quote use case."""
        return LikeQuoteUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_check_like_use_case(self, like_service: LikeService) -> CheckLikeUseCase:
        """Provide check like use case."""
        return CheckLikeUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_reset_likes_use_case(
        self, like_service: LikeService
    ) -> ResetLikesUseCase:
        """Provide reset likes use case."""
        return ResetLikesUseCase(like_service=like_service)

    # Ranking use cases
    @provide(scope=Scope.REQUEST)
    def get_top_quote_use_case(
        self, ranking_service: RankingService, like_service: LikeService
    ) -> GetTopQuoteUseCase:
        """Provide get top quote use case."""
        return GetTopQuoteUseCase(
            ranking_service=ranking_service, like_service=like_service
        )
