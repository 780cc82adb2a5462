"""Mock persistence providers for testing."""

from dishka import Scope, provide

from quotes.domain.repository import LikeRepository, QuoteRepository
from quotes.persistence.repository.inmemory import (
    InMemoryLikeRepository,
    InMemoryQuoteRepository,
    InMemoryStore,
)
from quotes.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store lives for the whole container, so state survives across
    requests made through one TestClient. Each test builds its own container,
    which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_quote_repository(self, store: InMemoryStore) -> QuoteRepository:
        """Provide in-memory quote repository."""
        return InMemoryQuoteRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_like_repository(self, store: InMemoryStore) -> LikeRepository:
        """Provide in-memory like repository."""
        return InMemoryLikeRepository(store)
