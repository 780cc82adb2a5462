"""Unit tests for GetQuoteUseCase."""

from uuid import uuid4

import pytest

from quotes.application.usecase.quote import GetQuoteRequest, GetQuoteUseCase
from quotes.domain.error import NotFoundError
from quotes.domain.service import LikeService, QuoteService
from quotes.domain.value import VisitorId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

VISITOR = "203.0.113.10"


class TestGetQuoteRequest:
    """Tests for request validation."""

    def test_requires_id_or_random(self):
        with pytest.raises(ValueError):
            GetQuoteRequest(visitor_id=VISITOR)

    def test_rejects_both_id_and_random(self):
        with pytest.raises(ValueError):
            GetQuoteRequest(quote_id=uuid4(), random=True, visitor_id=VISITOR)


class TestGetQuote:
    """Tests for get quote flow."""

    @pytest.mark.asyncio
    async def test_get_by_id_includes_like_status(self, unit_env):
        quote_service = await unit_env.get(QuoteService)
        like_service = await unit_env.get(LikeService)
        quote = await quote_service.create_quote("Know thyself", "Socrates")
        await like_service.like_quote(quote.id, VisitorId(VISITOR))
        use_case = await unit_env.get(GetQuoteUseCase)

        response = await use_case.execute(
            GetQuoteRequest(quote_id=quote.id, visitor_id=VISITOR)
        )

        assert response.id == str(quote.id)
        assert response.likes_count == 1
        assert response.is_liked is True

    @pytest.mark.asyncio
    async def test_random_quote(self, unit_env):
        quote_service = await unit_env.get(QuoteService)
        quote = await quote_service.create_quote("Only one", "Solo")
        use_case = await unit_env.get(GetQuoteUseCase)

        response = await use_case.execute(
            GetQuoteRequest(random=True, visitor_id=VISITOR)
        )

        assert response.id == str(quote.id)
        assert response.is_liked is False

    @pytest.mark.asyncio
    async def test_missing_quote_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetQuoteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetQuoteRequest(quote_id=uuid4(), visitor_id=VISITOR))
