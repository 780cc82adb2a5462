"""Unit tests for RankingService."""

from datetime import timedelta

import pytest

from quotes.domain.error import NotFoundError
from quotes.domain.repository import QuoteRepository
from quotes.domain.service import RankingService
from quotes.domain.value import RankingPeriod
from tests.conftest import make_quote
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestTopWeekly:
    """Tests for get_top_weekly."""

    @pytest.mark.asyncio
    async def test_old_quotes_are_outside_the_window(self, unit_env):
        """A popular quote older than the window loses to a recent one."""
        ranking_service = await unit_env.get(RankingService)
        quote_repo = await unit_env.get(QuoteRepository)
        await quote_repo.save(make_quote(text="old", likes_count=50, age=timedelta(days=8)))
        recent = await quote_repo.save(
            make_quote(text="recent", likes_count=2, age=timedelta(days=1))
        )

        top = await ranking_service.get_top_weekly()

        assert top.id == recent.id

    @pytest.mark.asyncio
    async def test_empty_window_raises_not_found(self, unit_env):
        ranking_service = await unit_env.get(RankingService)
        quote_repo = await unit_env.get(QuoteRepository)
        await quote_repo.save(make_quote(likes_count=5, age=timedelta(days=30)))

        with pytest.raises(NotFoundError):
            await ranking_service.get_top_weekly()


class TestTopAllTime:
    """Tests for get_top_all_time."""

    @pytest.mark.asyncio
    async def test_most_liked_wins_regardless_of_age(self, unit_env):
        ranking_service = await unit_env.get(RankingService)
        quote_repo = await unit_env.get(QuoteRepository)
        old = await quote_repo.save(
            make_quote(text="old", likes_count=50, age=timedelta(days=300))
        )
        await quote_repo.save(make_quote(text="recent", likes_count=2))

        top = await ranking_service.get_top_all_time()

        assert top.id == old.id

    @pytest.mark.asyncio
    async def test_ties_go_to_the_newest_quote(self, unit_env):
        ranking_service = await unit_env.get(RankingService)
        quote_repo = await unit_env.get(QuoteRepository)
        await quote_repo.save(make_quote(text="older", likes_count=3, age=timedelta(days=2)))
        newer = await quote_repo.save(
            make_quote(text="newer", likes_count=3, age=timedelta(hours=1))
        )

        assert (await ranking_service.get_top(RankingPeriod.ALL_TIME)).id == newer.id
        assert (await ranking_service.get_top(RankingPeriod.WEEKLY)).id == newer.id

    @pytest.mark.asyncio
    async def test_empty_catalog_raises_not_found(self, unit_env):
        ranking_service = await unit_env.get(RankingService)

        with pytest.raises(NotFoundError):
            await ranking_service.get_top_all_time()
