"""Integration tests for PostgresLikeRepository.

Concurrency tests open one request container per simulated request, so each
like runs in its own database session and transaction.
"""

import asyncio
import os
from uuid import uuid4

import pytest
import pytest_asyncio

from quotes.domain.error import AlreadyLikedError, NotFoundError
from quotes.domain.service import LikeService, QuoteService
from quotes.domain.value import QuoteId, VisitorId
from tests.di import build_test_container

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"), reason="DATABASE__URL not set"
)


@pytest_asyncio.fixture
async def container():
    container = build_test_container(unmock={"persistence"})
    yield container
    await container.close()


async def _create_quote(container) -> QuoteId:
    async with container() as request_container:
        quote_service = await request_container.get(QuoteService)
        quote = await quote_service.create_quote(f"Integration {uuid4()}", "Tester")
        return quote.id


async def _delete_quote(container, quote_id: QuoteId) -> None:
    async with container() as request_container:
        quote_service = await request_container.get(QuoteService)
        await quote_service.delete_quote(quote_id)


async def _like(container, quote_id: QuoteId, visitor_id: str):
    async with container() as request_container:
        like_service = await request_container.get(LikeService)
        return await like_service.like_quote(quote_id, VisitorId(visitor_id))


async def _likes_count(container, quote_id: QuoteId) -> int:
    async with container() as request_container:
        quote_service = await request_container.get(QuoteService)
        return (await quote_service.get_quote_by_id(quote_id)).likes_count


class TestLikeRepositoryIntegration:
    """Integration tests for like accounting against PostgreSQL."""

    @pytest.mark.asyncio
    async def test_like_twice_counts_once(self, container):
        quote_id = await _create_quote(container)
        try:
            await _like(container, quote_id, "10.1.0.1")
            with pytest.raises(AlreadyLikedError):
                await _like(container, quote_id, "10.1.0.1")

            assert await _likes_count(container, quote_id) == 1
        finally:
            await _delete_quote(container, quote_id)

    @pytest.mark.asyncio
    async def test_like_missing_quote_leaves_no_ledger_entry(self, container):
        missing = QuoteId(uuid4())

        with pytest.raises(NotFoundError):
            await _like(container, missing, "10.1.0.2")

        async with container() as request_container:
            like_service = await request_container.get(LikeService)
            assert await like_service.is_liked(missing, VisitorId("10.1.0.2")) is False

    @pytest.mark.asyncio
    async def test_concurrent_likes_same_visitor(self, container):
        """Racing requests for one (quote, visitor) pair: exactly one wins."""
        quote_id = await _create_quote(container)
        try:
            results = await asyncio.gather(
                *(_like(container, quote_id, "10.1.0.3") for _ in range(5)),
                return_exceptions=True,
            )

            successes = [r for r in results if not isinstance(r, Exception)]
            failures = [r for r in results if isinstance(r, Exception)]
            assert len(successes) == 1
            assert all(isinstance(f, AlreadyLikedError) for f in failures)
            assert await _likes_count(container, quote_id) == 1
        finally:
            await _delete_quote(container, quote_id)

    @pytest.mark.asyncio
    async def test_concurrent_likes_distinct_visitors(self, container):
        quote_id = await _create_quote(container)
        try:
            await asyncio.gather(
                *(_like(container, quote_id, f"10.2.0.{i}") for i in range(1, 6))
            )

            assert await _likes_count(container, quote_id) == 5
        finally:
            await _delete_quote(container, quote_id)

    @pytest.mark.asyncio
    async def test_are_liked_matches_is_liked(self, container):
        liked_id = await _create_quote(container)
        other_id = await _create_quote(container)
        try:
            await _like(container, liked_id, "10.1.0.4")

            async with container() as request_container:
                like_service = await request_container.get(LikeService)
                visitor = VisitorId("10.1.0.4")
                ids = [liked_id, other_id, QuoteId(uuid4())]
                batch = await like_service.are_liked(ids, visitor)

                assert set(batch) == set(ids)
                for quote_id in ids:
                    assert batch[quote_id] == await like_service.is_liked(
                        quote_id, visitor
                    )
        finally:
            await _delete_quote(container, liked_id)
            await _delete_quote(container, other_id)

    @pytest.mark.asyncio
    async def test_long_visitor_id_is_stored(self, container):
        quote_id = await _create_quote(container)
        long_visitor = "v" * 300
        try:
            liked = await _like(container, quote_id, long_visitor)

            assert liked.likes_count == 1
            async with container() as request_container:
                like_service = await request_container.get(LikeService)
                assert await like_service.is_liked(quote_id, VisitorId(long_visitor))
        finally:
            await _delete_quote(container, quote_id)

    @pytest.mark.asyncio
    async def test_reset_zeroes_counters_and_clears_ledger(self, container):
        """Reset is global: it clears every like in the database."""
        quote_id = await _create_quote(container)
        try:
            await _like(container, quote_id, "10.3.0.1")
            await _like(container, quote_id, "10.3.0.2")

            async with container() as request_container:
                like_service = await request_container.get(LikeService)
                removed = await like_service.reset_likes()

            assert removed >= 2
            assert await _likes_count(container, quote_id) == 0
            async with container() as request_container:
                like_service = await request_container.get(LikeService)
                batch = await like_service.are_liked(
                    [quote_id], VisitorId("10.3.0.1")
                )
                assert batch == {quote_id: False}

            # The ledger is empty, so the same visitor can like again
            relike = await _like(container, quote_id, "10.3.0.1")
            assert relike.likes_count == 1
        finally:
            await _delete_quote(container, quote_id)
