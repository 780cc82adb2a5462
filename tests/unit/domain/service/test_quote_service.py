"""Unit tests for QuoteService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from quotes.domain.error import NotFoundError, ValidationError
from quotes.domain.repository import QuoteRepository
from quotes.domain.service import QuoteService
from quotes.domain.value import QuoteId
from tests.conftest import make_quote
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateQuote:
    """Tests for create_quote."""

    @pytest.mark.asyncio
    async def test_create_quote_assigns_id_and_zero_likes(self, unit_env):
        """New quotes get a fresh id, no likes and equal timestamps."""
        quote_service = await unit_env.get(QuoteService)

        quote = await quote_service.create_quote("To be or not to be", "Shakespeare")

        assert quote.id is not None
        assert quote.likes_count == 0
        assert quote.created_at == quote.updated_at

        stored = await quote_service.get_quote_by_id(quote.id)
        assert stored.text == "To be or not to be"

    @pytest.mark.asyncio
    async def test_create_quote_strips_whitespace(self, unit_env):
        quote_service = await unit_env.get(QuoteService)

        quote = await quote_service.create_quote("  Stay hungry  ", " Jobs ")

        assert quote.text == "Stay hungry"
        assert quote.author == "Jobs"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "text,author", [("", "Someone"), ("Something", ""), ("   ", "Someone")]
    )
    async def test_create_quote_rejects_empty_fields(self, unit_env, text, author):
        """Blank text or author is a validation error."""
        quote_service = await unit_env.get(QuoteService)

        with pytest.raises(ValidationError, match="text and author are required"):
            await quote_service.create_quote(text, author)


class TestGetQuote:
    """Tests for get_quote_by_id and get_random_quote."""

    @pytest.mark.asyncio
    async def test_get_missing_quote_raises_not_found(self, unit_env):
        quote_service = await unit_env.get(QuoteService)

        with pytest.raises(NotFoundError):
            await quote_service.get_quote_by_id(QuoteId(uuid4()))

    @pytest.mark.asyncio
    async def test_random_quote_from_empty_catalog_raises_not_found(self, unit_env):
        quote_service = await unit_env.get(QuoteService)

        with pytest.raises(NotFoundError):
            await quote_service.get_random_quote()

    @pytest.mark.asyncio
    async def test_random_quote_is_one_of_the_catalog(self, unit_env):
        quote_service = await unit_env.get(QuoteService)
        created = {
            (await quote_service.create_quote(f"Quote {i}", "Author")).id
            for i in range(3)
        }

        for _ in range(10):
            quote = await quote_service.get_random_quote()
            assert quote.id in created


class TestListQuotes:
    """Tests for list_quotes."""

    @pytest.mark.asyncio
    async def test_list_quotes_newest_first(self, unit_env):
        """Quotes come back ordered by created_at descending."""
        quote_service = await unit_env.get(QuoteService)
        quote_repo = await unit_env.get(QuoteRepository)

        oldest = await quote_repo.save(make_quote(text="old", age=timedelta(days=3)))
        middle = await quote_repo.save(make_quote(text="mid", age=timedelta(days=2)))
        newest = await quote_repo.save(make_quote(text="new", age=timedelta(days=1)))

        quotes, total = await quote_service.list_quotes(limit=10, offset=0)

        assert total == 3
        assert [q.id for q in quotes] == [newest.id, middle.id, oldest.id]

    @pytest.mark.asyncio
    async def test_pages_partition_the_catalog(self, unit_env):
        """Two consecutive pages are disjoint and cover every quote."""
        quote_service = await unit_env.get(QuoteService)
        quote_repo = await unit_env.get(QuoteRepository)
        for i in range(4):
            await quote_repo.save(make_quote(text=f"Quote {i}", age=timedelta(hours=i)))

        first, total = await quote_service.list_quotes(limit=2, offset=0)
        second, _ = await quote_service.list_quotes(limit=2, offset=2)

        first_ids = {q.id for q in first}
        second_ids = {q.id for q in second}
        assert total == 4
        assert len(first_ids) == 2
        assert len(second_ids) == 2
        assert first_ids.isdisjoint(second_ids)

    @pytest.mark.asyncio
    async def test_search_matches_text_or_author_case_insensitively(self, unit_env):
        quote_service = await unit_env.get(QuoteService)
        await quote_service.create_quote("The only way out is through", "Robert Frost")
        await quote_service.create_quote("Less is more", "Mies van der Rohe")
        await quote_service.create_quote("Frost bites", "Anonymous")

        quotes, total = await quote_service.list_quotes(search="FROST")

        assert total == 2
        assert {q.author for q in quotes} == {"Robert Frost", "Anonymous"}

    @pytest.mark.asyncio
    async def test_blank_search_is_ignored(self, unit_env):
        quote_service = await unit_env.get(QuoteService)
        await quote_service.create_quote("One", "A")
        await quote_service.create_quote("Two", "B")

        _, total = await quote_service.list_quotes(search="   ")

        assert total == 2


class TestUpdateQuote:
    """Tests for update_quote."""

    @pytest.mark.asyncio
    async def test_update_changes_only_supplied_fields(self, unit_env):
        quote_service = await unit_env.get(QuoteService)
        quote = await quote_service.create_quote("Original text", "Original author")

        updated = await quote_service.update_quote(quote.id, text="New text")

        assert updated.text == "New text"
        assert updated.author == "Original author"
        assert updated.updated_at >= quote.updated_at

    @pytest.mark.asyncio
    async def test_update_ignores_empty_fields(self, unit_env):
        quote_service = await unit_env.get(QuoteService)
        quote = await quote_service.create_quote("Keep me", "Me too")

        updated = await quote_service.update_quote(quote.id, text="", author="  ")

        assert updated.text == "Keep me"
        assert updated.author == "Me too"

    @pytest.mark.asyncio
    async def test_update_missing_quote_raises_not_found(self, unit_env):
        quote_service = await unit_env.get(QuoteService)

        with pytest.raises(NotFoundError):
            await quote_service.update_quote(QuoteId(uuid4()), text="Anything")


class TestDeleteQuote:
    """Tests for delete_quote."""

    @pytest.mark.asyncio
    async def test_delete_existing_then_missing(self, unit_env):
        """Deleting twice reports True then False."""
        quote_service = await unit_env.get(QuoteService)
        quote = await quote_service.create_quote("Ephemeral", "Nobody")

        assert await quote_service.delete_quote(quote.id) is True
        assert await quote_service.delete_quote(quote.id) is False

        with pytest.raises(NotFoundError):
            await quote_service.get_quote_by_id(quote.id)


class TestListQuotesBeyondEnd:
    """Offsets past the last match."""

    @pytest.mark.asyncio
    async def test_offset_past_total_returns_empty_page(self, unit_env):
        quote_service = await unit_env.get(QuoteService)
        await quote_service.create_quote("Only", "One")

        quotes, total = await quote_service.list_quotes(limit=10, offset=10**19)

        assert quotes == []
        assert total == 1
