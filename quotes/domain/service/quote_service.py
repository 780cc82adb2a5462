"""Quote domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from quotes.domain.error import NotFoundError, ValidationError
from quotes.domain.model.quote import Quote, utcnow
from quotes.domain.repository import QuoteRepository
from quotes.domain.value import QuoteId

from .base import Service


def _clean(value: Optional[str]) -> Optional[str]:
    """Treat missing, empty and whitespace-only input the same way."""
    if value is None:
        return None
    value = value.strip()
    return value or None


class QuoteService(Service):
    """Domain service for quote CRUD operations."""

    def __init__(self, quote_repository: QuoteRepository) -> None:
        """Initialize quote service.

        Args:
            quote_repository: Quote repository
        """
        self.quote_repository = quote_repository

    async def get_quote_by_id(self, quote_id: QuoteId) -> Quote:
        """Get a quote by ID.

        Raises:
            NotFoundError: If the quote doesn't exist
        """
        with logfire.span("quote_service.get_quote_by_id", quote_id=str(quote_id)):
            quote = await self.quote_repository.find_by_id(quote_id)
            if quote is None:
                logfire.warn("Quote not found", quote_id=str(quote_id))
                raise NotFoundError("Quote", str(quote_id))
            return quote

    async def get_random_quote(self) -> Quote:
        """Get a uniformly random quote.

        Raises:
            NotFoundError: If the catalog is empty
        """
        with logfire.span("quote_service.get_random_quote"):
            quote = await self.quote_repository.find_random()
            if quote is None:
                logfire.warn("Random quote requested from empty catalog")
                raise NotFoundError("Quote", "random")
            return quote

    async def list_quotes(
        self, search: Optional[str] = None, limit: int = 10, offset: int = 0
    ) -> tuple[list[Quote], int]:
        """List a page of quotes together with the total number of matches.

        Args:
            search: Optional case-insensitive text/author filter
            limit: Page size
            offset: Number of quotes to skip

        Returns:
            Tuple of (quotes on the page, total matching quotes)
        """
        search = _clean(search)
        with logfire.span(
            "quote_service.list_quotes", search=search, limit=limit, offset=offset
        ):
            total = await self.quote_repository.count(search=search)
            if offset >= total:
                # Past the last page; also keeps huge offsets away from the database
                return [], total

            quotes = await self.quote_repository.find_all(
                search=search, limit=limit, offset=offset
            )
            return quotes, total

    async def create_quote(self, text: str, author: str) -> Quote:
        """Create a new quote with a fresh ID and zero likes.

        Raises:
            ValidationError: If text or author is empty
        """
        clean_text = _clean(text)
        clean_author = _clean(author)
        if clean_text is None or clean_author is None:
            raise ValidationError("text and author are required")

        now = utcnow()
        quote = Quote(
            id=QuoteId(uuid4()),
            text=clean_text,
            author=clean_author,
            likes_count=0,
            created_at=now,
            updated_at=now,
        )
        with logfire.span("quote_service.create_quote", quote_id=str(quote.id)):
            saved = await self.quote_repository.save(quote)
            logfire.info("Quote created", quote_id=str(saved.id), author=saved.author)
            return saved

    async def update_quote(
        self,
        quote_id: QuoteId,
        text: Optional[str] = None,
        author: Optional[str] = None,
    ) -> Quote:
        """Partially update a quote.

        Only non-empty fields are applied.

        Raises:
            NotFoundError: If the quote doesn't exist
        """
        with logfire.span("quote_service.update_quote", quote_id=str(quote_id)):
            updated = await self.quote_repository.update(
                quote_id, text=_clean(text), author=_clean(author)
            )
            if updated is None:
                logfire.warn("Update of non-existent quote", quote_id=str(quote_id))
                raise NotFoundError("Quote", str(quote_id))

            logfire.info("Quote updated", quote_id=str(quote_id))
            return updated

    async def delete_quote(self, quote_id: QuoteId) -> bool:
        """Delete a quote and, by cascade, its likes.

        Returns:
            True if the quote existed and was deleted
        """
        with logfire.span("quote_service.delete_quote", quote_id=str(quote_id)):
            deleted = await self.quote_repository.delete(quote_id)
            if deleted:
                logfire.info("Quote deleted", quote_id=str(quote_id))
            else:
                logfire.info("No quote to delete", quote_id=str(quote_id))
            return deleted
