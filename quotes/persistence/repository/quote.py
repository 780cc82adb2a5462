"""PostgreSQL implementation of Quote repository."""

from datetime import datetime
from typing import Any, List, Optional

import logfire
from sqlalchemy import delete, desc, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quotes.domain.model import Quote
from quotes.domain.repository import QuoteRepository
from quotes.domain.value import QuoteId
from quotes.persistence.mappers import quote_to_dict, row_to_quote
from quotes.persistence.tables import quotes_table


def _search_filter(search: str) -> Any:
    """Case-insensitive substring match on text or author.

    LIKE wildcards in the search term are escaped.
    """
    return or_(
        quotes_table.c.text.icontains(search, autoescape=True),
        quotes_table.c.author.icontains(search, autoescape=True),
    )


class PostgresQuoteRepository(QuoteRepository):
    """PostgreSQL implementation of QuoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, quote_id: QuoteId) -> Optional[Quote]:
        """Find a quote by ID."""
        stmt = select(quotes_table).where(quotes_table.c.id == quote_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_quote(row._asdict()) if row else None

    async def find_random(self) -> Optional[Quote]:
        """Pick one quote uniformly at random."""
        stmt = select(quotes_table).order_by(func.random()).limit(1)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_quote(row._asdict()) if row else None

    async def find_all(
        self,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Quote]:
        """Find quotes with search filter and pagination."""
        with logfire.span(
            "quote_repository.find_all", search=search, limit=limit, offset=offset
        ):
            stmt = select(quotes_table)

            if search:
                stmt = stmt.where(_search_filter(search))

            # id breaks created_at ties so that pages never overlap
            stmt = (
                stmt.order_by(desc(quotes_table.c.created_at), desc(quotes_table.c.id))
                .limit(limit)
                .offset(offset)
            )

            result = await self.session.execute(stmt)
            quotes = [row_to_quote(row._asdict()) for row in result.fetchall()]

            logfire.info("Found quotes", count=len(quotes))
            return quotes

    async def count(self, search: Optional[str] = None) -> int:
        """Count quotes matching the search filter."""
        stmt = select(func.count()).select_from(quotes_table)

        if search:
            stmt = stmt.where(_search_filter(search))

        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, quote: Quote) -> Quote:
        """Insert a new quote."""
        with logfire.span("quote_repository.save", quote_id=str(quote.id)):
            stmt = insert(quotes_table).values(**quote_to_dict(quote))
            await self.session.execute(stmt)
            await self.session.flush()
            return quote

    async def update(
        self,
        quote_id: QuoteId,
        text: Optional[str] = None,
        author: Optional[str] = None,
    ) -> Optional[Quote]:
        """Update text and/or author with a single UPDATE ... RETURNING."""
        with logfire.span("quote_repository.update", quote_id=str(quote_id)):
            values: dict[str, Any] = {"updated_at": func.now()}
            if text is not None:
                values["text"] = text
            if author is not None:
                values["author"] = author

            stmt = (
                update(quotes_table)
                .where(quotes_table.c.id == quote_id)
                .values(**values)
                .returning(quotes_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if row is None:
                logfire.warn("Quote not found for update", quote_id=str(quote_id))
                return None

            await self.session.flush()
            return row_to_quote(row._asdict())

    async def delete(self, quote_id: QuoteId) -> bool:
        """Delete a quote (likes are removed by ON DELETE CASCADE)."""
        stmt = delete(quotes_table).where(quotes_table.c.id == quote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_top(self, created_since: Optional[datetime] = None) -> Optional[Quote]:
        """Find the most liked quote, newest first among ties."""
        with logfire.span(
            "quote_repository.find_top",
            created_since=created_since.isoformat() if created_since else None,
        ):
            stmt = select(quotes_table)

            if created_since is not None:
                stmt = stmt.where(quotes_table.c.created_at >= created_since)

            stmt = stmt.order_by(
                desc(quotes_table.c.likes_count), desc(quotes_table.c.created_at)
            ).limit(1)

            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_quote(row._asdict()) if row else None
