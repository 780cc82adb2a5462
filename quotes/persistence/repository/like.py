"""PostgreSQL implementation of the like ledger repository."""

from typing import Sequence, Set

import logfire
from sqlalchemy import and_, delete, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from quotes.domain.error import AlreadyLikedError, NotFoundError
from quotes.domain.model import Like, Quote
from quotes.domain.repository import LikeRepository
from quotes.domain.value import QuoteId, VisitorId
from quotes.persistence.mappers import like_to_dict, row_to_quote
from quotes.persistence.tables import likes_table, quotes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository.

    Writes run inside a SAVEPOINT on the request session, so a failed like
    or reset leaves neither a ledger row nor a counter change behind, while
    the surrounding request transaction stays usable.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def register(self, like: Like) -> Quote:
        """Record a like and increment the quote's counter atomically.

        Protection against duplicate likes is layered:
        1. Locked pre-check for an existing (quote, visitor) entry
        2. Relative counter update, which also row-locks the quote
        3. INSERT ... ON CONFLICT DO NOTHING on the unique constraint;
           a no-op insert means a concurrent request won, so we roll back
        """
        with logfire.span(
            "like_repository.register",
            quote_id=str(like.quote_id),
            visitor_id=like.visitor_id,
        ):
            async with self.session.begin_nested():
                check_stmt = (
                    select(likes_table.c.id)
                    .where(
                        and_(
                            likes_table.c.quote_id == like.quote_id,
                            likes_table.c.visitor_id == like.visitor_id,
                        )
                    )
                    .with_for_update()
                )
                existing = (await self.session.execute(check_stmt)).first()
                if existing is not None:
                    raise AlreadyLikedError(str(like.quote_id), like.visitor_id)

                increment_stmt = (
                    update(quotes_table)
                    .where(quotes_table.c.id == like.quote_id)
                    .values(
                        likes_count=quotes_table.c.likes_count + 1,
                        updated_at=func.now(),
                    )
                    .returning(quotes_table)
                )
                quote_row = (await self.session.execute(increment_stmt)).fetchone()
                if quote_row is None:
                    raise NotFoundError("Quote", str(like.quote_id))

                insert_stmt = (
                    insert(likes_table)
                    .values(**like_to_dict(like))
                    .on_conflict_do_nothing(constraint="uq_likes_quote_visitor")
                    .returning(likes_table.c.id)
                )
                inserted = (await self.session.execute(insert_stmt)).first()
                if inserted is None:
                    logfire.warn(
                        "Concurrent duplicate like detected on insert",
                        quote_id=str(like.quote_id),
                        visitor_id=like.visitor_id,
                    )
                    raise AlreadyLikedError(str(like.quote_id), like.visitor_id)

            return row_to_quote(quote_row._asdict())

    async def exists(self, quote_id: QuoteId, visitor_id: VisitorId) -> bool:
        """Check whether a visitor liked a quote."""
        stmt = select(
            select(likes_table.c.id)
            .where(
                and_(
                    likes_table.c.quote_id == quote_id,
                    likes_table.c.visitor_id == visitor_id,
                )
            )
            .exists()
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def find_liked_quote_ids(
        self, quote_ids: Sequence[QuoteId], visitor_id: VisitorId
    ) -> Set[QuoteId]:
        """Find which of the given quotes a visitor liked (batch query)."""
        if not quote_ids:
            return set()

        stmt = select(likes_table.c.quote_id).where(
            and_(
                likes_table.c.visitor_id == visitor_id,
                likes_table.c.quote_id.in_(quote_ids),
            )
        )
        result = await self.session.execute(stmt)
        return {QuoteId(row.quote_id) for row in result.fetchall()}

    async def reset(self) -> int:
        """Zero every counter and delete every ledger entry atomically."""
        with logfire.span("like_repository.reset"):
            async with self.session.begin_nested():
                await self.session.execute(
                    update(quotes_table).values(likes_count=0, updated_at=func.now())
                )
                result = await self.session.execute(delete(likes_table))

            return result.rowcount  # type: ignore[attr-defined]
