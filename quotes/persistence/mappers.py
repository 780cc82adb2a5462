"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from quotes.domain.model import Like, Quote
from quotes.domain.value import QuoteId


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_quote(row: Dict[str, Any]) -> Quote:
    """Convert database row to Quote domain model.

    Args:
        row: Database row as dict

    Returns:
        Quote domain model
    """
    return Quote(
        id=QuoteId(_as_uuid(row["id"])),
        text=row["text"],
        author=row["author"],
        likes_count=row["likes_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def quote_to_dict(quote: Quote) -> Dict[str, Any]:
    """Convert Quote domain model to database dict."""
    return quote.model_dump()


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    return like.model_dump()
