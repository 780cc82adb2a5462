"""Quote response shared by the quote, like and ranking use cases."""

from datetime import datetime

from pydantic import BaseModel

from quotes.domain.model import Quote


class QuoteResponse(BaseModel):
    """Single quote as seen by one visitor."""

    id: str
    text: str
    author: str
    likes_count: int
    is_liked: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_quote(cls, quote: Quote, is_liked: bool) -> "QuoteResponse":
        """Build the response from a domain quote and the caller's like status."""
        return cls(
            id=str(quote.id),
            text=quote.text,
            author=quote.author,
            likes_count=quote.likes_count,
            is_liked=is_liked,
            created_at=quote.created_at,
            updated_at=quote.updated_at,
        )
