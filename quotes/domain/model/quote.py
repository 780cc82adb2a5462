"""Quote aggregate root."""

from datetime import datetime, timezone

from pydantic import Field

from quotes.domain.model.common import DomainModel
from quotes.domain.value import QuoteId


def utcnow() -> datetime:
    """Timezone-aware current time used for all quote timestamps."""
    return datetime.now(timezone.utc)


class Quote(DomainModel):
    """Quote aggregate root.

    ``likes_count`` is denormalized from the like ledger. It is only ever
    changed by the ledger itself, inside the same transaction that writes or
    clears ledger entries.
    """

    id: QuoteId
    text: str = Field(min_length=1)
    author: str = Field(min_length=1)
    likes_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
