"""Like entity.

A like is a ledger entry asserting that one visitor liked one quote.
Each visitor can like a given quote at most once.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from quotes.domain.model.common import DomainModel
from quotes.domain.model.quote import utcnow
from quotes.domain.value import LikeId, QuoteId, VisitorId


class Like(DomainModel):
    """Like ledger entry.

    Business rules:
    - One like per visitor per quote (unique constraint on quote_id + visitor_id)
    - Never mutated; removed only by a full likes reset or quote deletion
    """

    id: LikeId
    quote_id: QuoteId
    visitor_id: VisitorId
    user_agent: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
