"""Domain value objects for the quotes catalog."""

from quotes.domain.value.identifiers import LikeId, QuoteId, VisitorId
from quotes.domain.value.types import RankingPeriod

__all__ = [
    # Identifiers
    "QuoteId",
    "LikeId",
    "VisitorId",
    # Types
    "RankingPeriod",
]
