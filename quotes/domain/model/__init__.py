"""Domain model entities for the quotes catalog."""

from quotes.domain.model.like import Like
from quotes.domain.model.quote import Quote

__all__ = [
    "Quote",
    "Like",
]
