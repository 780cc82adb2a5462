"""Repository interfaces for the quotes catalog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from quotes.domain.repository.like import LikeRepository
from quotes.domain.repository.quote import QuoteRepository

__all__ = [
    "QuoteRepository",
    "LikeRepository",
]
