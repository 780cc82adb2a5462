"""Domain services."""

from .base import Service
from .like_service import LikeService
from .quote_service import QuoteService
from .ranking_service import RankingService

__all__ = [
    "LikeService",
    "QuoteService",
    "RankingService",
    "Service",
]
