"""Like use cases."""

from .check_like import CheckLikeRequest, CheckLikeResponse, CheckLikeUseCase
from .like_quote import LikeQuoteRequest, LikeQuoteUseCase
from .reset_likes import ResetLikesResponse, ResetLikesUseCase

__all__ = [
    "CheckLikeRequest",
    "CheckLikeResponse",
    "CheckLikeUseCase",
    "LikeQuoteRequest",
    "LikeQuoteUseCase",
    "ResetLikesResponse",
    "ResetLikesUseCase",
]
