"""Ranking use cases."""

from .get_top_quote import GetTopQuoteRequest, GetTopQuoteUseCase

__all__ = [
    "GetTopQuoteRequest",
    "GetTopQuoteUseCase",
]
