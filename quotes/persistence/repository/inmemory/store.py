"""Shared state for the in-memory repositories."""

from quotes.domain.model import Like, Quote
from quotes.domain.value import QuoteId, VisitorId


class InMemoryStore:
    """Tables shared by the in-memory quote and like repositories.

    The like ledger has to adjust quote counters, so both repositories
    operate on the same store. Mutations never await, which makes each
    repository call atomic with respect to other coroutines.
    """

    def __init__(self) -> None:
        self.quotes: dict[QuoteId, Quote] = {}
        self.likes: dict[tuple[QuoteId, VisitorId], Like] = {}
