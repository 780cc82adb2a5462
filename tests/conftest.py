"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from quotes.domain.model import Quote
from quotes.domain.value import QuoteId

# Console-only, nothing is sent anywhere during tests
logfire.configure(send_to_logfire=False, console=False)


def make_quote(
    text: str = "Simplicity is prerequisite for reliability.",
    author: str = "Edsger W. Dijkstra",
    likes_count: int = 0,
    age: timedelta = timedelta(0),
) -> Quote:
    """Helper building a quote created ``age`` ago."""
    created_at = datetime.now(timezone.utc) - age
    return Quote(
        id=QuoteId(uuid4()),
        text=text,
        author=author,
        likes_count=likes_count,
        created_at=created_at,
        updated_at=created_at,
    )

