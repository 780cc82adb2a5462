"""Lenient parsing of path and query parameters."""

from uuid import UUID

from quotes.domain.error import NotFoundError

# Path segments that name fixed routes under /quotes and are never quote ids
RESERVED_SEGMENTS = frozenset({"random", "top", "likes"})


def parse_quote_id(raw: str) -> UUID:
    """Turn a path segment into a quote id.

    Reserved segments and malformed ids cannot name an existing quote, so
    they are reported as not found instead of as a bad request.

    Raises:
        NotFoundError: If the segment is reserved or not a UUID
    """
    if raw in RESERVED_SEGMENTS:
        raise NotFoundError("Quote", raw)
    try:
        return UUID(raw)
    except ValueError:
        raise NotFoundError("Quote", raw) from None


def parse_int(raw: str | None, default: int | None) -> int | None:
    """Parse an integer query parameter, falling back to the default on garbage."""
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default
