"""Visitor identity derived from request headers.

There are no accounts: a visitor is whatever address the proxy chain reports.
The value is trivially spoofable by a client that sets X-Forwarded-For itself,
so it only guards against accidental double likes, not abuse.
"""

from collections.abc import Mapping

from fastapi import Request
from pydantic import BaseModel, ConfigDict

DEFAULT_VISITOR_ID = "127.0.0.1"


class VisitorContext(BaseModel):
    """Caller identity for a single request."""

    model_config = ConfigDict(frozen=True)

    visitor_id: str
    user_agent: str | None = None


def resolve_visitor_id(headers: Mapping[str, str]) -> str:
    """Pick the visitor identifier from proxy headers.

    Order: first X-Forwarded-For hop, then X-Real-IP, then the loopback default.
    Empty values fall through to the next source.
    """
    forwarded_for = headers.get("x-forwarded-for", "")
    if forwarded_for:
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            return first_hop

    real_ip = headers.get("x-real-ip", "").strip()
    if real_ip:
        return real_ip

    return DEFAULT_VISITOR_ID


def get_visitor(request: Request) -> VisitorContext:
    """FastAPI dependency building the caller's VisitorContext."""
    return VisitorContext(
        visitor_id=resolve_visitor_id(request.headers),
        user_agent=request.headers.get("user-agent") or None,
    )
