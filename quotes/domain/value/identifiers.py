"""Strongly typed identifiers for quotes catalog entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

QuoteId = NewType("QuoteId", UUID)
LikeId = NewType("LikeId", UUID)

# Heuristic client identity derived from request headers (usually an IP address)
VisitorId = NewType("VisitorId", str)
