"""Check like use case."""

from uuid import UUID

from pydantic import BaseModel

from quotes.domain.service import LikeService
from quotes.domain.value import QuoteId, VisitorId


class CheckLikeRequest(BaseModel):
    """Check like request."""

    quote_id: UUID
    visitor_id: str


class CheckLikeResponse(BaseModel):
    """Check like response."""

    is_liked: bool


class CheckLikeUseCase:
    """Use case for checking whether the caller liked a quote.

    An unknown quote simply reports is_liked=False.
    """

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: CheckLikeRequest) -> CheckLikeResponse:
        is_liked = await self.like_service.is_liked(
            QuoteId(request.quote_id), VisitorId(request.visitor_id)
        )
        return CheckLikeResponse(is_liked=is_liked)
