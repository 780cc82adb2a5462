"""Reset likes use case."""

from pydantic import BaseModel

from quotes.domain.service import LikeService


class ResetLikesResponse(BaseModel):
    """Reset likes response."""

    message: str
    removed: int


class ResetLikesUseCase:
    """Use case for wiping the like ledger and zeroing every counter."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize reset likes use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self) -> ResetLikesResponse:
        """Execute reset flow."""
        removed = await self.like_service.reset_likes()
        return ResetLikesResponse(message="All likes have been reset", removed=removed)
