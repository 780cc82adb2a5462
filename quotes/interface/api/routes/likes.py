"""Like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from quotes.application.usecase.like import (
    CheckLikeRequest,
    CheckLikeResponse,
    CheckLikeUseCase,
    LikeQuoteRequest,
    LikeQuoteUseCase,
    ResetLikesResponse,
    ResetLikesUseCase,
)
from quotes.application.usecase.quote import QuoteResponse
from quotes.interface.api.identity import VisitorContext, get_visitor
from quotes.interface.api.params import parse_quote_id

router = APIRouter(prefix="/quotes", tags=["likes"], route_class=DishkaRoute)


@router.delete("/likes/reset", response_model=ResetLikesResponse)
async def reset_likes(
    reset_likes_use_case: FromDishka[ResetLikesUseCase],
) -> ResetLikesResponse:
    """Remove every like and zero every counter."""
    return await reset_likes_use_case.execute()


@router.put("/{quote_id}/like", response_model=QuoteResponse)
async def like_quote(
    quote_id: str,
    like_quote_use_case: FromDishka[LikeQuoteUseCase],
    visitor: VisitorContext = Depends(get_visitor),
) -> QuoteResponse:
    """Like a quote. Each visitor may like a quote once.

    Raises:
        AlreadyLikedError: If this visitor already liked the quote
        NotFoundError: If the quote doesn't exist
    """
    return await like_quote_use_case.execute(
        LikeQuoteRequest(
            quote_id=parse_quote_id(quote_id),
            visitor_id=visitor.visitor_id,
            user_agent=visitor.user_agent,
        )
    )


@router.get("/{quote_id}/is-liked", response_model=CheckLikeResponse)
async def check_like(
    quote_id: str,
    check_like_use_case: FromDishka[CheckLikeUseCase],
    visitor: VisitorContext = Depends(get_visitor),
) -> CheckLikeResponse:
    """Report whether the caller liked a quote."""
    return await check_like_use_case.execute(
        CheckLikeRequest(quote_id=parse_quote_id(quote_id), visitor_id=visitor.visitor_id)
    )
