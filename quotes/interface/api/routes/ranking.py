"""Top quote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from quotes.application.usecase.quote import QuoteResponse
from quotes.application.usecase.ranking import GetTopQuoteRequest, GetTopQuoteUseCase
from quotes.domain.value import RankingPeriod
from quotes.interface.api.identity import VisitorContext, get_visitor

router = APIRouter(prefix="/quotes/top", tags=["ranking"], route_class=DishkaRoute)


@router.get("/weekly", response_model=QuoteResponse)
async def get_top_weekly(
    get_top_quote_use_case: FromDishka[GetTopQuoteUseCase],
    visitor: VisitorContext = Depends(get_visitor),
) -> QuoteResponse:
    """Most liked quote created within the trailing week."""
    return await get_top_quote_use_case.execute(
        GetTopQuoteRequest(period=RankingPeriod.WEEKLY, visitor_id=visitor.visitor_id)
    )


@router.get("/alltime", response_model=QuoteResponse)
async def get_top_all_time(
    get_top_quote_use_case: FromDishka[GetTopQuoteUseCase],
    visitor: VisitorContext = Depends(get_visitor),
) -> QuoteResponse:
    """Most liked quote overall."""
    return await get_top_quote_use_case.execute(
        GetTopQuoteRequest(period=RankingPeriod.ALL_TIME, visitor_id=visitor.visitor_id)
    )
