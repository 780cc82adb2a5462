"""Quote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from quotes.application.usecase.quote import (
    CreateQuoteRequest,
    CreateQuoteUseCase,
    DeleteQuoteRequest,
    DeleteQuoteUseCase,
    GetQuoteRequest,
    GetQuoteUseCase,
    ListQuotesRequest,
    ListQuotesResponse,
    ListQuotesUseCase,
    QuoteResponse,
    UpdateQuoteRequest,
    UpdateQuoteUseCase,
)
from quotes.domain.error import NotFoundError
from quotes.interface.api.identity import VisitorContext, get_visitor
from quotes.interface.api.params import parse_int, parse_quote_id

router = APIRouter(prefix="/quotes", tags=["quotes"], route_class=DishkaRoute)


class CreateQuoteAPIRequest(BaseModel):
    """API request for creating a quote."""

    text: str | None = None
    author: str | None = None


class UpdateQuoteAPIRequest(BaseModel):
    """API request for updating a quote. Omitted or empty fields are kept."""

    text: str | None = None
    author: str | None = None


@router.get("/random", response_model=QuoteResponse)
async def get_random_quote(
    get_quote_use_case: FromDishka[GetQuoteUseCase],
    visitor: VisitorContext = Depends(get_visitor),
) -> QuoteResponse:
    """Get a uniformly random quote.

    Raises:
        NotFoundError: If the catalog is empty
    """
    return await get_quote_use_case.execute(
        GetQuoteRequest(random=True, visitor_id=visitor.visitor_id)
    )


@router.get("", response_model=ListQuotesResponse)
async def list_quotes(
    list_quotes_use_case: FromDishka[ListQuotesUseCase],
    page: str | None = None,
    page_size: str | None = None,
    search: str | None = None,
    visitor: VisitorContext = Depends(get_visitor),
) -> ListQuotesResponse:
    """List quotes newest first.

    Args:
        page: 1-based page number, clamped to at least 1
        page_size: Items per page, clamped into the configured range
        search: Case-insensitive substring of text or author
    """
    return await list_quotes_use_case.execute(
        ListQuotesRequest(
            page=parse_int(page, 1),
            page_size=parse_int(page_size, None),
            search=search.strip() if search and search.strip() else None,
            visitor_id=visitor.visitor_id,
        )
    )


@router.post("", response_model=QuoteResponse, status_code=status.HTTP_201_CREATED)
async def create_quote(
    request: CreateQuoteAPIRequest,
    create_quote_use_case: FromDishka[CreateQuoteUseCase],
) -> QuoteResponse:
    """Create a new quote.

    Raises:
        ValidationError: If text or author is missing or blank
    """
    return await create_quote_use_case.execute(
        CreateQuoteRequest(text=request.text or "", author=request.author or "")
    )


@router.get("/{quote_id}", response_model=QuoteResponse)
async def get_quote(
    quote_id: str,
    get_quote_use_case: FromDishka[GetQuoteUseCase],
    visitor: VisitorContext = Depends(get_visitor),
) -> QuoteResponse:
    """Get a quote by ID."""
    return await get_quote_use_case.execute(
        GetQuoteRequest(quote_id=parse_quote_id(quote_id), visitor_id=visitor.visitor_id)
    )


@router.put("/{quote_id}", response_model=QuoteResponse)
async def update_quote(
    quote_id: str,
    request: UpdateQuoteAPIRequest,
    update_quote_use_case: FromDishka[UpdateQuoteUseCase],
    visitor: VisitorContext = Depends(get_visitor),
) -> QuoteResponse:
    """Update a quote's text and/or author."""
    return await update_quote_use_case.execute(
        UpdateQuoteRequest(
            quote_id=parse_quote_id(quote_id),
            text=request.text,
            author=request.author,
            visitor_id=visitor.visitor_id,
        )
    )


@router.delete("/{quote_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_quote(
    quote_id: str,
    delete_quote_use_case: FromDishka[DeleteQuoteUseCase],
) -> Response:
    """Delete a quote and all of its likes."""
    parsed_id = parse_quote_id(quote_id)
    result = await delete_quote_use_case.execute(DeleteQuoteRequest(quote_id=parsed_id))
    if not result.deleted:
        raise NotFoundError("Quote", str(parsed_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
