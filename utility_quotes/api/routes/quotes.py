import re
from typing import List, Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

import structlog
from ...catalogue import Quote

router = APIRouter()
logger = structlog.get_logger()


class QuoteList(BaseModel):
    quotes: List[Quote]
    total: int


class CategoryList(BaseModel):
    categories: List[str]


@router.get("/random", response_model=Quote, summary="Random quote")
def random_quote(request: Request) -> Quote:
    return request.app.state.catalogue.random()


@router.get("/categories/list", response_model=CategoryList, summary="Known categories")
def categories(request: Request) -> CategoryList:
    return CategoryList(categories=request.app.state.catalogue.categories())


@router.get("", response_model=QuoteList, summary="All quotes, optionally filtered by category")
def list_quotes(
    request: Request,
    category: Optional[str] = Query(None, description="Case-insensitive category name"),
) -> QuoteList:
    catalogue = request.app.state.catalogue
    quotes = catalogue.by_category(category) if category else catalogue.all()
    return QuoteList(quotes=quotes, total=len(quotes))


# Leading-integer parse: optional whitespace and sign, then ASCII digits; the rest is ignored
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_quote_id(raw: str) -> Optional[int]:
    """Leading integer of `raw`, or None: "3abc" is 3, "1_0" is 1, "abc" is None."""
    m = _LEADING_INT.match(raw)
    return int(m.group(1)) if m else None


@router.get(
    "/{quote_id}",
    response_model=Quote,
    summary="Quote by id",
    responses={404: {"content": {"application/json": {"example": {"error": "Quote not found"}}}}},
)
def get_quote(request: Request, quote_id: str):
    parsed = parse_quote_id(quote_id)
    quote = request.app.state.catalogue.get(parsed) if parsed is not None else None
    if quote is None:
        logger.info("quote_not_found", quote_id=quote_id)
        return JSONResponse(status_code=404, content={"error": "Quote not found"})
    return quote
