"""API endpoints for the swap router."""

import structlog
from fastapi import APIRouter, Depends

from swapper.models.quote import QuoteRequest, QuoteResponse
from swapper.quoter import Quoter, get_default_quoter

logger = structlog.get_logger()

router = APIRouter()


def get_quoter() -> Quoter:
    """Dependency provider for the quoter instance.

    Override this in tests to inject a custom quoter:
        app.dependency_overrides[get_quoter] = lambda: quoter
    """
    return get_default_quoter()


@router.post("/paths/best", response_model_by_alias=True)
async def best_path(
    request: QuoteRequest,
    quoter: Quoter = Depends(get_quoter),
) -> QuoteResponse:
    """Pick the best path for a swap and return its settlement orders.

    Error Handling:
        - Invalid request schema: Returns 422 Validation Error (Pydantic)
        - Routing precondition failure: Returns 400 (see main.py)
    """
    logger.info(
        "received_quote_request",
        side=request.side.value,
        target_input=str(request.target_input),
        native_orders=len(request.native_orders),
        curves=len(request.liquidity_curves),
    )
    return quoter.quote(request)
