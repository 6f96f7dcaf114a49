"""
HTTP boundary for the swap estimator.

GET /health and GET /estimate?pool=&src=&dst=&src_amount=. Amounts are
decimal strings in and out, since they routinely exceed 2**53.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse

from src.estimator import (
    DecodeFailure,
    EstimationError,
    InputError,
    MissingParameterError,
    RpcFailure,
    SwapEstimator,
    TokenMismatchError,
    ZeroReservesError,
)

logger = logging.getLogger(__name__)

MISSING_PARAMETERS_MESSAGE = "Missing required parameters: pool, src, dst, src_amount"


def error_status(error: EstimationError) -> int:
    """HTTP status for an estimation error."""
    if isinstance(error, (InputError, TokenMismatchError)):
        return 400
    if isinstance(error, ZeroReservesError):
        return 422
    if isinstance(error, (RpcFailure, DecodeFailure)):
        return 502
    return 500


def error_response(error: EstimationError) -> JSONResponse:
    status_code = error_status(error)
    if status_code >= 500:
        # Node errors can carry provider URLs; keep them in the log only
        content = {"error": "Failed to estimate swap", "code": error.code, "stage": error.stage}
    else:
        content = {"error": str(error), "code": error.code}
    return JSONResponse(status_code=status_code, content=content)


def create_app(estimator: SwapEstimator) -> FastAPI:
    """
    Build the API around an already-wired estimator.

    Args:
        estimator: SwapEstimator owned by the composition root

    Returns:
        FastAPI application
    """
    app = FastAPI(
        title="Swap Estimator API",
        description="Read-only Uniswap V2 swap quotes from live pool reserves",
        version="0.1.0",
    )
    app.state.estimator = estimator

    @app.exception_handler(EstimationError)
    async def estimation_error_handler(request: Request, exc: EstimationError):
        log = logger.warning if error_status(exc) < 500 else logger.error
        log(f"Error estimating swap ({exc.code}, stage={exc.stage}): {exc}")
        return error_response(exc)

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "ok"}

    @app.get("/estimate")
    async def estimate(
        request: Request,
        pool: Optional[str] = Query(default=None),
        src: Optional[str] = Query(default=None),
        dst: Optional[str] = Query(default=None),
        src_amount: Optional[str] = Query(default=None),
    ):
        if not all([pool, src, dst, src_amount]):
            raise MissingParameterError(MISSING_PARAMETERS_MESSAGE, stage="parse")

        quote = await request.app.state.estimator.estimate(pool, src, dst, src_amount)
        return {"dst_amount": str(quote.amount_out)}

    return app
