"""
Position Endpoints

Values concentrated liquidity positions with the bit-exact math library.
Math errors are raised as ClammMathError and converted to 422 responses by
the handler registered in app.main.
"""
import logging

from fastapi import APIRouter, HTTPException

from clamm_math.data.types import ClammPoolInfo, ClammPosition
from clamm_math.math.calc import calculate_asset, calculate_tokens, is_full_range
from clamm_math.portfolio import value_positions

from app.api.schemas import (
    FullRangeRequest,
    FullRangeResponse,
    PositionAssetRequest,
    PositionAssetResponse,
    PositionValuationResponse,
    PriceRangeRequest,
    PriceRangeResponse,
    ValuePositionsRequest,
    ValuePositionsResponse,
)
from app.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/positions")


@router.post("/asset", response_model=PositionAssetResponse)
async def position_asset(request: PositionAssetRequest):
    """
    Token amounts held by a position at the current pool price

    Amounts are returned as decimal strings.
    """
    amount0, amount1 = calculate_asset(
        request.tick_lower,
        request.tick_upper,
        request.liquidity,
        request.sqrt_price,
    )
    return PositionAssetResponse(amount0=str(amount0), amount1=str(amount1))


@router.post("/price-range", response_model=PriceRangeResponse)
async def position_price_range(request: PriceRangeRequest):
    """
    Display price range of a position

    Floating point output for display only.
    """
    price_range = calculate_tokens(request.tick_lower, request.tick_upper, request.is_reversed)
    return PriceRangeResponse(min=price_range.min, max=price_range.max)


@router.post("/full-range", response_model=FullRangeResponse)
async def position_full_range(request: FullRangeRequest):
    """Whether a position spans the full aligned tick range"""
    tick_spacing = request.tick_spacing
    if tick_spacing is None:
        tick_spacing = settings.DEFAULT_TICK_SPACING

    return FullRangeResponse(
        is_full_range=is_full_range(request.tick_lower, request.tick_upper, tick_spacing)
    )


@router.post("/value", response_model=ValuePositionsResponse)
async def position_value(request: ValuePositionsRequest):
    """
    Value a batch of positions

    A position that cannot be computed is returned with computable=false
    instead of failing the whole request.
    """
    if len(request.positions) > settings.MAX_BATCH_POSITIONS:
        raise HTTPException(
            status_code=400,
            detail=f"Too many positions: {len(request.positions)} (max {settings.MAX_BATCH_POSITIONS})"
        )

    positions = [ClammPosition.from_dict(p.model_dump()) for p in request.positions]
    pools = {
        lp_metadata: None if pool is None else ClammPoolInfo.from_dict(pool.model_dump())
        for lp_metadata, pool in request.pools.items()
    }

    valuations = value_positions(positions, pools, request.is_reversed)
    results = [PositionValuationResponse(**v.to_dict()) for v in valuations]
    computable_count = sum(1 for v in valuations if v.computable)

    logger.info("Valued %d/%d positions", computable_count, len(valuations))

    return ValuePositionsResponse(results=results, computable_count=computable_count)
