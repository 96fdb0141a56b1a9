"""
API Request/Response Schemas using Pydantic

Defines data models for the CLAMM position endpoints.
Big integers (ticks as I64 bits, liquidity, sqrt prices, amounts) travel as
decimal strings so that no precision is lost in JSON.
"""
from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from datetime import datetime, timezone

DECIMAL_PATTERN = r"^[0-9]+$"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PositionAssetRequest(BaseModel):
    """Request payload for POST /api/v1/positions/asset"""
    tick_lower: str = Field(..., description="Lower tick as I64 bits (u64 two's complement)", pattern=DECIMAL_PATTERN)
    tick_upper: str = Field(..., description="Upper tick as I64 bits (u64 two's complement)", pattern=DECIMAL_PATTERN)
    liquidity: str = Field(..., description="Position liquidity", pattern=DECIMAL_PATTERN)
    sqrt_price: str = Field(..., description="Current pool sqrt price (Q64.64)", pattern=DECIMAL_PATTERN)

    class Config:
        json_schema_extra = {
            "example": {
                "tick_lower": "18446744073709108016",
                "tick_upper": "443600",
                "liquidity": "1000000",
                "sqrt_price": "18446744073709551616"
            }
        }


class PositionAssetResponse(BaseModel):
    """Token amounts held by a position"""
    amount0: str = Field(..., description="Token0 amount (smallest unit)")
    amount1: str = Field(..., description="Token1 amount (smallest unit)")


class PriceRangeRequest(BaseModel):
    """Request payload for POST /api/v1/positions/price-range"""
    tick_lower: str = Field(..., description="Lower tick as I64 bits", pattern=DECIMAL_PATTERN)
    tick_upper: str = Field(..., description="Upper tick as I64 bits", pattern=DECIMAL_PATTERN)
    is_reversed: bool = Field(default=False, description="Quote token0 per token1 instead of token1 per token0")

    class Config:
        json_schema_extra = {
            "example": {
                "tick_lower": "18446744073709108016",
                "tick_upper": "443600",
                "is_reversed": False
            }
        }


class PriceRangeResponse(BaseModel):
    """Display-only price range (floating point)"""
    min: float = Field(..., description="Minimum display price")
    max: float = Field(..., description="Maximum display price")


class FullRangeRequest(BaseModel):
    """Request payload for POST /api/v1/positions/full-range"""
    tick_lower: str = Field(..., description="Lower tick as I64 bits", pattern=DECIMAL_PATTERN)
    tick_upper: str = Field(..., description="Upper tick as I64 bits", pattern=DECIMAL_PATTERN)
    tick_spacing: Optional[int] = Field(None, description="Pool tick spacing (defaults to server setting)")


class FullRangeResponse(BaseModel):
    """Full-range classification"""
    is_full_range: bool = Field(..., description="True if both bounds equal the aligned tick limits")


class PositionInput(BaseModel):
    """Raw position as returned by the indexer"""
    token_address: str = Field(..., description="Position token address")
    lp_metadata: str = Field(..., description="Pool LP metadata address")
    tick_lower: str = Field(..., description="Lower tick as I64 bits", pattern=DECIMAL_PATTERN)
    tick_upper: str = Field(..., description="Upper tick as I64 bits", pattern=DECIMAL_PATTERN)
    liquidity: str = Field(..., description="Position liquidity", pattern=DECIMAL_PATTERN)


class PoolInfoInput(BaseModel):
    """Pool state needed to value positions"""
    sqrt_price: str = Field(..., description="Current pool sqrt price (Q64.64)", pattern=DECIMAL_PATTERN)
    tick_spacing: int = Field(..., description="Pool tick spacing")


class ValuePositionsRequest(BaseModel):
    """Request payload for POST /api/v1/positions/value"""
    positions: List[PositionInput] = Field(..., description="Positions to value")
    pools: Dict[str, Optional[PoolInfoInput]] = Field(..., description="Pool info keyed by LP metadata (null if unavailable)")
    is_reversed: bool = Field(default=False, description="Quote display prices as token0 per token1")

    class Config:
        json_schema_extra = {
            "example": {
                "positions": [{
                    "token_address": "0x1",
                    "lp_metadata": "0xpool",
                    "tick_lower": "18446744073709108016",
                    "tick_upper": "443600",
                    "liquidity": "1000000"
                }],
                "pools": {
                    "0xpool": {"sqrt_price": "18446744073709551616", "tick_spacing": 20}
                },
                "is_reversed": False
            }
        }


class PositionValuationResponse(BaseModel):
    """Valuation of one position; computable=False marks a failed position"""
    token_address: str
    lp_metadata: str
    computable: bool
    amount0: Optional[str] = None
    amount1: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    current_tick: Optional[int] = None
    in_range: Optional[bool] = None
    full_range: Optional[bool] = None
    error: Optional[str] = None


class ValuePositionsResponse(BaseModel):
    """Batch valuation result"""
    results: List[PositionValuationResponse] = Field(..., description="Valuations in request order")
    computable_count: int = Field(..., description="Number of positions valued successfully")


class HealthCheckResponse(BaseModel):
    """Response payload for GET /api/v1/health endpoint"""
    status: str = Field(..., description="Health status (healthy or unhealthy)")
    version: str = Field(..., description="API version")
    timestamp: datetime = Field(default_factory=_utcnow, description="Health check timestamp")

    class Config:
        json_schema_extra = {
            "example": {
                "status": "healthy",
                "version": "0.1.0",
                "timestamp": "2024-01-15T10:30:00Z"
            }
        }


class ErrorResponse(BaseModel):
    """Error response payload"""
    status: str = Field(default="error", description="Response status")
    kind: str = Field(..., description="Math error kind")
    message: str = Field(..., description="Error message")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")

    class Config:
        json_schema_extra = {
            "example": {
                "status": "error",
                "kind": "MAX_TICK",
                "message": "MAX_TICK: tick out of range",
                "timestamp": "2024-01-15T10:30:00Z"
            }
        }
