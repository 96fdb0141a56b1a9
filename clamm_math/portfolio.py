"""
포지션 평가

여러 CLAMM 포지션을 한 번에 평가합니다.
개별 포지션 계산이 실패하면 해당 포지션만 "계산 불가"로 표시하고
나머지 포지션 평가는 계속합니다.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional

from .data.types import ClammPoolInfo, ClammPosition
from .errors import ClammMathError
from .math.calc import calculate_asset, calculate_tokens, is_full_range, is_in_range
from .math.convert import DisplayPrice, parse_uint
from .math.tick_math import get_tick_at_sqrt_ratio

logger = logging.getLogger(__name__)


@dataclass
class PositionValuation:
    """포지션 평가 결과

    computable 이 False 이면 수량/가격 필드는 None 이고 error 에 원인이 담깁니다.
    """
    token_address: str
    lp_metadata: str
    computable: bool
    amount0: Optional[int] = None
    amount1: Optional[int] = None
    min_price: Optional[DisplayPrice] = None
    max_price: Optional[DisplayPrice] = None
    current_tick: Optional[int] = None
    in_range: Optional[bool] = None
    full_range: Optional[bool] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            "token_address": self.token_address,
            "lp_metadata": self.lp_metadata,
            "computable": self.computable,
            "amount0": None if self.amount0 is None else str(self.amount0),
            "amount1": None if self.amount1 is None else str(self.amount1),
            "min_price": self.min_price,
            "max_price": self.max_price,
            "current_tick": self.current_tick,
            "in_range": self.in_range,
            "full_range": self.full_range,
            "error": self.error,
        }


def value_position(
    position: ClammPosition,
    pool: ClammPoolInfo,
    is_reversed: bool = False
) -> PositionValuation:
    """단일 포지션 평가

    풀 sqrtPrice 를 먼저 검증합니다. 어느 한 단계라도 실패하면 포지션 전체가
    계산 불가이며, 일부 필드만 채운 결과는 반환하지 않습니다.

    Raises:
        ClammMathError: 계산 중 오류 (호출자가 처리)
    """
    current_tick = get_tick_at_sqrt_ratio(parse_uint(pool.sqrt_price, "sqrt_price"))
    amount0, amount1 = calculate_asset(
        position.tick_lower,
        position.tick_upper,
        position.liquidity,
        pool.sqrt_price,
    )
    price_range = calculate_tokens(position.tick_lower, position.tick_upper, is_reversed)

    return PositionValuation(
        token_address=position.token_address,
        lp_metadata=position.lp_metadata,
        computable=True,
        amount0=amount0,
        amount1=amount1,
        min_price=price_range.min,
        max_price=price_range.max,
        current_tick=current_tick,
        in_range=is_in_range(position.tick_lower, position.tick_upper, pool.sqrt_price),
        full_range=is_full_range(position.tick_lower, position.tick_upper, pool.tick_spacing),
    )


def value_positions(
    positions: Iterable[ClammPosition],
    pools: Mapping[str, Optional[ClammPoolInfo]],
    is_reversed: bool = False
) -> List[PositionValuation]:
    """여러 포지션 평가

    Args:
        positions: 평가할 포지션 목록
        pools: lp_metadata → 풀 정보 (조회 실패 시 None)
        is_reversed: 가격 범위를 token0 / token1 기준으로 표시할지 여부

    Returns:
        입력 순서대로의 PositionValuation 목록
    """
    results = []
    for position in positions:
        pool = pools.get(position.lp_metadata)
        if pool is None:
            logger.warning("Pool info unavailable for %s", position.lp_metadata)
            results.append(PositionValuation(
                token_address=position.token_address,
                lp_metadata=position.lp_metadata,
                computable=False,
                error="POOL_INFO_UNAVAILABLE",
            ))
            continue

        try:
            results.append(value_position(position, pool, is_reversed))
        except ClammMathError as e:
            logger.warning("Position %s not computable: %s", position.token_address, e)
            results.append(PositionValuation(
                token_address=position.token_address,
                lp_metadata=position.lp_metadata,
                computable=False,
                error=str(e),
            ))

    logger.debug("Valued %d positions", len(results))
    return results
