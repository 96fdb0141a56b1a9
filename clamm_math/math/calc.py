"""
포지션 계산 함수

온체인 포지션 원시값(틱 bits, 유동성, 현재 sqrtPrice)을
토큰 수량과 표시용 가격 범위로 변환합니다.

입력은 인덱서/체인에서 받은 10진수 문자열 그대로 받습니다.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from ..errors import ClammMathError, ErrorKind
from .convert import DisplayPrice, i64_from_bits, parse_uint, sqrt_price_to_price
from .liquidity_math import amounts_for_liquidity
from .tick_math import get_sqrt_ratio_at_tick, max_usable_tick, min_usable_tick

IntLike = Union[str, int]


@dataclass(frozen=True)
class PriceRange:
    """표시용 가격 범위"""
    min: DisplayPrice
    max: DisplayPrice


def calculate_asset(
    tick_lower: IntLike,
    tick_upper: IntLike,
    liquidity: IntLike,
    sqrt_price: IntLike
) -> Tuple[int, int]:
    """포지션이 보유한 토큰 수량 계산

    Args:
        tick_lower: 하한 틱 (I64 bits, 10진수 문자열)
        tick_upper: 상한 틱 (I64 bits, 10진수 문자열)
        liquidity: 포지션 유동성
        sqrt_price: 풀의 현재 sqrtPrice (Q64.64)

    Returns:
        (amount0, amount1) 튜플

    Example:
        >>> calculate_asset("18446744073709108016", "443600", "0", "18446744073709551616")
        (0, 0)
    """
    lower_ratio = get_sqrt_ratio_at_tick(i64_from_bits(tick_lower))
    upper_ratio = get_sqrt_ratio_at_tick(i64_from_bits(tick_upper))
    return amounts_for_liquidity(
        parse_uint(sqrt_price, "sqrt_price"),
        lower_ratio,
        upper_ratio,
        parse_uint(liquidity, "liquidity"),
    )


def calculate_tokens(
    tick_lower: IntLike,
    tick_upper: IntLike,
    is_reversed: bool = False
) -> PriceRange:
    """포지션의 표시용 가격 범위 계산

    price = sqrtPrice^2 / 2^128 (token1 / token0)

    Args:
        tick_lower: 하한 틱 (I64 bits)
        tick_upper: 상한 틱 (I64 bits)
        is_reversed: True면 token0 / token1 기준 (역수 후 min/max 교환)

    Returns:
        PriceRange(min, max)
    """
    lower_price = sqrt_price_to_price(get_sqrt_ratio_at_tick(i64_from_bits(tick_lower)))
    upper_price = sqrt_price_to_price(get_sqrt_ratio_at_tick(i64_from_bits(tick_upper)))

    if is_reversed:
        return PriceRange(
            min=DisplayPrice(1 / upper_price),
            max=DisplayPrice(1 / lower_price),
        )
    return PriceRange(min=lower_price, max=upper_price)


def is_full_range(tick_lower: IntLike, tick_upper: IntLike, tick_spacing: int) -> bool:
    """포지션이 전체 가격 범위를 덮는지 여부

    두 틱이 틱 간격에 맞춰 내림 정렬된 [-MAX_TICK, MAX_TICK] 과
    정확히 같을 때만 True.

    틱 간격이 MAX_TICK 을 나누지 않으면 내림 정렬된 하한은 -MAX_TICK 보다 작아
    유효한 틱이 아닙니다 (예: 간격 20 → -443640). 이 판정은 정수 비교만 하므로
    True 를 반환하지만, 같은 틱으로 calculate_asset 을 호출하면 MAX_TICK 오류입니다.
    """
    if tick_spacing <= 0:
        raise ClammMathError(
            ErrorKind.NON_POSITIVE_TICK_SPACING,
            f"틱 간격은 양수여야 합니다: {tick_spacing}"
        )

    min_tick = i64_from_bits(tick_lower)
    max_tick = i64_from_bits(tick_upper)
    return min_tick == min_usable_tick(tick_spacing) and max_tick == max_usable_tick(tick_spacing)


def is_in_range(tick_lower: IntLike, tick_upper: IntLike, sqrt_price: IntLike) -> bool:
    """현재 가격이 포지션 범위 [lower, upper) 안에 있는지 여부

    amounts_for_liquidity 가 두 토큰을 모두 반환하는 구간과 같습니다.
    """
    lower_ratio = get_sqrt_ratio_at_tick(i64_from_bits(tick_lower))
    upper_ratio = get_sqrt_ratio_at_tick(i64_from_bits(tick_upper))
    if lower_ratio > upper_ratio:
        lower_ratio, upper_ratio = upper_ratio, lower_ratio

    current = parse_uint(sqrt_price, "sqrt_price")
    return lower_ratio <= current < upper_ratio
