"""
Liquidity Math - 유동성 계산

CLAMM 의 집중화된 유동성(Concentrated Liquidity) 계산.
특정 가격 범위에서의 토큰 수량과 유동성 간의 변환.

References:
- Move: dex_clamm_math::liquidity_math

핵심 공식:
    L = Δx * √P_a * √P_b / (√P_b - √P_a)   # token0 기준
    L = Δy / (√P_b - √P_a)                 # token1 기준

유동성 계산은 방향과 무관하게 항상 내림(decode_round_down)입니다.
"""

from typing import Tuple

from .fixed_point import decode_round_down, div_fp, encode, from_u128
from .sqrt_price_math import get_amount0_delta, get_amount1_delta
from .tick_math import get_sqrt_ratio_at_tick
from .util import order_sqrt_ratios


def liquidity_for_amount0(sqrt_ratio_a: int, sqrt_ratio_b: int, amount0: int) -> int:
    """amount0에서 유동성 계산

    Args:
        sqrt_ratio_a: sqrtPrice (순서 무관)
        sqrt_ratio_b: sqrtPrice (순서 무관)
        amount0: token0 수량

    Returns:
        유동성 (두 가격이 같으면 0)
    """
    lower, upper = order_sqrt_ratios(sqrt_ratio_a, sqrt_ratio_b)
    if lower == upper:
        return 0

    q64_64 = (lower * upper * amount0) // (upper - lower)
    return decode_round_down(from_u128(q64_64))


def liquidity_for_amount1(sqrt_ratio_a: int, sqrt_ratio_b: int, amount1: int) -> int:
    """amount1에서 유동성 계산

    Args:
        sqrt_ratio_a: sqrtPrice (순서 무관)
        sqrt_ratio_b: sqrtPrice (순서 무관)
        amount1: token1 수량

    Returns:
        유동성 (두 가격이 같으면 0)
    """
    lower, upper = order_sqrt_ratios(sqrt_ratio_a, sqrt_ratio_b)
    if lower == upper:
        return 0

    return decode_round_down(div_fp(encode(amount1), from_u128(upper - lower)))


def liquidity_for_amounts(
    sqrt_ratio: int,
    sqrt_ratio_a: int,
    sqrt_ratio_b: int,
    amount0: int,
    amount1: int
) -> int:
    """토큰 수량에서 유동성 계산

    현재 가격과 범위, 두 토큰 수량이 주어졌을 때
    민트 가능한 최대 유동성을 계산합니다.

    Returns:
        유동성 (범위 내에서는 두 제약 조건 중 작은 값)
    """
    lower, upper = order_sqrt_ratios(sqrt_ratio_a, sqrt_ratio_b)

    if sqrt_ratio <= lower:
        # 가격이 범위 아래: token0만 사용
        return liquidity_for_amount0(lower, upper, amount0)

    if sqrt_ratio < upper:
        # 가격이 범위 내: 양쪽 토큰 사용, 작은 값 반환
        liquidity0 = liquidity_for_amount0(sqrt_ratio, upper, amount0)
        liquidity1 = liquidity_for_amount1(lower, sqrt_ratio, amount1)
        return min(liquidity0, liquidity1)

    # 가격이 범위 위: token1만 사용
    return liquidity_for_amount1(lower, upper, amount1)


def amount0_for_liquidity(sqrt_ratio_a: int, sqrt_ratio_b: int, liquidity_delta: int) -> int:
    return get_amount0_delta(sqrt_ratio_a, sqrt_ratio_b, liquidity_delta)


def amount1_for_liquidity(sqrt_ratio_a: int, sqrt_ratio_b: int, liquidity_delta: int) -> int:
    return get_amount1_delta(sqrt_ratio_a, sqrt_ratio_b, liquidity_delta)


def amounts_for_liquidity(
    sqrt_ratio: int,
    sqrt_ratio_a: int,
    sqrt_ratio_b: int,
    liquidity_delta: int
) -> Tuple[int, int]:
    """유동성에서 토큰 수량 계산

    현재 가격과 범위, 유동성이 주어졌을 때
    포지션이 보유한 토큰 수량을 계산합니다.

    Args:
        sqrt_ratio: 현재 sqrtPrice
        sqrt_ratio_a: 범위 경계 sqrtPrice (순서 무관)
        sqrt_ratio_b: 범위 경계 sqrtPrice (순서 무관)
        liquidity_delta: 부호 있는 유동성 (양수면 올림, 음수면 내림)

    Returns:
        (amount0, amount1) 튜플
    """
    lower, upper = order_sqrt_ratios(sqrt_ratio_a, sqrt_ratio_b)

    if sqrt_ratio < lower:
        # 가격이 범위 아래: token0만 보유
        return get_amount0_delta(lower, upper, liquidity_delta), 0

    if sqrt_ratio < upper:
        # 가격이 범위 내: 양쪽 토큰 보유
        return (
            get_amount0_delta(sqrt_ratio, upper, liquidity_delta),
            get_amount1_delta(lower, sqrt_ratio, liquidity_delta),
        )

    # 가격이 범위 위: token1만 보유
    return 0, get_amount1_delta(lower, upper, liquidity_delta)


def quote_at_tick(zero_for_one: bool, base_amount: int, tick: int) -> int:
    """틱 가격으로 base_amount 를 상대 토큰 수량으로 환산

    price (Q64.64) = sqrtPrice^2 >> 64

    Args:
        zero_for_one: True면 token0 → token1 (곱셈), False면 token1 → token0 (나눗셈)
        base_amount: 환산할 수량
        tick: 부호 있는 틱

    Returns:
        환산된 수량 (내림)
    """
    sqrt_ratio = get_sqrt_ratio_at_tick(tick)
    ratio = (sqrt_ratio * sqrt_ratio) >> 64

    if zero_for_one:
        return (ratio * base_amount) >> 64
    return (base_amount << 64) // ratio


def get_add_liquidity_amounts_from_amount(
    tick_lower: int,
    tick_upper: int,
    amount: int,
    is_in0: bool
) -> Tuple[int, int, int]:
    """한쪽 토큰 수량으로 유동성 추가 시 필요한 수량 계산

    주어진 수량에서 유동성을 구한 뒤 반대쪽 수량을 역산합니다.

    Args:
        tick_lower: 하한 틱
        tick_upper: 상한 틱
        amount: 입력 토큰 수량
        is_in0: True면 amount 가 token0, False면 token1

    Returns:
        (amount0, amount1, liquidity) 튜플
    """
    sqrt_lower = get_sqrt_ratio_at_tick(tick_lower)
    sqrt_upper = get_sqrt_ratio_at_tick(tick_upper)

    if is_in0:
        liquidity = liquidity_for_amount0(sqrt_lower, sqrt_upper, amount)
        amount1 = amount1_for_liquidity(sqrt_lower, sqrt_upper, liquidity)
        return amount, amount1, liquidity

    liquidity = liquidity_for_amount1(sqrt_lower, sqrt_upper, amount)
    amount0 = amount0_for_liquidity(sqrt_lower, sqrt_upper, liquidity)
    return amount0, amount, liquidity
