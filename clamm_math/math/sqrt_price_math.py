"""
Sqrt Price Math - sqrtPrice 관련 계산

CLAMM 의 가격은 Q64.64 sqrtPrice 형식으로 저장됩니다.
sqrtPrice = sqrt(price) * 2^64

References:
- Move: dex_clamm_math::sqrt_price_math

반올림 방향은 항상 풀에 유리한 쪽입니다:
    유동성 추가 (liquidity_delta >= 0) → 올림
    유동성 제거 (liquidity_delta < 0)  → 내림
"""

from ..constants import MAX_U128, Q64
from ..errors import ClammMathError, ErrorKind
from .fixed_point import (
    add_fp,
    decode_round_down,
    decode_round_up,
    div_u128,
    encode,
    from_u128,
    sub_fp,
)
from .util import div_rounding_up, mul_div_roundup, order_sqrt_ratios


def get_next_sqrt_price_from_amount0_rounding_up(
    sqrt_price: int,
    liquidity: int,
    amount: int,
    add: bool
) -> int:
    """amount0 변화에 따른 다음 sqrtPrice 계산 (올림)

    공식: √P' = L * √P / (L ± Δx * √P)

    Args:
        sqrt_price: 현재 sqrtPrice
        liquidity: 유동성
        amount: amount0 변화량
        add: True면 추가, False면 제거

    Returns:
        새로운 sqrtPrice

    Raises:
        ClammMathError: 제거량이 가용량 이상인 경우 (OUT_OF_RANGE),
            결과가 u128 을 넘는 경우 (OVERFLOW)
    """
    if amount == 0:
        return sqrt_price

    numerator1 = liquidity * Q64
    product = sqrt_price * amount

    if not add and numerator1 <= product:
        raise ClammMathError(ErrorKind.OUT_OF_RANGE)

    denominator = numerator1 + product if add else numerator1 - product
    next_price = mul_div_roundup(sqrt_price, numerator1, denominator)
    if next_price > MAX_U128:
        raise ClammMathError(ErrorKind.OVERFLOW)
    return next_price


def get_next_sqrt_price_from_amount1_rounding_down(
    sqrt_price: int,
    liquidity: int,
    amount: int,
    add: bool
) -> int:
    """amount1 변화에 따른 다음 sqrtPrice 계산 (내림)

    공식: √P' = √P ± Δy / L

    Raises:
        ClammMathError: liquidity == 0 (ZERO_LIQUIDITY),
            결과가 음수인 경우 (UNDERFLOW)
    """
    if liquidity == 0:
        raise ClammMathError(ErrorKind.ZERO_LIQUIDITY)

    if add:
        quotient = div_u128(encode(amount), liquidity)
        return add_fp(from_u128(sqrt_price), quotient).v

    quotient = div_rounding_up(amount * Q64, liquidity)
    if quotient > sqrt_price:
        raise ClammMathError(ErrorKind.UNDERFLOW)
    return sub_fp(from_u128(sqrt_price), from_u128(quotient)).v


def get_next_sqrt_price_from_input(
    sqrt_price: int,
    liquidity: int,
    amount_in: int,
    zero_for_one: bool
) -> int:
    """입력 수량에 따른 다음 sqrtPrice"""
    if zero_for_one:
        return get_next_sqrt_price_from_amount0_rounding_up(sqrt_price, liquidity, amount_in, True)
    return get_next_sqrt_price_from_amount1_rounding_down(sqrt_price, liquidity, amount_in, True)


def get_next_sqrt_price_from_output(
    sqrt_price: int,
    liquidity: int,
    amount_out: int,
    zero_for_one: bool
) -> int:
    """출력 수량에 따른 다음 sqrtPrice"""
    if zero_for_one:
        return get_next_sqrt_price_from_amount1_rounding_down(sqrt_price, liquidity, amount_out, False)
    return get_next_sqrt_price_from_amount0_rounding_up(sqrt_price, liquidity, amount_out, False)


def get_amount0_delta_rounded(
    sqrt_ratio_a: int,
    sqrt_ratio_b: int,
    liquidity: int,
    round_up: bool
) -> int:
    """두 가격 사이 주어진 유동성의 token0 양

    공식: Δx = L * 2^64 * (√P_b - √P_a) / (√P_a * √P_b)

    Args:
        sqrt_ratio_a: sqrtPrice (순서 무관)
        sqrt_ratio_b: sqrtPrice (순서 무관)
        liquidity: 유동성 (부호 없음)
        round_up: True면 올림, False면 내림

    Returns:
        amount0 (token0 수량, 최소 단위)
    """
    if sqrt_ratio_a == sqrt_ratio_b:
        return 0

    lower, upper = order_sqrt_ratios(sqrt_ratio_a, sqrt_ratio_b)
    if lower == 0:
        return 0

    product = (liquidity * Q64) * (upper - lower)
    if product == 0:
        return 0

    denominator = lower * upper
    if round_up:
        return (product - 1) // denominator + 1
    return product // denominator


def get_amount1_delta_rounded(
    sqrt_ratio_a: int,
    sqrt_ratio_b: int,
    liquidity: int,
    round_up: bool
) -> int:
    """두 가격 사이 주어진 유동성의 token1 양

    공식: Δy = L * (√P_b - √P_a) / 2^64
    """
    if sqrt_ratio_a == sqrt_ratio_b:
        return 0

    lower, upper = order_sqrt_ratios(sqrt_ratio_a, sqrt_ratio_b)
    amount1_required = from_u128((upper - lower) * liquidity)

    if round_up:
        return decode_round_up(amount1_required)
    return decode_round_down(amount1_required)


def get_amount0_delta(sqrt_ratio_a: int, sqrt_ratio_b: int, liquidity_delta: int) -> int:
    """부호 있는 유동성 변화량의 token0 양"""
    return get_amount0_delta_rounded(
        sqrt_ratio_a, sqrt_ratio_b, abs(liquidity_delta), liquidity_delta >= 0
    )


def get_amount1_delta(sqrt_ratio_a: int, sqrt_ratio_b: int, liquidity_delta: int) -> int:
    """부호 있는 유동성 변화량의 token1 양"""
    return get_amount1_delta_rounded(
        sqrt_ratio_a, sqrt_ratio_b, abs(liquidity_delta), liquidity_delta >= 0
    )
