"""
Tick Math - Tick ↔ SqrtPrice 변환

CLAMM 의 틱 수학 함수들. 온체인 Move 모듈과 동일한 정밀도로 구현.

References:
- Move: dex_clamm_math::tick_math

핵심 공식:
    price = 1.0001^tick
    sqrtPrice = sqrt(price) * 2^64   (Q64.64)
    tick = floor(log2(sqrtPrice) / log2(sqrt(1.0001)))
"""

from typing import Tuple

from ..constants import (
    INV_LOG2_SQRT10001,
    MAX_LIQUIDITY,
    MAX_SQRT_RATIO,
    MAX_TICK,
    MAX_U256,
    MIN_SQRT_RATIO,
    Q64,
    ZERO_SQRT_RATIO,
)
from ..errors import ClammMathError, ErrorKind
from .fixed_point import decode_round_down, from_u128, mul_fp
from .log_exp_math import log2


# |tick| 의 bit 0 에 따른 시작 ratio (Q128.128)
_RATIO_EVEN: int = 0x100000000000000000000000000000000
_RATIO_ODD: int = 0xfffcb933bd6fad37aa2d162d1a594001

# (비트 마스크, 1/sqrt(1.0001)^bit 의 Q128.128 매직 넘버)
_RATIO_FACTORS: Tuple[Tuple[int, int], ...] = (
    (0x2, 0xfff97272373d413259a46990580e213a),
    (0x4, 0xfff2e50f5f656932ef12357cf3c7fdcc),
    (0x8, 0xffe5caca7e10e4e61c3624eaa0941cd0),
    (0x10, 0xffcb9843d60f6159c9db58835c926644),
    (0x20, 0xff973b41fa98c081472e6896dfb254c0),
    (0x40, 0xff2ea16466c96a3843ec78b326b52861),
    (0x80, 0xfe5dee046a99a2a811c461f1969c3053),
    (0x100, 0xfcbe86c7900a88aedcffc83b479aa3a4),
    (0x200, 0xf987a7253ac413176f2b074cf7815e54),
    (0x400, 0xf3392b0822b70005940c7a398e4b70f3),
    (0x800, 0xe7159475a2c29b7443b29c7fa6e889d9),
    (0x1000, 0xd097f3bdfd2022b8845ad8f792aa5825),
    (0x2000, 0xa9f746462d870fdf8a65dc1f90e061e5),
    (0x4000, 0x70d869a156d2a1b890bb3df62baf32f7),
    (0x8000, 0x31be135f97d08fd981231505542fcfa6),
    (0x10000, 0x9aa508b5b7a84e1c677de54f3e99bc9),
    (0x20000, 0x5d6af8dedb81196699c329225ee604),
    (0x40000, 0x2216e584f5fa1ea926041bedfe98),
)


def get_sqrt_ratio_at_tick(tick: int) -> int:
    """틱에서 sqrtPrice (Q64.64) 계산

    Move tick_math::get_sqrt_ratio_at_tick() 과 동일한 구현.
    온체인 수준의 정밀도를 위해 정수 연산만 사용.

    Args:
        tick: 틱 인덱스 (-443636 ~ 443636)

    Returns:
        sqrt(1.0001^tick) * 2^64

    Raises:
        ClammMathError: |tick| > MAX_TICK 인 경우 (MAX_TICK)
    """
    abs_tick = abs(tick)
    if abs_tick > MAX_TICK:
        raise ClammMathError(
            ErrorKind.MAX_TICK,
            f"틱이 유효 범위를 벗어났습니다: {tick} (범위: {-MAX_TICK} ~ {MAX_TICK})"
        )

    ratio = _RATIO_ODD if abs_tick & 0x1 else _RATIO_EVEN
    for mask, factor in _RATIO_FACTORS:
        if abs_tick & mask:
            ratio = (ratio * factor) >> 128

    # 부호 있는 입력 기준: 0 이상이면 역수
    if tick >= 0:
        ratio = MAX_U256 // ratio

    # Q128.128 -> Q64.64, 나머지가 있으면 올림
    sqrt_price = ratio >> 64
    if ratio % Q64 != 0:
        sqrt_price += 1
    return sqrt_price


def get_tick_at_sqrt_ratio(sqrt_price: int) -> int:
    """sqrtPrice 에서 틱 계산

    get_sqrt_ratio_at_tick(tick) <= sqrt_price 를 만족하는 가장 큰 틱.
    후보 선택 순서(high → mid → low)와 가드 순서는 Move 구현과 동일합니다.

    Args:
        sqrt_price: sqrtPrice (Q64.64)

    Returns:
        틱 인덱스

    Raises:
        ClammMathError: sqrt_price 가 [MIN_SQRT_RATIO, MAX_SQRT_RATIO) 를
            벗어난 경우 (INVALID_SQRT_PRICE), 안전한 틱이 없는 경우
            (NO_SAFE_TICK_FOUND, GTE_MAX_TICK)
    """
    if sqrt_price < MIN_SQRT_RATIO or sqrt_price >= MAX_SQRT_RATIO:
        raise ClammMathError(
            ErrorKind.INVALID_SQRT_PRICE,
            f"sqrtPrice 가 유효 범위를 벗어났습니다: {sqrt_price}"
        )

    # 부호는 sqrt_price < ZERO_SQRT_RATIO 비교로 대신 판별
    _, log2_sqrt_price = log2(from_u128(sqrt_price))
    result = mul_fp(log2_sqrt_price, from_u128(INV_LOG2_SQRT10001))
    tick_u64 = decode_round_down(result)

    if tick_u64 == 0:
        tick_low, tick_mid, tick_high = -1, 0, 1
    elif sqrt_price < ZERO_SQRT_RATIO:
        tick_low, tick_mid, tick_high = -tick_u64 - 1, -tick_u64, -tick_u64 + 1
    else:
        tick_low, tick_mid, tick_high = tick_u64 - 1, tick_u64, tick_u64 + 1

    if tick_low < -MAX_TICK:
        tick_low = -MAX_TICK
    if tick_high > MAX_TICK:
        tick_high = MAX_TICK

    if get_sqrt_ratio_at_tick(tick_high) <= sqrt_price:
        if tick_high >= MAX_TICK:
            raise ClammMathError(ErrorKind.GTE_MAX_TICK)
        if get_sqrt_ratio_at_tick(tick_high + 1) <= sqrt_price:
            raise ClammMathError(ErrorKind.NO_SAFE_TICK_FOUND)
        return tick_high

    if get_sqrt_ratio_at_tick(tick_mid) <= sqrt_price:
        return tick_mid
    if get_sqrt_ratio_at_tick(tick_low) <= sqrt_price:
        return tick_low

    raise ClammMathError(ErrorKind.NO_SAFE_TICK_FOUND)


def min_usable_tick(tick_spacing: int) -> int:
    """-MAX_TICK 을 틱 간격에 맞춰 내림 정렬 (음의 무한대 방향)"""
    return (-MAX_TICK // tick_spacing) * tick_spacing


def max_usable_tick(tick_spacing: int) -> int:
    """MAX_TICK 을 틱 간격에 맞춰 내림 정렬"""
    return (MAX_TICK // tick_spacing) * tick_spacing


def tick_spacing_to_max_liquidity_per_tick(tick_spacing: int) -> int:
    """틱 간격별 틱당 최대 유동성

    Args:
        tick_spacing: 틱 간격 (1 ~ MAX_TICK)

    Returns:
        MAX_LIQUIDITY // 사용 가능한 틱 개수

    Raises:
        ClammMathError: tick_spacing <= 0 (NON_POSITIVE_TICK_SPACING),
            tick_spacing > MAX_TICK (GT_MAX_TICK)
    """
    if tick_spacing <= 0:
        raise ClammMathError(
            ErrorKind.NON_POSITIVE_TICK_SPACING,
            f"틱 간격은 양수여야 합니다: {tick_spacing}"
        )
    if tick_spacing > MAX_TICK:
        raise ClammMathError(
            ErrorKind.GT_MAX_TICK,
            f"틱 간격이 MAX_TICK 보다 큽니다: {tick_spacing}"
        )

    min_tick = min_usable_tick(tick_spacing)
    max_tick = max_usable_tick(tick_spacing)
    num_ticks = (max_tick - min_tick) // tick_spacing + 1
    return MAX_LIQUIDITY // num_ticks
