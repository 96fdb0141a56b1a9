"""
Log Exp Math - 고정소수점 log2

Move fixed_point64::log_exp_math 의 log2 (log2fix 알고리즘) 구현.
반복적인 제곱으로 소수부 비트를 하나씩 추출합니다.

References:
- Move: fixed_point64::log_exp_math::log2

반환 규약:
    (sign, magnitude)
    sign = 1 → log2(x) >= 0, magnitude = log2(x)
    sign = 0 → log2(x) < 0,  magnitude = -log2(x)
"""

from typing import Tuple

from ..constants import Q64
from ..errors import ClammMathError, ErrorKind
from .fixed_point import FixedPoint64, from_u128, to_u128

PRECISION: int = 64

# raw Q64.64 상수
ONE_RAW: int = Q64
TWO_RAW: int = Q64 << 1

# 소수부 추출 반복 횟수 (Move 구현과 동일)
FRACTION_ITERATIONS: int = 62


def log2(x: FixedPoint64) -> Tuple[int, FixedPoint64]:
    """log2(x) 계산

    Args:
        x: 양수 Q64.64 값

    Returns:
        (sign, magnitude) 튜플. 음수 결과는 부호 플래그로만 표시되며
        호출자가 부호를 적용해야 합니다.

    Raises:
        ClammMathError: x <= 0 인 경우 (LOG_2_ZERO_UNBOUNDED)
    """
    z = to_u128(x)
    if z <= 0:
        raise ClammMathError(ErrorKind.LOG_2_ZERO_UNBOUNDED)

    y = 0
    y_negative = 0
    b = 1 << (PRECISION - 1)
    sign = 1

    # [1, 2) 구간으로 정규화
    while z >= TWO_RAW:
        z >>= 1
        y += ONE_RAW

    while z < ONE_RAW:
        sign = 0
        z <<= 1
        y_negative += ONE_RAW

    for _ in range(FRACTION_ITERATIONS):
        half = z >> 1
        z = (half * half) >> 62
        if z >= TWO_RAW:
            z >>= 1
            y += b
        b >>= 1

    if sign > 0:
        return sign, from_u128(y)
    return sign, from_u128(y_negative - y)
