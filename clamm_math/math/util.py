"""
공용 정수 헬퍼
"""

from typing import Tuple

from ..errors import ClammMathError, ErrorKind


def mul_div_roundup(a: int, b: int, c: int) -> int:
    """(a × b) ÷ c 올림

    c 는 0이 아니어야 합니다 (sqrt_price_math 에서 의존).
    """
    if c == 0:
        raise ClammMathError(ErrorKind.DIVISION_BY_ZERO, "mul_div_roundup: 분모 c 는 0이 아니어야 합니다")
    product = a * b
    if product == 0:
        return 0
    return (product - 1) // c + 1


def div_rounding_up(numerator: int, denominator: int) -> int:
    """numerator ÷ denominator 올림"""
    if denominator == 0:
        raise ClammMathError(ErrorKind.DIVISION_BY_ZERO)
    result = numerator // denominator
    if numerator % denominator > 0:
        result += 1
    return result


def order_sqrt_ratios(a: int, b: int) -> Tuple[int, int]:
    """두 sqrt ratio 를 (작은 값, 큰 값) 순서로 정렬"""
    if a > b:
        return b, a
    return a, b
