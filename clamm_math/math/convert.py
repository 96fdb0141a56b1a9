"""
Tick/Price 변환 함수

- i64 bits ↔ 부호 있는 틱 (온체인 I64 two's complement 인코딩)
- sqrtPrice → 표시용 가격 (float)

표시용 가격(DisplayPrice)은 유일하게 부동소수점을 사용하는 경로이며
정산용 정수 연산으로 되돌아가지 않습니다.
"""

from typing import Union

from ..constants import Q64, Q128
from ..errors import ClammMathError, ErrorKind

TWO_POW_63: int = 1 << 63


class DisplayPrice(float):
    """표시 전용 가격 (token1 / token0)

    FixedPoint64 는 정수 raw 값만 허용하므로 이 값으로 생성할 수 없습니다.
    """


def i64_from_bits(bits: Union[str, int]) -> int:
    """Move I64 `bits` 필드(u64 two's complement)를 부호 있는 정수로 디코딩

    양수는 그대로, 음수는 2^64 - |value| 로 저장되어 있습니다.

    Example:
        >>> i64_from_bits("443600")
        443600
        >>> i64_from_bits("18446744073709108016")
        -443600
    """
    if isinstance(bits, bool) or not isinstance(bits, (str, int)):
        raise ClammMathError(ErrorKind.INPUT_OUT_OF_RANGE, f"지원하지 않는 타입입니다: {bits!r}")

    try:
        v = int(bits)
    except (TypeError, ValueError):
        raise ClammMathError(ErrorKind.INPUT_OUT_OF_RANGE, f"정수 문자열이 아닙니다: {bits!r}")

    if v < 0 or v >= Q64:
        raise ClammMathError(ErrorKind.INPUT_OUT_OF_RANGE, f"u64 범위를 벗어났습니다: {bits}")

    if v >= TWO_POW_63:
        return v - Q64
    return v


def parse_uint(value: Union[str, int], name: str) -> int:
    """10진수 문자열 또는 정수를 음이 아닌 정수로 변환"""
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ClammMathError(ErrorKind.INPUT_OUT_OF_RANGE, f"{name}: 지원하지 않는 타입입니다: {value!r}")
    try:
        parsed = int(value)
    except ValueError:
        raise ClammMathError(ErrorKind.INPUT_OUT_OF_RANGE, f"{name}: 정수 문자열이 아닙니다: {value!r}")
    if parsed < 0:
        raise ClammMathError(ErrorKind.INPUT_OUT_OF_RANGE, f"{name}: 음수는 허용되지 않습니다: {value}")
    return parsed


def i64_to_bits(value: int) -> str:
    """부호 있는 정수를 I64 `bits` 필드(10진수 문자열)로 인코딩

    i64_from_bits 의 역연산.
    """
    if value < -TWO_POW_63 or value >= TWO_POW_63:
        raise ClammMathError(ErrorKind.INPUT_OUT_OF_RANGE, f"i64 범위를 벗어났습니다: {value}")

    if value < 0:
        return str(value + Q64)
    return str(value)


def sqrt_price_to_price(sqrt_price: int) -> DisplayPrice:
    """sqrtPrice (Q64.64)를 표시용 가격으로 변환

    sqrtPrice^2 는 Q128.128 이므로 price = sqrtPrice^2 / 2^128.
    정수부와 소수부를 나눠 float 로 변환합니다.
    """
    price_q128 = sqrt_price * sqrt_price
    integer_part, fractional_part = divmod(price_q128, Q128)
    return DisplayPrice(float(integer_part) + float(fractional_part) / float(Q128))
