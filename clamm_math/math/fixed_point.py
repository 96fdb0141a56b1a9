"""
Fixed Point - Q64.64 고정소수점 타입

Move fixed_point64 모듈과 동일한 의미로 구현.
값은 `value × 2^64` 형태의 부호 없는 정수(u128)로 저장됩니다.

References:
- Move: fixed_point64::fixed_point64

핵심 규칙:
    raw ∈ [0, 2^128 - 1]
    범위를 벗어나는 연산은 OVERFLOW / UNDERFLOW 로 실패 (wraparound 없음)
    decode: 가장 가까운 정수로 반올림 (tie 는 올림, bit 63 검사)
"""

from dataclasses import dataclass

from ..constants import Q64, MAX_U64, MAX_U128
from ..errors import ClammMathError, ErrorKind


@dataclass(frozen=True, order=True)
class FixedPoint64:
    """Q64.64 고정소수점 값

    일반 정수와 섞이지 않도록 별도 타입으로 감쌉니다.
    비교 연산자(<, <=, ==, ...)는 raw 값 비교입니다.
    """
    v: int

    def __post_init__(self):
        if isinstance(self.v, bool) or not isinstance(self.v, int):
            raise ClammMathError(
                ErrorKind.INPUT_OUT_OF_RANGE,
                f"raw 값은 정수여야 합니다: {self.v!r}"
            )
        if self.v < 0 or self.v > MAX_U128:
            raise ClammMathError(
                ErrorKind.INPUT_OUT_OF_RANGE,
                f"u128 범위를 벗어났습니다: {self.v}"
            )


def _checked(raw: int) -> FixedPoint64:
    """연산 결과를 u128 범위 검사 후 FixedPoint64로 변환"""
    if raw > MAX_U128:
        raise ClammMathError(ErrorKind.OVERFLOW)
    if raw < 0:
        raise ClammMathError(ErrorKind.UNDERFLOW)
    return FixedPoint64(raw)


def _require_uint(value: int, bound: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ClammMathError(ErrorKind.INPUT_OUT_OF_RANGE, f"정수가 아닙니다: {value!r}")
    if value < 0 or value > bound:
        raise ClammMathError(ErrorKind.INPUT_OUT_OF_RANGE, f"범위를 벗어났습니다: {value}")
    return value


def _floor_div(numerator: int, denominator: int) -> int:
    if denominator == 0:
        raise ClammMathError(ErrorKind.DIVISION_BY_ZERO)
    return numerator // denominator


# -------------------------
# 생성 / 변환
# -------------------------

def encode(x: int) -> FixedPoint64:
    """u64 정수를 Q64.64로 인코딩 (x << 64)"""
    return FixedPoint64(_require_uint(x, MAX_U64) << 64)


def decode(fp: FixedPoint64) -> int:
    """가장 가까운 정수로 디코딩 (0.5 는 올림)"""
    a = fp.v >> 64
    if (fp.v >> 63) & 1:
        return a + 1
    return a


def decode_round_down(fp: FixedPoint64) -> int:
    """내림 디코딩"""
    return fp.v >> 64


def decode_round_up(fp: FixedPoint64) -> int:
    """올림 디코딩"""
    a = fp.v >> 64
    if fp.v % Q64 != 0:
        return a + 1
    return a


def to_u128(fp: FixedPoint64) -> int:
    return fp.v


def from_u128(v: int) -> FixedPoint64:
    return FixedPoint64(v)


def one() -> FixedPoint64:
    return FixedPoint64(Q64)


def zero() -> FixedPoint64:
    return FixedPoint64(0)


# -------------------------
# 정수 스칼라와의 연산
# -------------------------

def mul(fp: FixedPoint64, y: int) -> FixedPoint64:
    """FixedPoint64 × u64"""
    return _checked(fp.v * _require_uint(y, MAX_U64))


def div(fp: FixedPoint64, y: int) -> FixedPoint64:
    """FixedPoint64 ÷ u64 (내림)"""
    return _checked(_floor_div(fp.v, _require_uint(y, MAX_U64)))


def add(fp: FixedPoint64, y: int) -> FixedPoint64:
    """FixedPoint64 + u64 (y 는 2^64 배로 스케일)"""
    return _checked(fp.v + (_require_uint(y, MAX_U64) << 64))


def sub(fp: FixedPoint64, y: int) -> FixedPoint64:
    """FixedPoint64 - u64"""
    delta = _require_uint(y, MAX_U64) << 64
    if fp.v < delta:
        raise ClammMathError(ErrorKind.UNDERFLOW)
    return FixedPoint64(fp.v - delta)


def mul_u128(fp: FixedPoint64, y: int) -> FixedPoint64:
    return _checked(fp.v * _require_uint(y, MAX_U128))


def div_u128(fp: FixedPoint64, y: int) -> FixedPoint64:
    return _checked(_floor_div(fp.v, _require_uint(y, MAX_U128)))


def add_u128(fp: FixedPoint64, y: int) -> FixedPoint64:
    return _checked(fp.v + (_require_uint(y, MAX_U128) << 64))


def sub_u128(fp: FixedPoint64, y: int) -> FixedPoint64:
    delta = _require_uint(y, MAX_U128) << 64
    if fp.v < delta:
        raise ClammMathError(ErrorKind.UNDERFLOW)
    return FixedPoint64(fp.v - delta)


def mul_div_u128(fp: FixedPoint64, y: int, z: int) -> FixedPoint64:
    """(fp × y) ÷ z

    Move 에서는 u256 중간값을 사용하므로 곱셈 단계에서 오버플로우가 없습니다.
    Python int 는 제한이 없으므로 최종 결과만 검사합니다.
    """
    y = _require_uint(y, MAX_U128)
    z = _require_uint(z, MAX_U128)
    return _checked(_floor_div(fp.v * y, z))


# -------------------------
# FixedPoint64 <-> FixedPoint64 연산
# -------------------------

def add_fp(a: FixedPoint64, b: FixedPoint64) -> FixedPoint64:
    return _checked(a.v + b.v)


def sub_fp(a: FixedPoint64, b: FixedPoint64) -> FixedPoint64:
    if a.v < b.v:
        raise ClammMathError(ErrorKind.UNDERFLOW)
    return FixedPoint64(a.v - b.v)


def mul_fp(a: FixedPoint64, b: FixedPoint64) -> FixedPoint64:
    """(a × b) >> 64"""
    return _checked((a.v * b.v) >> 64)


def div_fp(a: FixedPoint64, b: FixedPoint64) -> FixedPoint64:
    """(a << 64) ÷ b"""
    return _checked(_floor_div(a.v << 64, b.v))


def mul_div_fp(a: FixedPoint64, b: FixedPoint64, c: FixedPoint64) -> FixedPoint64:
    """a × b ÷ c (스케일 보정 없음)"""
    return _checked(_floor_div(a.v * b.v, c.v))


# -------------------------
# 분수
# -------------------------

def fraction(numerator: int, denominator: int) -> FixedPoint64:
    """u64 분수 numerator / denominator 를 Q64.64로 (내림)"""
    numerator = _require_uint(numerator, MAX_U64)
    denominator = _require_uint(denominator, MAX_U64)
    return _checked(_floor_div(numerator << 64, denominator))


def fraction_u128(numerator: int, denominator: int) -> FixedPoint64:
    """u128 분수 numerator / denominator 를 Q64.64로 (내림)"""
    numerator = _require_uint(numerator, MAX_U128)
    denominator = _require_uint(denominator, MAX_U128)
    return _checked(_floor_div(numerator << 64, denominator))


def is_zero(fp: FixedPoint64) -> bool:
    return fp.v == 0
