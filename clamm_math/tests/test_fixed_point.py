"""
Fixed Point 테스트

fixed_point.py 의 Q64.64 연산을 테스트합니다.
범위를 벗어나는 결과는 반드시 오류여야 합니다 (wraparound 없음).
"""

import random

import pytest

from ..constants import Q64, MAX_U64, MAX_U128
from ..errors import ClammMathError, ErrorKind
from ..math.fixed_point import (
    FixedPoint64,
    encode,
    decode,
    decode_round_down,
    decode_round_up,
    from_u128,
    to_u128,
    one,
    zero,
    mul,
    div,
    add,
    sub,
    mul_u128,
    sub_u128,
    mul_div_u128,
    add_fp,
    sub_fp,
    mul_fp,
    div_fp,
    mul_div_fp,
    fraction,
    fraction_u128,
    is_zero,
)
from ..math.util import mul_div_roundup


class TestFixedPoint64Type:
    """FixedPoint64 값 타입 테스트"""

    def test_raw_bounds(self):
        """raw 값은 [0, 2^128 - 1]"""
        assert FixedPoint64(0).v == 0
        assert FixedPoint64(MAX_U128).v == MAX_U128

        with pytest.raises(ClammMathError) as exc:
            FixedPoint64(MAX_U128 + 1)
        assert exc.value.kind is ErrorKind.INPUT_OUT_OF_RANGE

        with pytest.raises(ClammMathError):
            FixedPoint64(-1)

    def test_rejects_float(self):
        """부동소수점은 FixedPoint64 로 만들 수 없음"""
        with pytest.raises(ClammMathError) as exc:
            FixedPoint64(1.5)
        assert exc.value.kind is ErrorKind.INPUT_OUT_OF_RANGE

    def test_comparisons_use_raw_value(self):
        """비교는 raw 값 비교"""
        assert from_u128(1) < from_u128(2)
        assert one() > zero()
        assert encode(3) == FixedPoint64(3 * Q64)
        assert max(one(), zero()) == one()
        assert is_zero(zero())
        assert not is_zero(one())

    def test_not_comparable_with_int(self):
        """일반 정수와 섞어서 비교할 수 없음"""
        with pytest.raises(TypeError):
            one() < 5


class TestEncodeDecode:
    """encode / decode 테스트"""

    def test_encode(self):
        assert to_u128(encode(0)) == 0
        assert to_u128(encode(7)) == 7 << 64
        assert to_u128(encode(MAX_U64)) == MAX_U64 << 64

    def test_encode_negative(self):
        with pytest.raises(ClammMathError) as exc:
            encode(-1)
        assert exc.value.kind is ErrorKind.INPUT_OUT_OF_RANGE

    def test_decode_rounds_half_up(self):
        """0.5 는 올림 (bit 63 검사)"""
        half = Q64 // 2
        assert decode(from_u128(2 * Q64 + half)) == 3
        assert decode(from_u128(2 * Q64 + half - 1)) == 2
        assert decode(from_u128(2 * Q64)) == 2

    def test_decode_round_down_and_up(self):
        v = from_u128(5 * Q64 + 1)
        assert decode_round_down(v) == 5
        assert decode_round_up(v) == 6

        exact = encode(5)
        assert decode_round_down(exact) == 5
        assert decode_round_up(exact) == 5


class TestScalarOps:
    """정수 스칼라 연산 테스트"""

    def test_add_sub(self):
        assert add(encode(2), 3) == encode(5)
        assert sub(encode(5), 3) == encode(2)

    def test_sub_underflow(self):
        with pytest.raises(ClammMathError) as exc:
            sub(encode(1), 2)
        assert exc.value.kind is ErrorKind.UNDERFLOW

        with pytest.raises(ClammMathError) as exc:
            sub_u128(encode(1), 2)
        assert exc.value.kind is ErrorKind.UNDERFLOW

    def test_mul_div(self):
        assert mul(encode(3), 4) == encode(12)
        assert div(encode(12), 4) == encode(3)
        # 나눗셈은 내림
        assert div(from_u128(7), 2) == from_u128(3)

    def test_mul_overflow(self):
        with pytest.raises(ClammMathError) as exc:
            mul_u128(from_u128(MAX_U128), 2)
        assert exc.value.kind is ErrorKind.OVERFLOW

    def test_div_by_zero(self):
        with pytest.raises(ClammMathError) as exc:
            div(one(), 0)
        assert exc.value.kind is ErrorKind.DIVISION_BY_ZERO

    def test_mul_div_u128_full_width(self):
        """곱셈 중간값이 u128 을 넘어도 최종 결과가 범위 안이면 성공"""
        result = mul_div_u128(from_u128(MAX_U128), MAX_U128, MAX_U128)
        assert result == from_u128(MAX_U128)

        with pytest.raises(ClammMathError) as exc:
            mul_div_u128(from_u128(MAX_U128), 2, 1)
        assert exc.value.kind is ErrorKind.OVERFLOW


class TestFixedPointOps:
    """FixedPoint64 <-> FixedPoint64 연산 테스트"""

    def test_basic(self):
        assert add_fp(encode(1), encode(2)) == encode(3)
        assert sub_fp(encode(3), encode(2)) == encode(1)
        assert mul_fp(encode(3), encode(4)) == encode(12)
        assert div_fp(encode(12), encode(4)) == encode(3)
        assert mul_div_fp(encode(6), encode(4), encode(8)) == from_u128(3 * Q64)

    def test_sub_fp_underflow(self):
        with pytest.raises(ClammMathError) as exc:
            sub_fp(encode(1), encode(2))
        assert exc.value.kind is ErrorKind.UNDERFLOW

    def test_add_fp_overflow(self):
        with pytest.raises(ClammMathError) as exc:
            add_fp(from_u128(MAX_U128), from_u128(1))
        assert exc.value.kind is ErrorKind.OVERFLOW

    def test_overflow_fuzz(self):
        """실제 결과가 2^128 - 1 을 넘으면 항상 OVERFLOW"""
        rng = random.Random(20240601)
        for _ in range(500):
            a = rng.randrange(0, MAX_U128 + 1)
            b = rng.randrange(1, MAX_U128 + 1)
            c = rng.randrange(1, MAX_U128 + 1)

            cases = (
                (mul_fp, (a * b) >> 64, (a, b)),
                (div_fp, (a << 64) // b, (a, b)),
                (mul_div_fp, (a * b) // c, (a, b, c)),
            )
            for op, expected, raw_args in cases:
                args = [from_u128(x) for x in raw_args]
                if expected > MAX_U128:
                    with pytest.raises(ClammMathError) as exc:
                        op(*args)
                    assert exc.value.kind is ErrorKind.OVERFLOW
                else:
                    assert op(*args).v == expected

    def test_overflow_boundary(self):
        """경계값 바로 위/아래"""
        # (2^64 * (2^128 - 1)) >> 64 == 2^128 - 1
        assert mul_fp(one(), from_u128(MAX_U128)).v == MAX_U128
        with pytest.raises(ClammMathError):
            mul_fp(from_u128(2 * Q64), from_u128(MAX_U128))
        with pytest.raises(ClammMathError):
            div_fp(from_u128(MAX_U128), from_u128(Q64 - 1))


class TestFraction:
    """fraction 테스트"""

    def test_fraction(self):
        assert fraction(1, 2) == from_u128(Q64 // 2)
        assert fraction(1, 3) == from_u128(Q64 // 3)
        assert fraction_u128(10, 5) == encode(2)

    def test_fraction_zero_denominator(self):
        with pytest.raises(ClammMathError) as exc:
            fraction(1, 0)
        assert exc.value.kind is ErrorKind.DIVISION_BY_ZERO


class TestMulDivRoundup:
    """mul_div_roundup 테스트"""

    def test_rounds_up(self):
        assert mul_div_roundup(5, 2, 3) == 4
        assert mul_div_roundup(6, 2, 3) == 4
        assert mul_div_roundup(0, 2, 3) == 0

    def test_zero_denominator(self):
        with pytest.raises(ClammMathError) as exc:
            mul_div_roundup(1, 1, 0)
        assert exc.value.kind is ErrorKind.DIVISION_BY_ZERO


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
