"""
포지션 계산 / 변환 테스트

I64 bits 디코딩, 표시용 가격, calculate_asset / calculate_tokens / is_full_range 를 테스트합니다.
"""

import pytest

from ..constants import MAX_SQRT_RATIO, MIN_SQRT_RATIO, ZERO_SQRT_RATIO
from ..errors import ClammMathError, ErrorKind
from ..math.calc import PriceRange, calculate_asset, calculate_tokens, is_full_range, is_in_range
from ..math.convert import DisplayPrice, i64_from_bits, i64_to_bits, sqrt_price_to_price
from ..math.fixed_point import FixedPoint64
from ..math.tick_math import get_sqrt_ratio_at_tick

# 자주 쓰는 I64 bits
NEG_443600 = "18446744073709108016"
NEG_443636 = "18446744073709107980"
NEG_443635 = "18446744073709107981"
NEG_443640 = "18446744073709107976"
NEG_443632 = "18446744073709107984"


class TestI64Bits:
    """i64_from_bits / i64_to_bits 테스트"""

    def test_decode_positive(self):
        assert i64_from_bits("443600") == 443600
        assert i64_from_bits(0) == 0

    def test_decode_negative(self):
        assert i64_from_bits(NEG_443600) == -443600
        assert i64_from_bits(str(2**64 - 1)) == -1
        assert i64_from_bits(2**63) == -(2**63)

    def test_encode(self):
        assert i64_to_bits(-443600) == NEG_443600
        assert i64_to_bits(443600) == "443600"
        assert i64_to_bits(-1) == str(2**64 - 1)

    def test_inverse(self):
        for value in (-(2**63), -443636, -1, 0, 1, 443636, 2**63 - 1):
            assert i64_from_bits(i64_to_bits(value)) == value

    @pytest.mark.parametrize("bad", ["-1", str(2**64), "abc", "", 1.5, None, True])
    def test_decode_invalid(self, bad):
        with pytest.raises(ClammMathError) as exc:
            i64_from_bits(bad)
        assert exc.value.kind is ErrorKind.INPUT_OUT_OF_RANGE

    def test_encode_out_of_range(self):
        with pytest.raises(ClammMathError) as exc:
            i64_to_bits(2**63)
        assert exc.value.kind is ErrorKind.INPUT_OUT_OF_RANGE


class TestDisplayPrice:
    """sqrt_price_to_price 테스트"""

    def test_tick_zero_is_one(self):
        price = sqrt_price_to_price(ZERO_SQRT_RATIO)
        assert isinstance(price, DisplayPrice)
        assert price == 1.0

    def test_known_prices(self):
        assert sqrt_price_to_price(get_sqrt_ratio_at_tick(-443600)) == pytest.approx(5.44076519695288e-20, rel=1e-12)
        assert sqrt_price_to_price(get_sqrt_ratio_at_tick(443600)) == pytest.approx(1.8379767623776203e19, rel=1e-12)

    def test_not_a_fixed_point(self):
        """표시용 가격으로 FixedPoint64 를 만들 수 없음"""
        with pytest.raises(ClammMathError) as exc:
            FixedPoint64(sqrt_price_to_price(ZERO_SQRT_RATIO))
        assert exc.value.kind is ErrorKind.INPUT_OUT_OF_RANGE


class TestCalculateAsset:
    """calculate_asset 테스트"""

    def test_near_full_range(self):
        result = calculate_asset(NEG_443600, "443600", "1000000", str(ZERO_SQRT_RATIO))
        assert result == (1000000, 1000000)

    def test_accepts_ints(self):
        assert calculate_asset(NEG_443600, 443600, 1000000, ZERO_SQRT_RATIO) == (1000000, 1000000)

    @pytest.mark.parametrize("tick_lower, tick_upper", [
        (NEG_443636, "443636"),
        (NEG_443600, "443600"),
        (i64_to_bits(-600), "600"),
        (NEG_443636, i64_to_bits(-443635)),
        ("443635", "443636"),
    ])
    @pytest.mark.parametrize("sqrt_price", [MIN_SQRT_RATIO, ZERO_SQRT_RATIO, MAX_SQRT_RATIO - 1, MAX_SQRT_RATIO])
    def test_zero_liquidity(self, tick_lower, tick_upper, sqrt_price):
        """유동성 0 이면 범위와 가격 위치에 관계없이 (0, 0)"""
        assert calculate_asset(tick_lower, tick_upper, "0", str(sqrt_price)) == (0, 0)

    def test_matches_amounts_for_liquidity_vectors(self):
        result = calculate_asset(i64_to_bits(-600), "600", "1000000000000000", str(ZERO_SQRT_RATIO))
        assert result == (29553010879138, 29553010879138)

    def test_invalid_tick(self):
        with pytest.raises(ClammMathError) as exc:
            calculate_asset("443637", "443600", "1", str(ZERO_SQRT_RATIO))
        assert exc.value.kind is ErrorKind.MAX_TICK

    @pytest.mark.parametrize("liquidity", ["-1", "1.5", "abc"])
    def test_invalid_liquidity(self, liquidity):
        with pytest.raises(ClammMathError) as exc:
            calculate_asset(NEG_443600, "443600", liquidity, str(ZERO_SQRT_RATIO))
        assert exc.value.kind is ErrorKind.INPUT_OUT_OF_RANGE


class TestCalculateTokens:
    """calculate_tokens 테스트"""

    def test_price_range(self):
        price_range = calculate_tokens(NEG_443600, "443600")
        assert isinstance(price_range, PriceRange)
        assert price_range.min == pytest.approx(5.44076519695288e-20, rel=1e-12)
        assert price_range.max == pytest.approx(1.8379767623776203e19, rel=1e-12)

    def test_reversed_is_reciprocal(self):
        forward = calculate_tokens(i64_to_bits(-1200), "3000")
        reverse = calculate_tokens(i64_to_bits(-1200), "3000", is_reversed=True)
        assert reverse.min == pytest.approx(1 / forward.max, rel=1e-12)
        assert reverse.max == pytest.approx(1 / forward.min, rel=1e-12)
        assert reverse.min < reverse.max

    def test_symmetric_range_reversed(self):
        forward = calculate_tokens(NEG_443600, "443600")
        reverse = calculate_tokens(NEG_443600, "443600", is_reversed=True)
        assert reverse.min == pytest.approx(forward.min, rel=1e-6)
        assert reverse.max == pytest.approx(forward.max, rel=1e-6)


class TestIsFullRange:
    """is_full_range 테스트"""

    def test_spacing_one(self):
        assert is_full_range(NEG_443636, "443636", 1) is True
        assert is_full_range(NEG_443635, "443636", 1) is False
        assert is_full_range(NEG_443636, "443635", 1) is False

    def test_spacing_four(self):
        assert is_full_range(NEG_443636, "443636", 4) is True
        assert is_full_range(NEG_443632, "443636", 4) is False
        assert is_full_range(NEG_443636, "443632", 4) is False

    def test_spacing_twenty_floor_aligned(self):
        assert is_full_range(NEG_443640, "443620", 20) is True
        assert is_full_range(i64_to_bits(-443620), "443620", 20) is False
        assert is_full_range(NEG_443640, "443600", 20) is False

    @pytest.mark.parametrize("spacing", [0, -1])
    def test_non_positive_spacing(self, spacing):
        with pytest.raises(ClammMathError) as exc:
            is_full_range(NEG_443636, "443636", spacing)
        assert exc.value.kind is ErrorKind.NON_POSITIVE_TICK_SPACING


class TestIsInRange:
    """is_in_range 테스트"""

    lower = i64_to_bits(-600)
    upper = "600"

    def test_inside(self):
        assert is_in_range(self.lower, self.upper, str(ZERO_SQRT_RATIO)) is True

    def test_bounds(self):
        """하한 포함, 상한 제외"""
        assert is_in_range(self.lower, self.upper, get_sqrt_ratio_at_tick(-600)) is True
        assert is_in_range(self.lower, self.upper, get_sqrt_ratio_at_tick(600)) is False

    def test_outside(self):
        assert is_in_range(self.lower, self.upper, get_sqrt_ratio_at_tick(-1000)) is False
        assert is_in_range(self.lower, self.upper, get_sqrt_ratio_at_tick(1000)) is False


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
