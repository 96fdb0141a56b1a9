"""
Math layer for CLAMM Calculator

온체인 수준 정밀도의 수학 함수들:
- fixed_point: Q64.64 고정소수점 타입과 연산
- log_exp_math: 고정소수점 log2
- tick_math: Tick ↔ SqrtPrice 변환
- sqrt_price_math: sqrtPrice 이동 / 토큰 변화량 계산
- liquidity_math: 유동성 계산
- convert: I64 bits 디코딩, 표시용 가격
- calc: 포지션 수량 / 가격 범위 계산
"""

from .fixed_point import FixedPoint64
from .log_exp_math import log2
from .tick_math import (
    get_sqrt_ratio_at_tick,
    get_tick_at_sqrt_ratio,
    tick_spacing_to_max_liquidity_per_tick,
    min_usable_tick,
    max_usable_tick,
)
from .sqrt_price_math import (
    get_next_sqrt_price_from_amount0_rounding_up,
    get_next_sqrt_price_from_amount1_rounding_down,
    get_next_sqrt_price_from_input,
    get_next_sqrt_price_from_output,
    get_amount0_delta_rounded,
    get_amount1_delta_rounded,
    get_amount0_delta,
    get_amount1_delta,
)
from .liquidity_math import (
    liquidity_for_amount0,
    liquidity_for_amount1,
    liquidity_for_amounts,
    amount0_for_liquidity,
    amount1_for_liquidity,
    amounts_for_liquidity,
    quote_at_tick,
    get_add_liquidity_amounts_from_amount,
)
from .util import mul_div_roundup, order_sqrt_ratios
from .convert import DisplayPrice, i64_from_bits, i64_to_bits, parse_uint, sqrt_price_to_price
from .calc import PriceRange, calculate_asset, calculate_tokens, is_full_range, is_in_range
