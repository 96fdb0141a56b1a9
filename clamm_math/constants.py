"""
CLAMM 상수 정의

온체인(Move VM) 수준 정밀도를 위한 상수들:
- Q64: sqrt price 인코딩에 사용 (2^64, Q64.64)
- MAX_TICK: 틱 범위 (±443636)
- MIN/MAX_SQRT_RATIO: 유효한 sqrt price 범위
- MAX_LIQUIDITY: 틱 간격별 최대 유동성 계산에 사용
"""

# Fixed-point 인코딩 상수
Q64: int = 2 ** 64
Q128: int = 2 ** 128

# 정수 범위
MAX_U64: int = 2 ** 64 - 1
MAX_U128: int = 2 ** 128 - 1
MAX_U256: int = 2 ** 256 - 1

# 틱 범위 상수 (최소 틱 = -MAX_TICK)
MAX_TICK: int = 443636

# sqrt price 범위 (Q64.64)
# MIN_SQRT_RATIO = get_sqrt_ratio_at_tick(-MAX_TICK)
# MAX_SQRT_RATIO = get_sqrt_ratio_at_tick(MAX_TICK)
MIN_SQRT_RATIO: int = 4295048017
MAX_SQRT_RATIO: int = 79226673515401279992447579062

# 가격 1.0 의 sqrt price (= 2^64)
ZERO_SQRT_RATIO: int = 18446744073709551616

# 1 / log2(sqrt(1.0001)) (Q64.64)
INV_LOG2_SQRT10001: int = 255738958999603826347141

MAX_LIQUIDITY: int = 40924101727524640255659
