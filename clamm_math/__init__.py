"""
CLAMM Fixed-Point Math

온체인(Move VM) 수준 정밀도로 집중화된 유동성 포지션을 계산하는 라이브러리.
Q64.64 고정소수점, 틱 ↔ sqrtPrice 변환, 유동성 ↔ 토큰 수량 변환을
온체인과 비트 단위로 동일하게 구현.
"""

__version__ = "0.1.0"

from .constants import Q64, MAX_TICK, MIN_SQRT_RATIO, MAX_SQRT_RATIO, ZERO_SQRT_RATIO
from .errors import ClammMathError, ErrorKind
