"""
CLAMM 수학 오류 정의

Move 모듈의 abort 코드에 대응하는 오류 종류.
모든 오류는 결정적이며 재시도 대상이 아닙니다.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """오류 종류 (Move abort 코드 대응)"""
    OVERFLOW = "OVERFLOW"
    UNDERFLOW = "UNDERFLOW"
    INPUT_OUT_OF_RANGE = "INPUT_OUT_OF_RANGE"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    ZERO_LIQUIDITY = "ZERO_LIQUIDITY"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    MAX_TICK = "MAX_TICK"
    INVALID_SQRT_PRICE = "INVALID_SQRT_PRICE"
    NO_SAFE_TICK_FOUND = "NO_SAFE_TICK_FOUND"
    GTE_MAX_TICK = "GTE_MAX_TICK"
    NON_POSITIVE_TICK_SPACING = "NON_POSITIVE_TICK_SPACING"
    GT_MAX_TICK = "GT_MAX_TICK"
    LOG_2_ZERO_UNBOUNDED = "LOG_2_ZERO_UNBOUNDED"


class ClammMathError(ValueError):
    """CLAMM 수학 연산 오류

    사용법:
        try:
            get_sqrt_ratio_at_tick(tick)
        except ClammMathError as e:
            if e.kind is ErrorKind.MAX_TICK:
                ...
    """

    def __init__(self, kind: ErrorKind, detail: Optional[str] = None):
        self.kind = kind
        self.detail = detail
        message = kind.value if detail is None else f"{kind.value}: {detail}"
        super().__init__(message)
