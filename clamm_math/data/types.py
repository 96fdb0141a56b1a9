"""
CLAMM 데이터 타입 정의

인덱서와 온체인 lens 모듈에서 반환되는 데이터 구조를 Python dataclass로 정의.
틱/유동성/sqrtPrice 는 온체인 정밀도를 위해 원본 10진수 문자열 그대로 보관합니다.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union


@dataclass
class ClammIncentive:
    """포지션에 연결된 인센티브 프로그램"""
    incentive_address: str
    reward_metadata: str

    @classmethod
    def from_dict(cls, data: dict) -> "ClammIncentive":
        return cls(
            incentive_address=data["incentive_address"],
            reward_metadata=data["reward_metadata"],
        )


@dataclass
class ClammPosition:
    """CLAMM 유동성 포지션

    - tick_lower / tick_upper: I64 bits (u64 two's complement, 10진수 문자열)
    - liquidity: 포지션 유동성 (10진수 문자열)
    """
    token_address: str  # 포지션 토큰 주소
    lp_metadata: str  # 풀 LP 메타데이터 주소
    tick_lower: str
    tick_upper: str
    liquidity: str
    incentives: List[ClammIncentive] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "ClammPosition":
        return cls(
            token_address=data["token_address"],
            lp_metadata=data["lp_metadata"],
            tick_lower=str(data["tick_lower"]),
            tick_upper=str(data["tick_upper"]),
            liquidity=str(data["liquidity"]),
            incentives=[ClammIncentive.from_dict(i) for i in data.get("incentives", [])],
        )


@dataclass
class ClammPoolInfo:
    """lens::get_pool_info 결과 중 포지션 계산에 필요한 값"""
    sqrt_price: str  # 현재 sqrtPrice (Q64.64)
    tick_spacing: int

    @classmethod
    def from_dict(cls, data: dict) -> "ClammPoolInfo":
        return cls(
            sqrt_price=str(data["sqrt_price"]),
            tick_spacing=int(data["tick_spacing"]),
        )


def flatten_clamm_positions(
    positions: Union[List[Dict[str, Any]], List[List[Dict[str, Any]]]]
) -> List[ClammPosition]:
    """인덱서 응답의 positions 필드를 ClammPosition 목록으로 변환

    응답은 평평한 목록 또는 목록의 목록일 수 있습니다.
    """
    if not positions:
        return []

    if isinstance(positions[0], list):
        items = [item for group in positions for item in group]
    else:
        items = positions

    return [ClammPosition.from_dict(item) for item in items]
