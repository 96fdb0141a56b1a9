"""
Data layer for CLAMM Calculator

인덱서 / lens 응답 데이터 타입 정의
"""

from .types import ClammIncentive, ClammPosition, ClammPoolInfo, flatten_clamm_positions
