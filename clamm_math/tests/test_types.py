"""
데이터 타입 테스트

인덱서 응답 → dataclass 변환을 테스트합니다.
"""

import pytest

from ..data.types import ClammIncentive, ClammPoolInfo, ClammPosition, flatten_clamm_positions


def _item(token_address="0x1", **overrides):
    item = {
        "token_address": token_address,
        "lp_metadata": "0xpool",
        "tick_lower": "18446744073709108016",
        "tick_upper": 443600,
        "liquidity": 1000000,
    }
    item.update(overrides)
    return item


class TestFromDict:
    """from_dict 테스트"""

    def test_position_keeps_decimal_strings(self):
        position = ClammPosition.from_dict(_item())
        assert position.tick_lower == "18446744073709108016"
        assert position.tick_upper == "443600"
        assert position.liquidity == "1000000"
        assert position.incentives == []

    def test_position_with_incentives(self):
        position = ClammPosition.from_dict(_item(incentives=[
            {"incentive_address": "0xinc", "reward_metadata": "0xreward"}
        ]))
        assert position.incentives == [ClammIncentive("0xinc", "0xreward")]

    def test_pool_info(self):
        pool = ClammPoolInfo.from_dict({"sqrt_price": 18446744073709551616, "tick_spacing": "20"})
        assert pool.sqrt_price == "18446744073709551616"
        assert pool.tick_spacing == 20

    def test_missing_field(self):
        with pytest.raises(KeyError):
            ClammPosition.from_dict({"token_address": "0x1"})


class TestFlattenPositions:
    """flatten_clamm_positions 테스트"""

    def test_empty(self):
        assert flatten_clamm_positions([]) == []

    def test_flat_list(self):
        positions = flatten_clamm_positions([_item("0x1"), _item("0x2")])
        assert [p.token_address for p in positions] == ["0x1", "0x2"]

    def test_nested_list(self):
        positions = flatten_clamm_positions([[_item("0x1")], [_item("0x2"), _item("0x3")]])
        assert [p.token_address for p in positions] == ["0x1", "0x2", "0x3"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
