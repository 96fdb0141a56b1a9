#!/usr/bin/env python3
"""
Quote a CLAMM position from the command line

Prints JSON. Big integers are printed as decimal strings.

Usage:
    python scripts/quote_position.py asset --tick-lower 18446744073709108016 \
        --tick-upper 443600 --liquidity 1000000 --sqrt-price 18446744073709551616
    python scripts/quote_position.py tokens --tick-lower 18446744073709108016 --tick-upper 443600 --reversed
    python scripts/quote_position.py full-range --tick-lower 18446744073709107980 --tick-upper 443636 --spacing 1
    python scripts/quote_position.py tick --sqrt-price 18446744073709551616
    python scripts/quote_position.py value --input positions.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from clamm_math.errors import ClammMathError
from clamm_math.data.types import ClammPoolInfo, flatten_clamm_positions
from clamm_math.math.calc import calculate_asset, calculate_tokens, is_full_range
from clamm_math.math.tick_math import get_tick_at_sqrt_ratio
from clamm_math.portfolio import value_positions


def _cmd_asset(args) -> dict:
    amount0, amount1 = calculate_asset(args.tick_lower, args.tick_upper, args.liquidity, args.sqrt_price)
    return {"amount0": str(amount0), "amount1": str(amount1)}


def _cmd_tokens(args) -> dict:
    price_range = calculate_tokens(args.tick_lower, args.tick_upper, args.reversed)
    return {"min": price_range.min, "max": price_range.max}


def _cmd_full_range(args) -> dict:
    return {"is_full_range": is_full_range(args.tick_lower, args.tick_upper, args.spacing)}


def _cmd_tick(args) -> dict:
    return {"tick": get_tick_at_sqrt_ratio(args.sqrt_price)}


def _cmd_value(args) -> dict:
    """Input file: {"positions": [...indexer items...], "pools": {lp_metadata: {...} | null}}"""
    data = json.loads(Path(args.input).read_text())
    positions = flatten_clamm_positions(data.get("positions", []))
    pools = {
        lp_metadata: None if pool is None else ClammPoolInfo.from_dict(pool)
        for lp_metadata, pool in data.get("pools", {}).items()
    }
    return {"results": [v.to_dict() for v in value_positions(positions, pools, args.reversed)]}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bit-exact CLAMM position math")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    sub = parser.add_subparsers(dest="command", required=True)

    asset = sub.add_parser("asset", help="Token amounts of a position")
    asset.add_argument("--tick-lower", required=True, help="Lower tick (I64 bits)")
    asset.add_argument("--tick-upper", required=True, help="Upper tick (I64 bits)")
    asset.add_argument("--liquidity", required=True, help="Position liquidity")
    asset.add_argument("--sqrt-price", required=True, help="Current sqrt price (Q64.64)")
    asset.set_defaults(func=_cmd_asset)

    tokens = sub.add_parser("tokens", help="Display price range of a position")
    tokens.add_argument("--tick-lower", required=True, help="Lower tick (I64 bits)")
    tokens.add_argument("--tick-upper", required=True, help="Upper tick (I64 bits)")
    tokens.add_argument("--reversed", action="store_true", help="Quote token0 per token1")
    tokens.set_defaults(func=_cmd_tokens)

    full_range = sub.add_parser("full-range", help="Full-range check")
    full_range.add_argument("--tick-lower", required=True, help="Lower tick (I64 bits)")
    full_range.add_argument("--tick-upper", required=True, help="Upper tick (I64 bits)")
    full_range.add_argument("--spacing", type=int, required=True, help="Pool tick spacing")
    full_range.set_defaults(func=_cmd_full_range)

    tick = sub.add_parser("tick", help="Tick at a sqrt price")
    tick.add_argument("--sqrt-price", type=int, required=True, help="Sqrt price (Q64.64)")
    tick.set_defaults(func=_cmd_tick)

    value = sub.add_parser("value", help="Value positions from a JSON file")
    value.add_argument("--input", type=Path, required=True, help="JSON file with positions and pools")
    value.add_argument("--reversed", action="store_true", help="Quote token0 per token1")
    value.set_defaults(func=_cmd_value)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    try:
        result = args.func(args)
    except ClammMathError as e:
        print(json.dumps({"error": e.kind.value, "message": str(e)}), file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
