#!/usr/bin/env python3
"""Score Pair CLI - Debug utility to trace longest common substring scoring for two values.

Usage:
    python scripts/score_pair.py "Jonathan Smith" "Jon Smithe"
    python scripts/score_pair.py "ab12cd" "xy12zw" --min-length 3
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Optional

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from lcs_linkage.similarity.lcs import (  # noqa: E402
    LongestCommonSubstring,
    directional_score,
)
from lcs_linkage.utils.io_utils import load_settings  # noqa: E402
from lcs_linkage.utils.logging_utils import setup_logging  # noqa: E402


def trace_direction(a: str, b: str, min_length: int, label: str) -> float:
    """Print every extraction of one directional pass and return its score."""
    print(f"\n{label}: '{a}' against '{b}'")
    shortlen = min(len(a), len(b))

    def on_extract(substring: str, removed: int) -> None:
        print(f"   extracted '{substring}' (length {len(substring)}), removed so far: {removed}")

    score = directional_score(a, b, min_length, on_extract=on_extract)
    print(f"   shortlen: {shortlen}")
    print(f"   directional score: {score:.4f}")
    return score


def trace_scoring(
    value_a: str,
    value_b: str,
    comparator: LongestCommonSubstring,
) -> float:
    """Trace the complete scoring process for two values."""
    min_length = comparator.get_minimum_length()

    print("=" * 80)
    print("LONGEST COMMON SUBSTRING TRACE")
    print("=" * 80)

    print("\n1. INPUT VALUES:")
    print(f"   Value A: '{value_a}' (length {len(value_a)})")
    print(f"   Value B: '{value_b}' (length {len(value_b)})")
    print(f"   Minimum length: {min_length}")

    print("\n2. QUICK CUTOFFS:")
    if value_a == value_b:
        print("   Identical values -> 1.0")
    elif min(len(value_a), len(value_b)) == 0:
        print("   Empty value -> 0.0")
    else:
        print("   None applied")
        print("\n3. DIRECTIONAL PASSES:")
        forward = trace_direction(value_a, value_b, min_length, "A -> B")
        backward = trace_direction(value_b, value_a, min_length, "B -> A")
        print(f"\n   Mean: ({forward:.4f} + {backward:.4f}) / 2")

    score = comparator.compare(value_a, value_b)
    print("=" * 80)
    return score


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Trace longest common substring scoring for two values",
    )
    parser.add_argument("value_a", help="First value")
    parser.add_argument("value_b", help="Second value")
    parser.add_argument(
        "--min-length", type=int, default=None,
        help="Minimum substring length (overrides config)",
    )
    parser.add_argument(
        "--config", default=None, help="Path to config file",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    settings: dict[str, Any] = load_settings(args.config)
    setup_logging("DEBUG" if args.verbose else settings["logging"]["level"])

    try:
        comparator = LongestCommonSubstring.from_settings(settings)
        if args.min_length is not None:
            comparator = comparator.with_minimum_length(args.min_length)
    except (TypeError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    score = trace_scoring(args.value_a, args.value_b, comparator)
    print(f"\nFINAL RESULT: {score:.4f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
