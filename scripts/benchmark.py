#!/usr/bin/env python3
"""Benchmark script for callmatch performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import ast
import json
import time
from pathlib import Path

_SIGNATURE = "self.assertEqual(first, second, [msg])"
_CANDIDATES = "\n".join(
    [
        "self.assertEqual(a, b)",
        "self.assertEqual(a, b, 'msg')",
        "other.assertEqual(a, b)",
        "self.client.assertEqual(a, b)",
    ]
    * 250
)


def benchmark_import_time() -> float:
    """Measure import time of callmatch package."""
    start = time.perf_counter()
    import callmatch  # noqa: F401

    return time.perf_counter() - start


def benchmark_compile() -> float:
    """Measure signature compilation time."""
    from callmatch import create_matcher

    start = time.perf_counter()
    for _ in range(10000):
        create_matcher(_SIGNATURE)
    return time.perf_counter() - start


def benchmark_test() -> float:
    """Measure Matcher.test over candidate calls."""
    from callmatch import create_matcher

    matcher = create_matcher(_SIGNATURE)
    calls = [node for node in ast.walk(ast.parse(_CANDIDATES)) if isinstance(node, ast.Call)]

    start = time.perf_counter()
    for _ in range(10):
        for call in calls:
            matcher.test(call)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run callmatch benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
        {"name": "Compile (10k signatures)", "unit": "seconds", "value": benchmark_compile()},
        {"name": "Test (10k candidates)", "unit": "seconds", "value": benchmark_test()},
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
