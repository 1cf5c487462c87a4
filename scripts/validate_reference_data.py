"""Validate packaged reference-data consistency.

Checks:
1. Climate bucket tables are contiguous with no gaps or overlaps.
2. Every candidate named by a matcher rule table exists in its registry.
3. Flavor and tea-type hints resolve to registered candidates.
4. Harvest months, simplified seasons and the wrap rule reference known seasons.
5. Brewing tables cover the same tea types and each ends with one default rule.
"""

from __future__ import annotations

import sys

from tea_lens.exceptions import ReferenceDataError
from tea_lens.reference import load_reference_data
from tea_lens.validation import find_problems


def fail(message: str) -> None:
    print(f"[reference-check] ERROR: {message}")
    raise SystemExit(1)


def main() -> int:
    try:
        reference = load_reference_data()
    except ReferenceDataError as e:
        fail(str(e))

    problems = find_problems(reference)
    for problem in problems[:-1]:
        print(f"[reference-check] ERROR: {problem}")
    if problems:
        fail(problems[-1])

    print("[reference-check] OK")
    return 0


if __name__ == "__main__":
    sys.exit(main())
