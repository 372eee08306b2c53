#!/usr/bin/env python3
"""Run every calculator with its reference example.

Prints the input and the JSON result of each calculator:
1. Turn performance: 250 kts TAS, 25° bank, 90° turn
2. VNAV: FL350 to 10000 ft, 100 nm away, 450 kts GS, -1500 fpm
3. Wind: track 90°, heading 85°, wind from 270° at 15 kts

Exits with status 1 if any calculator fails.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from flightcalc.cli.commands import CALCULATORS


def main() -> int:
    print("=" * 40)
    print("FlightCalc Calculator Demo")
    print("=" * 40)
    print()

    failures = 0
    for index, (name, calculator) in enumerate(CALCULATORS.items(), start=1):
        print(f"{index}. {calculator.description}")
        print(f"   Input: {' '.join(calculator.example)}")
        if calculator.example_note:
            print(f"   ({calculator.example_note})")
        sys.stdout.flush()

        if calculator.run(list(calculator.example), prog=name) != 0:
            failures += 1
        print()

    print("=" * 40)
    print("All calculators ran." if failures == 0 else f"{failures} calculator(s) failed.")
    print("=" * 40)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
