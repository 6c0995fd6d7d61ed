#!/usr/bin/env python3
"""Print inferred forms for a handful of sample words.

Usage:
  python scripts/show_forms.py [word[:pos] ...]

Without arguments a built-in sample list is used.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from services.morphology import infer_forms  # noqa: E402


SAMPLES = [
    ("running", "verb"),
    ("stopped", "verb"),
    ("make", "verb"),
    ("go", "verb"),
    ("cry", "verb"),
    ("boxes", "noun"),
    ("knives", "noun"),
    ("city", "noun"),
    ("leaf", "noun"),
    ("faster", "adjective"),
    ("biggest", "adjective"),
    ("quickly", "adverb"),
]


def main() -> None:
    if len(sys.argv) > 1:
        samples = [tuple(arg.split(":", 1)) if ":" in arg else (arg, None) for arg in sys.argv[1:]]
    else:
        samples = SAMPLES

    print("=" * 60)
    print("WORD FORMS")
    print("=" * 60)
    for word, pos in samples:
        result = infer_forms(word.lower(), part_of_speech=pos)
        print(f"\n{word} ({result.part_of_speech}):")
        for label, value in result.forms.items():
            print(f"  {label}: {value}")


if __name__ == "__main__":
    main()
