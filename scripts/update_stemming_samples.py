#!/usr/bin/env python
"""
Regenerate the stemming samples file.

Each line of the samples file is `word,stem`. The stem column is rewritten
with the current output of the stemmer, so that a behaviour change shows up
as a diff of the file.

Usage:
    python scripts/update_stemming_samples.py
    python scripts/update_stemming_samples.py path/to/samples.csv
"""

import argparse
import csv
import sys
from pathlib import Path

# Ensure we use local package
sys.path.insert(0, str(Path(__file__).parent.parent))

from govde.stemmer import TurkishStemmer

DEFAULT_SAMPLES_PATH = Path(__file__).parent.parent / "tests" / "data" / "stemming_samples.csv"


def update_samples(path: Path, stemmer: TurkishStemmer) -> int:
    """Rewrite the samples file in place; return the number of changed stems."""
    with path.open("r", encoding="utf-8", newline="") as f:
        rows = [row for row in csv.reader(f) if row]

    changed = 0
    updated = []
    for row in rows:
        word = row[0]
        stem = stemmer.stem(word)
        if len(row) < 2 or row[1] != stem:
            changed += 1
            print(f"  {word}: {row[1] if len(row) > 1 else '-'} -> {stem}")
        updated.append([word, stem])

    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerows(updated)

    return changed


def main():
    parser = argparse.ArgumentParser(description="Regenerate stemming samples")
    parser.add_argument("samples", nargs="?", default=str(DEFAULT_SAMPLES_PATH),
                        help="Samples file (default: tests/data/stemming_samples.csv)")
    args = parser.parse_args()

    path = Path(args.samples)
    if not path.exists():
        print(f"Error: samples file not found: {path}", file=sys.stderr)
        return 1

    changed = update_samples(path, TurkishStemmer())
    print(f"Updated {path} ({changed} changed)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
