#!/usr/bin/env python3
"""
nfkc.py
Apply Unicode NFKC normalization to each line (covers most of the kana
converters in one pass, at the price of changing far more than kana).
Usage:
  python nfkc.py < input.txt
"""
import sys
import unicodedata

from line_filter import filter_main


def to_nfkc(line: str) -> str:
    return unicodedata.normalize("NFKC", line)


def main(argv=None) -> int:
    return filter_main("Apply Unicode NFKC normalization", to_nfkc, argv)


if __name__ == "__main__":
    sys.exit(main())
