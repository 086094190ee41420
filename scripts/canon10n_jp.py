#!/usr/bin/env python3
"""
canon10n_jp.py

Canonicalize Japanese text, line by line:
  half-width kana expanded, voiced-sound-marks combined where possible and
  spelled space+combining otherwise, wide alphanumerics and wide spaces
  narrowed.

Usage:
  python canon10n_jp.py input.txt > canonical.txt
"""
import sys

from kana import combine, half2full, nowidespace, vsmark2combi, wide2ascii
from line_filter import filter_main


def canonicalize(line: str) -> str:
    return nowidespace(wide2ascii(vsmark2combi(combine(half2full(line)))))


def main(argv=None) -> int:
    return filter_main("Canonicalize troublesome characters in Japanese text", canonicalize, argv)


if __name__ == "__main__":
    sys.exit(main())
