#!/usr/bin/env python3
"""
half2full_kana.py
Half-width kana -> Katakana with voiced-sound-marks combined.
Usage:
  python half2full_kana.py < hankaku.txt
"""
import sys

from kana import half2kana
from line_filter import filter_main


def main(argv=None) -> int:
    return filter_main("Convert half-width kana into Katakana", half2kana, argv)


if __name__ == "__main__":
    sys.exit(main())
