#!/usr/bin/env python3
"""
wide2normal_ascii.py
Wide alphanumerics (Ａ１！) -> ASCII (A1!).
Usage:
  python wide2normal_ascii.py < zenkaku.txt
"""
import sys

from kana import wide2ascii
from line_filter import filter_main


def main(argv=None) -> int:
    return filter_main("Convert wide alphanumerics into ASCII", wide2ascii, argv)


if __name__ == "__main__":
    sys.exit(main())
