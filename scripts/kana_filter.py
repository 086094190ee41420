#!/usr/bin/env python3
"""
kana_filter.py

Line filter exposing every kana converter as a flag.
Selected converters run on each line in a fixed order (see --list);
with no flag the text is copied unchanged.

Usage:
  python kana_filter.py --half2kana --wide2ascii < input.txt > output.txt
  python kana_filter.py --combine --vsmark2combi notes.txt
"""
import argparse
import logging
import sys

import kana
from line_filter import EXIT_OK, add_io_arguments, parse_io_args, run_filter, setup_logging

HELP = {
    "half2full": "Half-width-kana -> Katakana, marks kept separate  [ｱﾞﾊﾟ -> ア゙パ]",
    "half2kana": "Half-width-kana -> Katakana, marks combined  [ｱﾞﾊﾟ -> アﾞパ]",
    "combine": "Combine base characters and voiced-sound-marks  [かﾞハ゜ -> がパ]",
    "vsmark2half": "Voiced-sound-marks -> half-width style  [゛ -> ﾞ]",
    "vsmark2full": "Voiced-sound-marks -> full-width style  [ﾞ -> ゛]",
    "vsmark2combi": "Voiced-sound-marks -> space+combining style",
    "hira2kata": "Hiragana -> Katakana  [あ -> ア]",
    "kata2hira": "Katakana -> Hiragana  [ア -> あ]",
    "wide2ascii": "Wide-alphanumeric -> ASCII  [Ａ -> A]",
    "ascii2wide": "ASCII -> Wide-alphanumeric  [A -> Ａ]",
    "nowidespace": "Wide-space -> space",
    "space2wide": "Space -> Wide-space",
    "nowideyen": "Wide-yen -> Half-width-yen  [￥ -> ¥]",
    "yen2wide": "Half-width-yen -> Wide-yen  [¥ -> ￥]",
}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Convert troublesome characters in Japanese text, line by line")
    group = ap.add_argument_group("converters (applied in the order listed)")
    for name in kana.CONVERTERS:
        group.add_argument(f"--{name}", dest=name, action="store_true", help=HELP[name])
    ap.add_argument("--list", action="store_true", help="Print the converter names in application order and exit")
    return add_io_arguments(ap)


def selected_converters(args: argparse.Namespace):
    return [name for name in kana.CONVERTERS if getattr(args, name)]


def main(argv=None) -> int:
    ap = build_parser()
    args = parse_io_args(ap, argv)
    setup_logging(args.log_level)

    if args.list:
        for name in kana.CONVERTERS:
            print(name)
        return EXIT_OK

    names = selected_converters(args)
    logging.info(f"Converters: {', '.join(names) or '(none)'}")
    return run_filter(args, lambda line: kana.apply_all(names, line))


if __name__ == "__main__":
    sys.exit(main())
