"""
Shared plumbing for the line filters: argument parsing, input selection,
line-by-line conversion and exit codes.

Env:
  KANA_ENCODING   default for --encoding   (utf-8)
  KANA_ERRORS     default for --errors     (strict)
  KANA_LOG_LEVEL  default for --log-level  (WARNING)
"""
import argparse
import codecs
import logging
import os
import sys
from typing import Callable, TextIO

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
ERROR_POLICIES = ["strict", "replace", "ignore", "surrogateescape"]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

EXIT_OK = 0
EXIT_IO_ERROR = 1


def encoding_name(value: str) -> str:
    try:
        return codecs.lookup(value).name
    except LookupError:
        raise argparse.ArgumentTypeError(f"unknown encoding: {value}")


def add_io_arguments(ap: argparse.ArgumentParser) -> argparse.ArgumentParser:
    ap.add_argument("input", nargs="?", default="-",
                    help="Input text file ('-' or omitted: standard input)")
    ap.add_argument("--encoding", type=encoding_name, default=os.getenv("KANA_ENCODING", "utf-8"),
                    help="Text encoding of input and output (default: utf-8)")
    ap.add_argument("--errors", default=os.getenv("KANA_ERRORS", "strict"), choices=ERROR_POLICIES,
                    help="What to do with malformed bytes in the input (default: strict)")
    ap.add_argument("--log-level", type=str.upper, default=os.getenv("KANA_LOG_LEVEL", "WARNING"),
                    choices=LOG_LEVELS, help="Diagnostics level on stderr")
    return ap


def parse_io_args(ap: argparse.ArgumentParser, argv=None) -> argparse.Namespace:
    """parse_args, plus the choice checks argparse skips for KANA_* defaults."""
    args = ap.parse_args(argv)
    if args.errors not in ERROR_POLICIES:
        ap.error(f"invalid --errors (KANA_ERRORS): {args.errors!r} (choose from {', '.join(ERROR_POLICIES)})")
    if args.log_level not in LOG_LEVELS:
        ap.error(f"invalid --log-level (KANA_LOG_LEVEL): {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")
    return args


def setup_logging(level: str = "WARNING") -> None:
    """Send diagnostics to stderr; stdout carries the converted text."""
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT, stream=sys.stderr)


def _reconfigure(stream: TextIO, encoding: str, errors: str) -> None:
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(encoding=encoding, errors=errors)


def convert_stream(src: TextIO, dst: TextIO, convert: Callable[[str], str]) -> int:
    """Write convert(line) for every line of src; returns the number of lines."""
    n = 0
    for line in src:
        dst.write(convert(line))
        n += 1
    return n


def run_filter(args: argparse.Namespace, convert: Callable[[str], str]) -> int:
    """Run `convert` over the selected input. Returns the process exit status."""
    # surrogateescape round-trips undecodable bytes; every other policy writes strictly
    out_errors = "surrogateescape" if args.errors == "surrogateescape" else "strict"
    _reconfigure(sys.stdout, args.encoding, out_errors)
    try:
        if args.input == "-":
            _reconfigure(sys.stdin, args.encoding, args.errors)
            logger.debug("Reading standard input")
            n = convert_stream(sys.stdin, sys.stdout, convert)
        else:
            logger.debug(f"Reading {args.input} ({args.encoding}, errors={args.errors})")
            with open(args.input, "r", encoding=args.encoding, errors=args.errors, newline="") as f:
                n = convert_stream(f, sys.stdout, convert)
    except UnicodeDecodeError as e:
        logger.error(f"ERROR: malformed input in {args.input}: {e}")
        return EXIT_IO_ERROR
    except UnicodeEncodeError as e:
        logger.error(f"ERROR: output not representable in {args.encoding}: {e}")
        return EXIT_IO_ERROR
    except OSError as e:
        logger.error(f"ERROR: I/O failure on {args.input}: {e}")
        return EXIT_IO_ERROR
    finally:
        sys.stdout.flush()

    logger.info(f"Converted {n} lines from {args.input}")
    return EXIT_OK


def filter_main(description: str, convert: Callable[[str], str], argv=None) -> int:
    """Entry point shared by the single-purpose filters."""
    ap = add_io_arguments(argparse.ArgumentParser(description=description))
    args = parse_io_args(ap, argv)
    setup_logging(args.log_level)
    return run_filter(args, convert)
