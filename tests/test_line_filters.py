"""
Test suite for the line filters (kana_filter, canon10n_jp, half2full_kana,
wide2normal_ascii, nfkc) and their shared plumbing in line_filter.

Test framework: pytest
- Standard input is replaced with io.StringIO via monkeypatch.
- Output is read back with capsys; input files are written under tmp_path.

These tests exercise:
- Flag selection and fixed application order
- File vs. standard input, line endings preserved
- Exit codes and diagnostics for missing files and malformed bytes
- Environment-variable defaults for the I/O options
"""
# ruff: noqa: S101

import argparse
import io
import logging
import sys

import pytest

import canon10n_jp
import half2full_kana
import kana
import kana_filter
import line_filter
import nfkc
import wide2normal_ascii

SV_COMBI = "\u309A"
V_HALF, SV_HALF = "\uFF9E", "\uFF9F"
V_FULL, SV_FULL = "\u309B", "\u309C"


@pytest.fixture
def stdin(monkeypatch):
    """Feed text to the filter under test as standard input."""
    def feed(text: str):
        monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    return feed


# ---------- Tests: kana_filter ----------


class TestKanaFilter:
    def test_selected_converters_applied(self, stdin, capsys):
        stdin("ｶ" + V_HALF + "ｷ" + V_HALF + "１２３\nﾊ" + SV_HALF + "\n")
        rc = kana_filter.main(["--half2kana", "--wide2ascii"])
        assert rc == 0
        assert capsys.readouterr().out == "ガギ123\nパ\n"

    def test_no_flag_copies_input(self, stdin, capsys):
        text = "ｶ" + V_HALF + "　ＡＢＣ\n2nd line\n"
        stdin(text)
        assert kana_filter.main([]) == 0
        assert capsys.readouterr().out == text

    def test_order_is_fixed_regardless_of_flag_order(self, stdin, capsys):
        # combine must see the expanded kana, so half2full runs first
        stdin("ﾊ" + V_HALF + "\n")
        assert kana_filter.main(["--combine", "--half2full"]) == 0
        assert capsys.readouterr().out == "バ\n"

    def test_list_prints_registry_order(self, capsys):
        assert kana_filter.main(["--list"]) == 0
        assert capsys.readouterr().out.split() == list(kana.CONVERTERS)

    def test_every_converter_has_a_flag(self):
        args = kana_filter.build_parser().parse_args([f"--{name}" for name in kana.CONVERTERS])
        assert kana_filter.selected_converters(args) == list(kana.CONVERTERS)

    def test_reads_named_file(self, tmp_path, capsys):
        src = tmp_path / "in.txt"
        src.write_text("ひ" + SV_FULL + "ひ" + V_FULL + "んは" + V_FULL + "\r\nか" + V_FULL + "な\r\n", encoding="utf-8")
        assert kana_filter.main(["--combine", str(src)]) == 0
        # CRLF survives untouched
        assert capsys.readouterr().out == "ぴびんば\r\nがな\r\n"

    def test_dash_means_stdin(self, stdin, capsys):
        stdin("かな\n")
        assert kana_filter.main(["--hira2kata", "-"]) == 0
        assert capsys.readouterr().out == "カナ\n"

    def test_space_and_yen_flags(self, stdin, capsys):
        stdin("￥100　税込\n")
        assert kana_filter.main(["--nowideyen", "--nowidespace"]) == 0
        assert capsys.readouterr().out == "¥100 税込\n"


# ---------- Tests: error handling ----------


class TestErrors:
    def test_missing_file_exits_nonzero(self, tmp_path, capsys, caplog):
        missing = tmp_path / "nope.txt"
        with caplog.at_level(logging.ERROR):
            rc = kana_filter.main(["--combine", str(missing)])
        assert rc == line_filter.EXIT_IO_ERROR
        assert capsys.readouterr().out == ""
        assert any("nope.txt" in r.getMessage() for r in caplog.records)

    def test_malformed_bytes_fatal_by_default(self, tmp_path, caplog):
        src = tmp_path / "bad.txt"
        src.write_bytes(b"ok\n\xff\xfe broken\n")
        with caplog.at_level(logging.ERROR):
            rc = wide2normal_ascii.main([str(src)])
        assert rc == 1
        assert any("malformed" in r.getMessage() for r in caplog.records)

    def test_malformed_bytes_replaced_on_request(self, tmp_path, capsys):
        src = tmp_path / "bad.txt"
        src.write_bytes("ＡＢ\n".encode("utf-8") + b"\xff\n")
        assert wide2normal_ascii.main(["--errors", "replace", str(src)]) == 0
        assert capsys.readouterr().out == "AB\n\ufffd\n"

    def test_surrogateescape_round_trips_bad_bytes(self, tmp_path, capsysbinary):
        src = tmp_path / "bad.txt"
        src.write_bytes("ＡＢ\n".encode("utf-8") + b"\xff\n")
        assert wide2normal_ascii.main(["--errors", "surrogateescape", str(src)]) == 0
        assert capsysbinary.readouterr().out == b"AB\n\xff\n"

    def test_unknown_encoding_is_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            kana_filter.main(["--encoding", "no-such-codec"])
        assert exc.value.code == 2

    def test_input_encoding_option(self, tmp_path):
        src = tmp_path / "sjis.txt"
        src.write_bytes(("ｶ" + V_HALF + "ﾅ\n").encode("shift_jis"))
        args = line_filter.add_io_arguments(argparse.ArgumentParser()).parse_args(
            ["--encoding", "shift_jis", str(src)])
        out = io.StringIO()
        with open(args.input, encoding=args.encoding, errors=args.errors) as f:
            line_filter.convert_stream(f, out, kana.half2kana)
        assert out.getvalue() == "ガナ\n"


# ---------- Tests: configuration ----------


def test_env_defaults(monkeypatch):
    monkeypatch.setenv("KANA_ENCODING", "euc_jp")
    monkeypatch.setenv("KANA_ERRORS", "replace")
    monkeypatch.setenv("KANA_LOG_LEVEL", "DEBUG")
    args = kana_filter.build_parser().parse_args([])
    assert args.encoding == "euc_jp"
    assert args.errors == "replace"
    assert args.log_level == "DEBUG"
    assert args.input == "-"


def test_env_log_level_is_case_insensitive(monkeypatch, stdin, capsys):
    monkeypatch.setenv("KANA_LOG_LEVEL", "debug")
    assert kana_filter.build_parser().parse_args([]).log_level == "DEBUG"
    stdin("かな\n")
    assert kana_filter.main(["--hira2kata"]) == 0
    assert capsys.readouterr().out == "カナ\n"


@pytest.mark.parametrize("var, value", [
    ("KANA_ERRORS", "bogus"),
    ("KANA_LOG_LEVEL", "verbose"),
])
def test_bad_env_value_is_usage_error(monkeypatch, stdin, capsys, var, value):
    monkeypatch.setenv(var, value)
    stdin("かな\n")
    with pytest.raises(SystemExit) as exc:
        kana_filter.main([])
    assert exc.value.code == 2
    assert var in capsys.readouterr().err


def test_bad_env_value_rejected_by_single_filters(monkeypatch, tmp_path):
    src = tmp_path / "in.txt"
    src.write_text("ＡＢ\n", encoding="utf-8")
    monkeypatch.setenv("KANA_ERRORS", "bogus")
    with pytest.raises(SystemExit) as exc:
        wide2normal_ascii.main([str(src)])
    assert exc.value.code == 2


def test_convert_stream_counts_lines():
    out = io.StringIO()
    n = line_filter.convert_stream(io.StringIO("a\nb\nc"), out, str.upper)
    assert n == 3
    assert out.getvalue() == "A\nB\nC"


# ---------- Tests: single-purpose filters ----------


def test_canonicalize_line():
    line = "ﾊ" + V_HALF + "ｶ　ｱ" + SV_HALF + " ＡＢＣ\n"
    assert canon10n_jp.canonicalize(line) == "バカ ア " + SV_COMBI + " ABC\n"


def test_canon10n_jp_main(stdin, capsys):
    stdin("ひ" + SV_FULL + "よこ　ＰＹ\n")
    assert canon10n_jp.main([]) == 0
    assert capsys.readouterr().out == "ぴよこ PY\n"


def test_half2full_kana_main(stdin, capsys):
    stdin("ﾏﾂｵ ﾊ" + V_HALF + "ｼｮｳ ｱ" + SV_HALF + "\n")
    assert half2full_kana.main([]) == 0
    assert capsys.readouterr().out == "マツオ バショウ ア " + SV_COMBI + "\n"


def test_wide2normal_ascii_main(stdin, capsys):
    stdin("＃＆Ｒｕｓｔ－１．６！\n")
    assert wide2normal_ascii.main([]) == 0
    assert capsys.readouterr().out == "#&Rust-1.6!\n"


def test_nfkc():
    assert nfkc.to_nfkc("ｶ" + V_HALF) == "ガ"
    assert nfkc.to_nfkc("ＡＢＣ①") == "ABC1"


def test_nfkc_main(stdin, capsys):
    stdin("ﾊ" + SV_HALF + "ｿｺﾝ\n")
    assert nfkc.main([]) == 0
    assert capsys.readouterr().out == "パソコン\n"
