"""
Converters of troublesome characters included in Japanese texts.

* Half-width-kana [半角ｶﾅ] -> normal Katakana
* Wide-alphanumeric [全角英数] <-> normal ASCII
* Hiragana <-> Katakana
* Voiced-sound-marks: combine with their base, or normalize their spelling

Every converter takes a str and returns a new str. Characters a converter
does not know about pass through unchanged.

Example:
  >>> half2kana("ﾏﾂｵ ﾊﾞｼｮｳ ｱﾟ")
  'マツオ バショウ ア ゚'
  >>> combine("ひ゜ひ゛んは゛")
  'ぴびんば'
  >>> wide2ascii("＃＆Ｒｕｓｔ－１．６！")
  '#&Rust-1.6!'
"""
import re
from typing import Callable, Dict, Mapping

from kana_tables import (
    ASCII_RANGE, CH_SEMIVOICED_COMBI, CH_SEMIVOICED_FULL, CH_SEMIVOICED_HALF, CH_SPACE,
    CH_VOICED_COMBI, CH_VOICED_FULL, CH_VOICED_HALF, CH_WIDE_SPACE, CH_WIDE_YEN, CH_YEN,
    HALF_MARKS, HALVES, HIRAGANA_RANGE, KANA_OFFSET, KATAKANA_RANGE, RE_SEMIVOICED_MARKS,
    RE_VOICED_MARKS, SEMIVOICED_HALVES, SEMIVOICED_MARKS, SEMIVOICED_WITH_SPACE, SEMIVOICES,
    VOICED_HALVES, VOICED_MARKS, VOICED_WITH_SPACE, VOICES, WIDE_ASCII_RANGE, WIDE_OFFSET,
)

RX_VOICED = re.compile(RE_VOICED_MARKS)
RX_SEMIVOICED = re.compile(RE_SEMIVOICED_MARKS)

_HALVES_TRANS = str.maketrans(dict(HALVES))

_MAX_CODE = 0x10FFFF
_SURROGATES = (0xD800, 0xDFFF)


def _is_scalar(k: int) -> bool:
    return 0 <= k <= _MAX_CODE and not (_SURROGATES[0] <= k <= _SURROGATES[1])


def shift_code(judge: Callable[[int], bool], convert: Callable[[int], int], s: str) -> str:
    """Remap every character whose code point satisfies `judge` to chr(convert(code)).

    A converted value that is not a Unicode scalar value leaves the character as is.
    """
    out = []
    for c in s:
        k = ord(c)
        if judge(k):
            v = convert(k)
            out.append(chr(v) if _is_scalar(v) else c)
        else:
            out.append(c)
    return "".join(out)


def lookup_map(table: Mapping[str, str], s: str) -> str:
    """Replace each character found in `table`; keep the others."""
    return s.translate(str.maketrans(dict(table)))


def _in_range(rng):
    low, high = rng
    return lambda x: low <= x <= high


def wide2ascii(s: str) -> str:
    """Convert Wide-alphanumeric into normal ASCII  [Ａ -> A]"""
    return shift_code(_in_range(WIDE_ASCII_RANGE), lambda x: x - WIDE_OFFSET, s)


def ascii2wide(s: str) -> str:
    """Convert normal ASCII characters into Wide-alphanumeric  [A -> Ａ]"""
    return shift_code(_in_range(ASCII_RANGE), lambda x: x + WIDE_OFFSET, s)


def hira2kata(s: str) -> str:
    """Convert Hiragana into Katakana  [あ -> ア]"""
    return shift_code(_in_range(HIRAGANA_RANGE), lambda x: x + KANA_OFFSET, s)


def kata2hira(s: str) -> str:
    """Convert Katakana into Hiragana  [ア -> あ]"""
    return shift_code(_in_range(KATAKANA_RANGE), lambda x: x - KANA_OFFSET, s)


def half2full(s: str) -> str:
    """
    Convert Half-width-kana into normal Katakana with diacritical marks separated  [ｱﾞﾊﾟ -> ア゙パ]

    Simple, but the separated marks tend to cause trouble when rendering.
    Use half2kana(), or run vsmark2half/full/combi() afterwards, in that case.
    """
    return s.translate(_HALVES_TRANS)


def _flush_half(a: str, out: list) -> None:
    # an orphan half-width mark is rendered after a separating space
    if a in HALF_MARKS:
        out.append(CH_SPACE)
    out.append(HALVES.get(a, a))


def half2kana(s: str) -> str:
    """
    Convert Half-width-kana into normal Katakana with diacritical marks combined  [ｱﾞﾊﾟ -> アﾞパ]

    Scans with one character of lookahead. A half-width base followed by ﾞ or ﾟ
    becomes the precomposed katakana when one exists. Any other character is
    expanded as half2full() does, except that a mark left without a base gets
    a space in front of it:
      half2kana("ﾏﾂｵ ﾊﾞｼｮｳ ｱﾟ") == "マツオ バショウ ア ゚"
    """
    out = []
    pending = None
    for b in s:
        if pending is None:
            pending = b
            continue
        a = pending
        if b == CH_VOICED_HALF and a in VOICED_HALVES:
            out.append(VOICED_HALVES[a])
            pending = None
        elif b == CH_SEMIVOICED_HALF and a in SEMIVOICED_HALVES:
            out.append(SEMIVOICED_HALVES[a])
            pending = None
        else:
            _flush_half(a, out)
            pending = b
    if pending is not None:
        _flush_half(pending, out)
    return "".join(out)


def despace(s: str) -> str:
    """Fold "space + combining mark" into the bare combining mark."""
    s = s.replace(VOICED_WITH_SPACE, CH_VOICED_COMBI)
    return s.replace(SEMIVOICED_WITH_SPACE, CH_SEMIVOICED_COMBI)


def enspace(s: str) -> str:
    """Expand each bare combining mark into "space + combining mark"."""
    s = s.replace(CH_VOICED_COMBI, VOICED_WITH_SPACE)
    return s.replace(CH_SEMIVOICED_COMBI, SEMIVOICED_WITH_SPACE)


def combine(s: str) -> str:
    """
    Combine base characters and diacritical marks on Hiragana/Katakana  [かﾞハ゜ -> がパ]

    Marks in any spelling (half-width, full-width, combining, space+combining)
    merge into the preceding base when a precomposed form exists. Marks that
    cannot merge are kept; surviving combining marks come back as
    space+combining so the number of columns is preserved.
    """
    out = []
    pending = None
    for b in despace(s):
        if pending is None:
            pending = b
            continue
        a = pending
        if b in VOICED_MARKS and a in VOICES:
            out.append(VOICES[a])
            pending = None
        elif b in SEMIVOICED_MARKS and a in SEMIVOICES:
            out.append(SEMIVOICES[a])
            pending = None
        else:
            out.append(a)
            pending = b
    if pending is not None:
        out.append(pending)
    return enspace("".join(out))


def replace_marks(vmark: str, svmark: str, s: str) -> str:
    """Rewrite every spelling of the voiced / semi-voiced mark as `vmark` / `svmark`."""
    s = RX_VOICED.sub(lambda _m: vmark, s)
    return RX_SEMIVOICED.sub(lambda _m: svmark, s)


def vsmark2half(s: str) -> str:
    """Convert all separated Voiced-sound-marks into half-width style "\\uFF9E" """
    return replace_marks(CH_VOICED_HALF, CH_SEMIVOICED_HALF, s)


def vsmark2full(s: str) -> str:
    """Convert all separated Voiced-sound-marks into full-width style "\\u309B" """
    return replace_marks(CH_VOICED_FULL, CH_SEMIVOICED_FULL, s)


def vsmark2combi(s: str) -> str:
    """Convert all separated Voiced-sound-marks into space+combining style "\\u0020\\u3099" """
    return replace_marks(VOICED_WITH_SPACE, SEMIVOICED_WITH_SPACE, s)


def nowidespace(s: str) -> str:
    """Convert Wide-space into normal space  ["　" -> " "]"""
    return s.replace(CH_WIDE_SPACE, CH_SPACE)


def space2wide(s: str) -> str:
    """Convert normal space into Wide-space  [" " -> "　"]"""
    return s.replace(CH_SPACE, CH_WIDE_SPACE)


def nowideyen(s: str) -> str:
    """Convert Wide-yen into Half-width-yen  ["￥" -> "¥"]"""
    return s.replace(CH_WIDE_YEN, CH_YEN)


def yen2wide(s: str) -> str:
    """Convert Half-width-yen into Wide-yen  ["¥" -> "￥"]"""
    return s.replace(CH_YEN, CH_WIDE_YEN)


# Application order used when several converters are selected at once.
# Expansion runs before composition, composition before mark spelling.
CONVERTERS: Dict[str, Callable[[str], str]] = {
    "half2full": half2full,
    "half2kana": half2kana,
    "combine": combine,
    "vsmark2half": vsmark2half,
    "vsmark2full": vsmark2full,
    "vsmark2combi": vsmark2combi,
    "hira2kata": hira2kata,
    "kata2hira": kata2hira,
    "wide2ascii": wide2ascii,
    "ascii2wide": ascii2wide,
    "nowidespace": nowidespace,
    "space2wide": space2wide,
    "nowideyen": nowideyen,
    "yen2wide": yen2wide,
}


def apply_all(names, s: str) -> str:
    """Apply the named converters to `s` in CONVERTERS order."""
    unknown = [n for n in names if n not in CONVERTERS]
    if unknown:
        raise KeyError(f"unknown converter(s): {', '.join(unknown)}")
    selected = set(names)
    for name, fn in CONVERTERS.items():
        if name in selected:
            s = fn(s)
    return s
