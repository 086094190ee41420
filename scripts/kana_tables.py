"""
Code-point tables for Japanese kana conversion.
Pure data: every table is built once at import time and exposed read-only.

Voiced / semi-voiced mark spellings:
  U+3099  combining voiced        U+309A  combining semi-voiced
  U+309B  full-width voiced  ゛   U+309C  full-width semi-voiced  ゜
  U+FF9E  half-width voiced  ﾞ    U+FF9F  half-width semi-voiced  ﾟ
"""
from types import MappingProxyType

CH_VOICED_COMBI = "\u3099"
CH_SEMIVOICED_COMBI = "\u309A"
CH_VOICED_FULL = "\u309B"
CH_SEMIVOICED_FULL = "\u309C"
CH_VOICED_HALF = "\uFF9E"
CH_SEMIVOICED_HALF = "\uFF9F"
CH_SPACE = "\u0020"
CH_WIDE_SPACE = "\u3000"
CH_YEN = "\u00A5"
CH_WIDE_YEN = "\uFFE5"

VOICED_WITH_SPACE = CH_SPACE + CH_VOICED_COMBI
SEMIVOICED_WITH_SPACE = CH_SPACE + CH_SEMIVOICED_COMBI

VOICED_MARKS = frozenset({CH_VOICED_HALF, CH_VOICED_FULL, CH_VOICED_COMBI})
SEMIVOICED_MARKS = frozenset({CH_SEMIVOICED_HALF, CH_SEMIVOICED_FULL, CH_SEMIVOICED_COMBI})
HALF_MARKS = frozenset({CH_VOICED_HALF, CH_SEMIVOICED_HALF})

# Lazy optional space: "space + combining" is consumed as one token.
RE_VOICED_MARKS = "(?:\u0020??\u3099|\u309B|\uFF9E)"
RE_SEMIVOICED_MARKS = "(?:\u0020??\u309A|\u309C|\uFF9F)"

# Code-point ranges for the shift converters, (low, high) inclusive
WIDE_ASCII_RANGE = (0xFF01, 0xFF5E)
ASCII_RANGE = (0x0021, 0x007E)
WIDE_OFFSET = 0xFEE0
HIRAGANA_RANGE = (0x3041, 0x3096)
KATAKANA_RANGE = (0x30A1, 0x30F6)
KANA_OFFSET = 0x0060

# Half-width base -> semi-voiced katakana
SEMIVOICED_HALVES = MappingProxyType({
    "ﾊ": "パ",   # ﾊ -> パ
    "ﾋ": "ピ",   # ﾋ -> ピ
    "ﾌ": "プ",   # ﾌ -> プ
    "ﾍ": "ペ",   # ﾍ -> ペ
    "ﾎ": "ポ",   # ﾎ -> ポ
})

# Half-width base -> voiced katakana
VOICED_HALVES = MappingProxyType({
    "ｦ": "ヺ",   # ｦ -> ヺ
    "ｳ": "ヴ",   # ｳ -> ヴ
    "ｶ": "ガ",   # ｶ -> ガ
    "ｷ": "ギ",   # ｷ -> ギ
    "ｸ": "グ",   # ｸ -> グ
    "ｹ": "ゲ",   # ｹ -> ゲ
    "ｺ": "ゴ",   # ｺ -> ゴ
    "ｻ": "ザ",   # ｻ -> ザ
    "ｼ": "ジ",   # ｼ -> ジ
    "ｽ": "ズ",   # ｽ -> ズ
    "ｾ": "ゼ",   # ｾ -> ゼ
    "ｿ": "ゾ",   # ｿ -> ゾ
    "ﾀ": "ダ",   # ﾀ -> ダ
    "ﾁ": "ヂ",   # ﾁ -> ヂ
    "ﾂ": "ヅ",   # ﾂ -> ヅ
    "ﾃ": "デ",   # ﾃ -> デ
    "ﾄ": "ド",   # ﾄ -> ド
    "ﾊ": "バ",   # ﾊ -> バ
    "ﾋ": "ビ",   # ﾋ -> ビ
    "ﾌ": "ブ",   # ﾌ -> ブ
    "ﾍ": "ベ",   # ﾍ -> ベ
    "ﾎ": "ボ",   # ﾎ -> ボ
    "ﾜ": "ヷ",   # ﾜ -> ヷ
})

# Full-width base -> semi-voiced (katakana, then hiragana)
SEMIVOICES = MappingProxyType({
    "ハ": "パ",   # ハ -> パ
    "ヒ": "ピ",   # ヒ -> ピ
    "フ": "プ",   # フ -> プ
    "ヘ": "ペ",   # ヘ -> ペ
    "ホ": "ポ",   # ホ -> ポ
    "は": "ぱ",   # は -> ぱ
    "ひ": "ぴ",   # ひ -> ぴ
    "ふ": "ぷ",   # ふ -> ぷ
    "へ": "ぺ",   # へ -> ぺ
    "ほ": "ぽ",   # ほ -> ぽ
})

# Full-width base -> voiced (katakana, then hiragana)
VOICES = MappingProxyType({
    "ウ": "ヴ",   # ウ -> ヴ
    "カ": "ガ",   # カ -> ガ
    "キ": "ギ",   # キ -> ギ
    "ク": "グ",   # ク -> グ
    "ケ": "ゲ",   # ケ -> ゲ
    "コ": "ゴ",   # コ -> ゴ
    "サ": "ザ",   # サ -> ザ
    "シ": "ジ",   # シ -> ジ
    "ス": "ズ",   # ス -> ズ
    "セ": "ゼ",   # セ -> ゼ
    "ソ": "ゾ",   # ソ -> ゾ
    "タ": "ダ",   # タ -> ダ
    "チ": "ヂ",   # チ -> ヂ
    "ツ": "ヅ",   # ツ -> ヅ
    "テ": "デ",   # テ -> デ
    "ト": "ド",   # ト -> ド
    "ハ": "バ",   # ハ -> バ
    "ヒ": "ビ",   # ヒ -> ビ
    "フ": "ブ",   # フ -> ブ
    "ヘ": "ベ",   # ヘ -> ベ
    "ホ": "ボ",   # ホ -> ボ
    "ワ": "ヷ",   # ワ -> ヷ
    "ヰ": "ヸ",   # ヰ -> ヸ
    "ヱ": "ヹ",   # ヱ -> ヹ
    "ヲ": "ヺ",   # ヲ -> ヺ
    "う": "ゔ",   # う -> ゔ
    "か": "が",   # か -> が
    "き": "ぎ",   # き -> ぎ
    "く": "ぐ",   # く -> ぐ
    "け": "げ",   # け -> げ
    "こ": "ご",   # こ -> ご
    "さ": "ざ",   # さ -> ざ
    "し": "じ",   # し -> じ
    "す": "ず",   # す -> ず
    "せ": "ぜ",   # せ -> ぜ
    "そ": "ぞ",   # そ -> ぞ
    "た": "だ",   # た -> だ
    "ち": "ぢ",   # ち -> ぢ
    "つ": "づ",   # つ -> づ
    "て": "で",   # て -> で
    "と": "ど",   # と -> ど
    "は": "ば",   # は -> ば
    "ひ": "び",   # ひ -> び
    "ふ": "ぶ",   # ふ -> ぶ
    "へ": "べ",   # へ -> べ
    "ほ": "ぼ",   # ほ -> ぼ
    "ゝ": "ゞ",   # ゝ -> ゞ
})

# Half-width kana and punctuation -> full-width, context-free.
# The half-width marks expand to the combining marks, not to ゛/゜.
HALVES = MappingProxyType({
    "｡": "。",   # ｡ -> 。
    "｢": "「",   # ｢ -> 「
    "｣": "」",   # ｣ -> 」
    "､": "、",   # ､ -> 、
    "･": "・",   # ･ -> ・
    "ｦ": "ヲ",   # ｦ -> ヲ
    "ｧ": "ァ",   # ｧ -> ァ
    "ｨ": "ィ",   # ｨ -> ィ
    "ｩ": "ゥ",   # ｩ -> ゥ
    "ｪ": "ェ",   # ｪ -> ェ
    "ｫ": "ォ",   # ｫ -> ォ
    "ｬ": "ャ",   # ｬ -> ャ
    "ｭ": "ュ",   # ｭ -> ュ
    "ｮ": "ョ",   # ｮ -> ョ
    "ｯ": "ッ",   # ｯ -> ッ
    "ｰ": "ー",   # ｰ -> ー
    "ｱ": "ア",   # ｱ -> ア
    "ｲ": "イ",   # ｲ -> イ
    "ｳ": "ウ",   # ｳ -> ウ
    "ｴ": "エ",   # ｴ -> エ
    "ｵ": "オ",   # ｵ -> オ
    "ｶ": "カ",   # ｶ -> カ
    "ｷ": "キ",   # ｷ -> キ
    "ｸ": "ク",   # ｸ -> ク
    "ｹ": "ケ",   # ｹ -> ケ
    "ｺ": "コ",   # ｺ -> コ
    "ｻ": "サ",   # ｻ -> サ
    "ｼ": "シ",   # ｼ -> シ
    "ｽ": "ス",   # ｽ -> ス
    "ｾ": "セ",   # ｾ -> セ
    "ｿ": "ソ",   # ｿ -> ソ
    "ﾀ": "タ",   # ﾀ -> タ
    "ﾁ": "チ",   # ﾁ -> チ
    "ﾂ": "ツ",   # ﾂ -> ツ
    "ﾃ": "テ",   # ﾃ -> テ
    "ﾄ": "ト",   # ﾄ -> ト
    "ﾅ": "ナ",   # ﾅ -> ナ
    "ﾆ": "ニ",   # ﾆ -> ニ
    "ﾇ": "ヌ",   # ﾇ -> ヌ
    "ﾈ": "ネ",   # ﾈ -> ネ
    "ﾉ": "ノ",   # ﾉ -> ノ
    "ﾊ": "ハ",   # ﾊ -> ハ
    "ﾋ": "ヒ",   # ﾋ -> ヒ
    "ﾌ": "フ",   # ﾌ -> フ
    "ﾍ": "ヘ",   # ﾍ -> ヘ
    "ﾎ": "ホ",   # ﾎ -> ホ
    "ﾏ": "マ",   # ﾏ -> マ
    "ﾐ": "ミ",   # ﾐ -> ミ
    "ﾑ": "ム",   # ﾑ -> ム
    "ﾒ": "メ",   # ﾒ -> メ
    "ﾓ": "モ",   # ﾓ -> モ
    "ﾔ": "ヤ",   # ﾔ -> ヤ
    "ﾕ": "ユ",   # ﾕ -> ユ
    "ﾖ": "ヨ",   # ﾖ -> ヨ
    "ﾗ": "ラ",   # ﾗ -> ラ
    "ﾘ": "リ",   # ﾘ -> リ
    "ﾙ": "ル",   # ﾙ -> ル
    "ﾚ": "レ",   # ﾚ -> レ
    "ﾛ": "ロ",   # ﾛ -> ロ
    "ﾜ": "ワ",   # ﾜ -> ワ
    "ﾝ": "ン",   # ﾝ -> ン
    "\uFF9E": "\u3099",   # ﾞ -> combining voiced
    "\uFF9F": "\u309A",   # ﾟ -> combining semi-voiced
})
