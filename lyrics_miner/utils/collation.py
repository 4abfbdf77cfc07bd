"""Japanese collation for sorting vocabulary.

The platform locale facility has no Japanese collation weights, so ordering
is computed from a three-level sort key in the spirit of JIS X 4061:

* primary: character group (symbols < digits < Latin < kana < kanji < other),
  then the base letter. Kana are folded to hiragana, stripped of voicing
  marks and enlarged, so か/カ/が/ガ share a primary weight. The prolonged
  sound mark ー takes the vowel of the kana before it, and the iteration
  marks ゝゞヽヾ repeat that kana.
* secondary: small before large, plain before voiced before semi-voiced.
* tertiary: hiragana before katakana, lowercase before uppercase.

Remaining ties fall back to the raw string so the order is total.
"""

import unicodedata
from functools import cmp_to_key

from .text_utils import katakana_to_hiragana

GROUP_SYMBOL = 0
GROUP_DIGIT = 1
GROUP_LATIN = 2
GROUP_KANA = 3
GROUP_KANJI = 4
GROUP_OTHER = 5

_PROLONGED_SOUND_MARK = "ー"
_DAKUTEN = "\u3099"
_HANDAKUTEN = "\u309a"

_SMALL_TO_LARGE = str.maketrans("ぁぃぅぇぉっゃゅょゎゕゖ", "あいうえおつやゆよわかけ")

_VOWEL_ROWS = {
    "あ": "あかさたなはまやらわ",
    "い": "いきしちにひみりゐ",
    "う": "うくすつぬふむゆる",
    "え": "えけせてねへめれゑ",
    "お": "おこそとのほもよろを",
}
_VOWEL_OF = {kana: vowel for vowel, row in _VOWEL_ROWS.items() for kana in row}

# Secondary weight of ー, after any plain, voiced or small variant of its vowel
_PROLONGED_SECONDARY = 6
_PLAIN_SECONDARY = 1
_VOICED_SECONDARY = 3

# Iteration marks ゝゞヽヾ repeat the previous kana: (voiced, katakana)
_ITERATION_MARKS = {
    "\u309d": (False, 0),
    "\u309e": (True, 0),
    "\u30fd": (False, 1),
    "\u30fe": (True, 1),
}

# Voiced katakana ヷヸヹヺ with no hiragana counterpart
_VOICED_WA_ROW = {
    "\u30f7": "わ",
    "\u30f8": "ゐ",
    "\u30f9": "ゑ",
    "\u30fa": "を",
}


def _is_kana(char: str) -> bool:
    return (
        "\u3041" <= char <= "\u3096"
        or "\u30a1" <= char <= "\u30fa"
        or char in _ITERATION_MARKS
    )


def _is_kanji(char: str) -> bool:
    return (
        "\u4e00" <= char <= "\u9fff"
        or "\u3400" <= char <= "\u4dbf"
        or "\uf900" <= char <= "\ufaff"
        or char in "々〆〇"
    )


def char_group(char: str) -> int:
    """Return the collation group of a single (NFKC-normalized) character."""
    if char == _PROLONGED_SOUND_MARK or _is_kana(char):
        return GROUP_KANA
    if _is_kanji(char):
        return GROUP_KANJI
    category = unicodedata.category(char)
    if category == "Nd":
        return GROUP_DIGIT
    if category.startswith("L") and "LATIN" in unicodedata.name(char, ""):
        return GROUP_LATIN
    if category[0] in "ZPSC":
        return GROUP_SYMBOL
    return GROUP_OTHER


def _kana_weights(
    char: str,
    previous_vowel: str | None,
    previous_base: str | None,
) -> tuple[int, int, int]:
    if char == _PROLONGED_SOUND_MARK:
        base = previous_vowel or char
        return ord(base), _PROLONGED_SECONDARY, 0

    if char in _ITERATION_MARKS:
        voiced, tertiary = _ITERATION_MARKS[char]
        base = previous_base or char
        return ord(base), _VOICED_SECONDARY if voiced else _PLAIN_SECONDARY, tertiary

    if char in _VOICED_WA_ROW:
        return ord(_VOICED_WA_ROW[char]), _VOICED_SECONDARY, 1

    hiragana = katakana_to_hiragana(char)
    tertiary = 0 if hiragana == char else 1

    decomposed = unicodedata.normalize("NFD", hiragana)
    base, marks = decomposed[0], decomposed[1:]
    if _HANDAKUTEN in marks:
        voicing = 2
    elif _DAKUTEN in marks:
        voicing = 1
    else:
        voicing = 0

    large = base.translate(_SMALL_TO_LARGE)
    size = 0 if large != base else 1
    return ord(large), voicing * 2 + size, tertiary


def japanese_sort_key(text: str) -> tuple:
    """Build a collation key for Japanese text.

    Args:
        text: Text to build a key for

    Returns:
        Tuple usable as a ``sorted`` key

    Example:
        sorted(["さくら", "あめ", "カサ"], key=japanese_sort_key)
        # Returns: ["あめ", "カサ", "さくら"]
    """
    normalized = unicodedata.normalize("NFKC", text)
    primary = []
    secondary = []
    tertiary = []
    previous_vowel = None
    previous_base = None

    for char in normalized:
        group = char_group(char)
        if group == GROUP_KANA:
            weight, second, third = _kana_weights(char, previous_vowel, previous_base)
            if char != _PROLONGED_SOUND_MARK:
                previous_base = chr(weight)
                previous_vowel = _VOWEL_OF.get(previous_base, previous_base)
        else:
            previous_vowel = None
            previous_base = None
            if group == GROUP_LATIN:
                weight = ord(char.lower())
                third = 1 if char.isupper() else 0
            else:
                weight = ord(char)
                third = 0
            second = 0
        primary.append((group, weight))
        secondary.append(second)
        tertiary.append(third)

    return tuple(primary), tuple(secondary), tuple(tertiary), text


def compare_japanese(a: str, b: str) -> int:
    """Compare two strings under Japanese collation.

    Returns:
        Negative if a sorts first, positive if b sorts first, 0 if identical
    """
    key_a = japanese_sort_key(a)
    key_b = japanese_sort_key(b)
    return (key_a > key_b) - (key_a < key_b)


def entry_sort_key(entry) -> tuple:
    """Sort key for a vocabulary entry: written form, then reading."""
    return japanese_sort_key(entry.written_form), japanese_sort_key(entry.reading)


def compare_entries(a, b) -> int:
    """Symmetric comparator: written form against written form, then reading."""
    key_a = entry_sort_key(a)
    key_b = entry_sort_key(b)
    return (key_a > key_b) - (key_a < key_b)


def compare_entries_legacy(a, b) -> int:
    """Legacy comparator: one entry's written form against the other's reading.

    Not a consistent ordering (compare(a, b) and compare(b, a) look at
    different fields); kept for parity with card decks sorted by it.
    """
    return compare_japanese(a.written_form, b.reading)


def sort_entries(entries, legacy: bool = False) -> list:
    """Sort vocabulary entries in Japanese collation order.

    Args:
        entries: Iterable of objects with ``written_form`` and ``reading``
        legacy: Use the asymmetric legacy comparator

    Returns:
        New sorted list
    """
    ordered = sorted(entries, key=entry_sort_key)
    if legacy:
        # Pre-ordered above so legacy ties resolve the same way on every call
        ordered.sort(key=cmp_to_key(compare_entries_legacy))
    return ordered
