"""Text processing utilities."""

import re

# Hiragana ぁ..ん and katakana ァ..ン; the prolonged sound mark ー is outside both ranges
KANA_ONLY_PATTERN = re.compile(r"[ぁ-んァ-ン]+")
DIGITS_ONLY_PATTERN = re.compile(r"[0-9]*")

_LRC_TIMESTAMP = re.compile(r"\[\d{1,3}:\d{2}(?:[.:]\d{1,3})?\]")
_LRC_WORD_TIMESTAMP = re.compile(r"<\d{1,3}:\d{2}(?:[.:]\d{1,3})?>")
_LRC_METADATA_LINE = re.compile(r"^\[[a-zA-Z#]+:[^\]]*\]$")


def is_kana_only(text: str) -> bool:
    """Check whether text consists entirely of hiragana/katakana.

    Args:
        text: Text to check

    Returns:
        True if every character is kana (empty text is not kana-only)
    """
    return KANA_ONLY_PATTERN.fullmatch(text) is not None


def is_digits_only(text: str) -> bool:
    """Check whether text consists entirely of ASCII digits.

    The empty string counts as digits-only.
    """
    return DIGITS_ONLY_PATTERN.fullmatch(text) is not None


def clean_subtitle_text(text: str) -> str:
    """Remove formatting tags and clean up subtitle text.

    Args:
        text: Raw subtitle text with possible formatting tags

    Returns:
        Cleaned text without formatting tags
    """
    # Remove ASS/SSA style tags like {\pos(x,y)}, {\fad(100,200)}, etc.
    text = re.sub(r"\{[^}]*\}", "", text)

    # Remove line break tags
    text = re.sub(r"\\[nN]", " ", text)

    # Remove HTML tags if present
    text = re.sub(r"<[^>]+>", "", text)

    # Normalize whitespace
    text = " ".join(text.split())

    return text.strip()


def clean_lrc_text(text: str) -> str:
    """Strip LRC timestamps and metadata lines from lyric text.

    Args:
        text: Contents of an .lrc file

    Returns:
        Plain lyric lines joined with newlines

    Example:
        clean_lrc_text("[ti:Song]\\n[00:12.50]夜に駆ける")
        # Returns: "夜に駆ける"
    """
    lines = []
    for line in text.splitlines():
        stripped = line.strip()
        if _LRC_METADATA_LINE.match(stripped):
            continue
        stripped = _LRC_TIMESTAMP.sub("", stripped)
        stripped = _LRC_WORD_TIMESTAMP.sub("", stripped).strip()
        if stripped:
            lines.append(stripped)
    return "\n".join(lines)


def katakana_to_hiragana(text: str) -> str:
    """Convert katakana characters to hiragana.

    Args:
        text: Text potentially containing katakana

    Returns:
        Text with katakana converted to hiragana
    """
    result = []
    for ch in text:
        if "\u30a1" <= ch <= "\u30f6":
            result.append(chr(ord(ch) - 0x60))
        else:
            result.append(ch)
    return "".join(result)
