"""Tests for text_utils module."""

import pytest

from lyrics_miner.utils.text_utils import (
    clean_lrc_text,
    clean_subtitle_text,
    is_digits_only,
    is_kana_only,
    katakana_to_hiragana,
)


class TestIsKanaOnly:
    @pytest.mark.parametrize("text", ["あ", "ぁ", "ん", "ァ", "ン", "ですね", "アイ"])
    def test_kana(self, text):
        assert is_kana_only(text)

    @pytest.mark.parametrize("text", ["", "ー", "ラーメン", "ヴ", "ゔ", "猫", "ねこ。", "a"])
    def test_not_kana(self, text):
        assert not is_kana_only(text)


class TestIsDigitsOnly:
    @pytest.mark.parametrize("text", ["", "0", "0123456789"])
    def test_digits(self, text):
        assert is_digits_only(text)

    @pytest.mark.parametrize("text", ["１", "1a", "-1", "1.5", " 1"])
    def test_not_digits(self, text):
        assert not is_digits_only(text)


class TestCleanSubtitleText:
    def test_removes_ass_tags(self):
        assert clean_subtitle_text(r"{\i1}夜に{\i0}駆ける") == "夜に駆ける"

    def test_replaces_line_breaks(self):
        assert clean_subtitle_text(r"夜に\N駆ける") == "夜に 駆ける"

    def test_removes_html_tags(self):
        assert clean_subtitle_text("<i>沈むように</i>") == "沈むように"

    def test_empty(self):
        assert clean_subtitle_text("   ") == ""


class TestCleanLrcText:
    def test_strips_timestamps_and_metadata(self, sample_lrc_content):
        assert clean_lrc_text(sample_lrc_content) == (
            "沈むように溶けてゆくように\n二人だけの空が広がる夜に"
        )

    def test_strips_word_timestamps(self):
        assert clean_lrc_text("[00:01.00]<00:01.00>夜に<00:01.50>駆ける") == "夜に駆ける"

    def test_multiple_line_timestamps(self):
        assert clean_lrc_text("[00:01.00][01:01.00]サビ") == "サビ"

    def test_plain_text_unchanged(self):
        assert clean_lrc_text("夜に駆ける\n空") == "夜に駆ける\n空"

    def test_bracketed_lyrics_kept(self):
        assert clean_lrc_text("[サビ]") == "[サビ]"


class TestKatakanaToHiragana:
    def test_converts_katakana(self):
        assert katakana_to_hiragana("カケル") == "かける"

    def test_leaves_other_text(self):
        assert katakana_to_hiragana("夜ー") == "夜ー"
