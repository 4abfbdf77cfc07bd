"""Tests for token_filter service."""

from types import SimpleNamespace

import pytest

from lyrics_miner.config import DEFAULT_DENYLISTED_FORMS, create_default_config
from lyrics_miner.exceptions import TokenContractError
from lyrics_miner.models import Token, VocabularyEntry, VocabularySet
from lyrics_miner.services.token_filter import TokenFilterService, extract_vocabulary


@pytest.fixture
def service(test_config):
    """Create a TokenFilterService instance."""
    return TokenFilterService(test_config)


def written_forms(entries):
    return {entry.written_form for entry in entries}


class TestRejectionRules:
    """Tests for the individual filter rules."""

    @pytest.mark.parametrize("form", ["は", "です", "カタカナ", "ぁ", "ン", "ひらがなとカタカナ"])
    def test_kana_only_rejected(self, service, form):
        assert service.rejection_reason(form) == "kana-only"

    @pytest.mark.parametrize("form", ["ラーメン", "ー"])
    def test_prolonged_sound_mark_is_not_kana(self, service, form):
        assert service.is_vocabulary(form)

    @pytest.mark.parametrize("form", ["食べる", "お茶", "好き"])
    def test_mixed_kanji_and_kana_kept(self, service, form):
        assert service.is_vocabulary(form)

    @pytest.mark.parametrize("form", ["0", "123", "2024", ""])
    def test_digits_only_rejected(self, service, form):
        assert service.rejection_reason(form) == "digits-only"

    def test_fullwidth_digits_are_not_ascii_digits(self, service):
        assert service.is_vocabulary("１２３")

    @pytest.mark.parametrize("form", DEFAULT_DENYLISTED_FORMS)
    def test_denylisted_glyph_rejected(self, service, form):
        assert service.rejection_reason(form) == "denylisted"

    @pytest.mark.parametrize("form", ["「夜」", "**", "FJ", "MM", "f", "。。"])
    def test_denylist_is_full_match(self, service, form):
        assert service.is_vocabulary(form)

    @pytest.mark.parametrize("form", ["Xyz", "Love", "私", "学生"])
    def test_other_forms_kept(self, service, form):
        assert service.rejection_reason(form) is None

    def test_custom_denylist(self):
        service = TokenFilterService(create_default_config(denylisted_forms=["♪"]))
        assert not service.is_vocabulary("♪")
        assert service.is_vocabulary("F")


class TestToEntry:
    """Tests for mapping tokens to entries."""

    def test_uses_base_forms(self, service):
        entry = service.to_entry(Token("走る", "ハシル", surface="走っ"))
        assert entry == VocabularyEntry("走る", "ハシル")

    def test_accepts_any_object_with_base_forms(self, service):
        token = SimpleNamespace(written_base_form="夜", kana_base_form="ヨル")
        assert service.to_entry(token) == VocabularyEntry("夜", "ヨル")

    def test_missing_written_form_raises(self, service):
        token = SimpleNamespace(kana_base_form="ヨル")
        with pytest.raises(TokenContractError, match="written_base_form"):
            service.to_entry(token)

    def test_none_reading_raises(self, service):
        token = SimpleNamespace(written_base_form="夜", kana_base_form=None)
        with pytest.raises(TokenContractError, match="kana_base_form"):
            service.to_entry(token)

    def test_non_string_form_raises(self, service):
        token = SimpleNamespace(written_base_form=123, kana_base_form="イチニサン")
        with pytest.raises(TokenContractError, match="int"):
            service.to_entry(token)


class TestExtractVocabulary:
    """Tests for extract_vocabulary."""

    def test_kana_and_punctuation_excluded(self, service, vocabulary, make_token):
        tokens = [make_token(w) for w in ["私", "は", "学生", "です", "。"]]

        candidates = service.extract_vocabulary(tokens, vocabulary)

        assert written_forms(candidates) == {"私", "学生"}
        assert written_forms(vocabulary) == {"私", "学生"}

    def test_repeated_token_in_one_call_kept_once(self, service, vocabulary):
        tokens = [Token("猫", "ねこ"), Token("猫", "ねこ")]

        candidates = service.extract_vocabulary(tokens, vocabulary)

        assert candidates == {VocabularyEntry("猫", "ねこ")}
        assert len(vocabulary) == 1

    def test_disjoint_calls_accumulate(self, service, vocabulary, make_token):
        service.extract_vocabulary([make_token("猫"), make_token("犬")], vocabulary)
        service.extract_vocabulary([make_token("空"), make_token("夜")], vocabulary)

        assert len(vocabulary) == 4

    def test_overlapping_calls_do_not_duplicate(self, service, vocabulary, make_token):
        service.extract_vocabulary([make_token("猫"), make_token("犬")], vocabulary)
        service.extract_vocabulary([make_token("犬"), make_token("空")], vocabulary)

        assert len(vocabulary) == 3

    def test_returns_candidates_already_in_set(self, service, vocabulary, make_token):
        vocabulary.add(VocabularyEntry("猫", "ネコ"))

        candidates = service.extract_vocabulary([make_token("猫")], vocabulary)

        assert candidates == {VocabularyEntry("猫", "ネコ")}
        assert len(vocabulary) == 1

    def test_idempotent(self, service, make_token):
        tokens = [make_token(w) for w in ["夜", "に", "駆ける", "123", "Xyz", "夜"]]
        once = VocabularySet([VocabularyEntry("空", "ソラ")])
        twice = VocabularySet([VocabularyEntry("空", "ソラ")])

        service.extract_vocabulary(tokens, once)
        service.extract_vocabulary(tokens, twice)
        service.extract_vocabulary(tokens, twice)

        assert once == twice

    def test_digits_excluded_latin_kept(self, service, vocabulary, make_token):
        service.extract_vocabulary([make_token("123"), make_token("Xyz")], vocabulary)

        assert written_forms(vocabulary) == {"Xyz"}

    def test_no_denylisted_form_reaches_the_set(self, service, vocabulary, make_token):
        tokens = [make_token(form) for form in DEFAULT_DENYLISTED_FORMS]
        tokens += [make_token("ねこ"), make_token("42"), make_token("")]

        service.extract_vocabulary(tokens, vocabulary)

        assert len(vocabulary) == 0

    def test_malformed_token_fails_fast(self, service, vocabulary, make_token):
        tokens = [make_token("猫"), SimpleNamespace(written_base_form="犬")]

        with pytest.raises(TokenContractError):
            service.extract_vocabulary(tokens, vocabulary)

    def test_empty_tokens(self, service, vocabulary):
        assert service.extract_vocabulary([], vocabulary) == set()
        assert len(vocabulary) == 0

    def test_module_level_function_uses_default_config(self, vocabulary, make_token):
        candidates = extract_vocabulary([make_token("猫"), make_token("F")], vocabulary)

        assert written_forms(candidates) == {"猫"}


class TestMerge:
    """Tests for merge."""

    def test_returns_only_inserted_entries(self, service, vocabulary, make_entry):
        vocabulary.add(make_entry("猫"))

        added = service.merge([make_entry("猫"), make_entry("犬")], vocabulary)

        assert added == [make_entry("犬")]
        assert len(vocabulary) == 2
