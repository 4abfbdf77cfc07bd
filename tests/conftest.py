"""Pytest configuration and shared fixtures."""

import pytest

from lyrics_miner.config import LyricsMinerConfig
from lyrics_miner.models import Token, VocabularyEntry, VocabularySet
from lyrics_miner.presenters import NullPresenter, NullProgressCallback

READINGS = {
    "私": "ワタクシ",
    "学生": "ガクセイ",
    "猫": "ネコ",
    "犬": "イヌ",
    "好き": "スキ",
    "夜": "ヨル",
    "駆ける": "カケル",
    "空": "ソラ",
    "二人": "フタリ",
}


class StubTokenizer:
    """A real Tokenizer implementation for tests.

    Splits text on whitespace and looks readings up in a fixed table,
    falling back to the word itself.
    """

    def __init__(self, readings=None):
        self.readings = READINGS if readings is None else readings
        self.calls = []

    def tokenize(self, raw_text):
        self.calls.append(raw_text)
        return [
            Token(written_base_form=word, kana_base_form=self.readings.get(word, word), surface=word)
            for word in raw_text.split()
        ]


@pytest.fixture
def test_config(tmp_path):
    """Provide a test configuration with temporary paths."""
    return LyricsMinerConfig(export_directory=tmp_path / "exports")


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def null_progress():
    """Provide a null progress callback for testing."""
    return NullProgressCallback()


@pytest.fixture
def stub_tokenizer():
    """Provide a whitespace tokenizer with a small reading table."""
    return StubTokenizer()


@pytest.fixture
def make_token():
    """Factory fixture for creating Token instances."""

    def _make(written_base_form="猫", kana_base_form=None, surface=None):
        return Token(
            written_base_form=written_base_form,
            kana_base_form=(
                kana_base_form
                if kana_base_form is not None
                else READINGS.get(written_base_form, written_base_form)
            ),
            surface=surface if surface is not None else written_base_form,
        )

    return _make


@pytest.fixture
def make_entry():
    """Factory fixture for creating VocabularyEntry instances."""

    def _make(written_form="猫", reading=None):
        return VocabularyEntry(
            written_form=written_form,
            reading=reading if reading is not None else READINGS.get(written_form, written_form),
        )

    return _make


@pytest.fixture
def vocabulary():
    """Provide an empty vocabulary set."""
    return VocabularySet()


class RecordingProgress:
    """A real ProgressCallback implementation that records all calls for assertion."""

    def __init__(self):
        self.starts = []
        self.progresses = []
        self.completes = 0
        self.errors = []

    def on_start(self, total: int, description: str) -> None:
        self.starts.append((total, description))

    def on_progress(self, current: int, item_description: str) -> None:
        self.progresses.append((current, item_description))

    def on_complete(self) -> None:
        self.completes += 1

    def on_error(self, item_description: str, error_message: str) -> None:
        self.errors.append((item_description, error_message))


@pytest.fixture
def recording_progress():
    """Provide a progress callback that records all calls for assertion."""
    return RecordingProgress()


@pytest.fixture
def sample_lrc_content():
    """Provide sample LRC lyrics for testing."""
    return """[ti:夜に駆ける]
[ar:YOASOBI]
[00:12.50]沈むように溶けてゆくように
[00:20.00]
[00:21.10]二人だけの空が広がる夜に
"""


@pytest.fixture
def sample_srt_content():
    """Provide sample SRT lyrics for testing."""
    return """1
00:00:01,000 --> 00:00:03,000
夜に駆ける

2
00:00:04,000 --> 00:00:06,000
<i>沈むように</i>
"""
