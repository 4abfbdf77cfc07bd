"""Data models for vocabulary entries and the session vocabulary set."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from lyrics_miner.utils.collation import sort_entries


@dataclass(frozen=True)
class VocabularyEntry:
    """A vocabulary word taken from lyrics.

    Equality and hashing cover exactly ``written_form`` and ``reading``;
    that pair is the dedup key of :class:`VocabularySet`.
    """

    written_form: str  # Base written form, e.g. "駆ける"
    reading: str  # Base reading in kana, e.g. "カケル"

    def __str__(self) -> str:
        return f"{self.written_form} ({self.reading})"


class VocabularySet:
    """Accumulating set of vocabulary entries for one mining session.

    Not thread-safe. Callers sharing a set between threads must lock
    around ``add``/``remove`` and reads themselves.
    """

    def __init__(self, entries: Iterable[VocabularyEntry] = ()):
        self._entries: set[VocabularyEntry] = set()
        for entry in entries:
            self.add(entry)

    def add(self, entry: VocabularyEntry) -> bool:
        """Insert an entry unless an equal one is already present.

        Args:
            entry: Entry to insert

        Returns:
            True if the entry was inserted, False if it was a duplicate
        """
        if entry in self._entries:
            return False
        self._entries.add(entry)
        return True

    def remove(self, entry: VocabularyEntry) -> bool:
        """Remove an entry.

        Returns:
            True if the entry was present and removed, False otherwise
        """
        if entry not in self._entries:
            return False
        self._entries.remove(entry)
        return True

    def to_list(self) -> list[VocabularyEntry]:
        """Return all entries (order unspecified)."""
        return list(self._entries)

    def sorted_entries(self, legacy: bool = False) -> list[VocabularyEntry]:
        """Return entries in Japanese collation order.

        Args:
            legacy: Order with the legacy written-form-vs-reading comparator
        """
        return sort_entries(self._entries, legacy=legacy)

    def sorted_written_forms(self, legacy: bool = False) -> list[str]:
        """Return written forms in Japanese collation order."""
        return [entry.written_form for entry in self.sorted_entries(legacy=legacy)]

    def __contains__(self, entry: object) -> bool:
        return entry in self._entries

    def __iter__(self) -> Iterator[VocabularyEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VocabularySet):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"VocabularySet({len(self._entries)} entries)"
