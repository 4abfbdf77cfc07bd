"""Data models for extraction results."""

from dataclasses import dataclass, field

from .vocabulary import VocabularyEntry


@dataclass
class ExtractionResult:
    """Result of extracting vocabulary from one piece of text or one file."""

    source: str  # "pasted text" or the file path
    tokens_seen: int
    candidates: int  # Distinct entries that survived filtering
    new_entries: list[VocabularyEntry] = field(default_factory=list)
    elapsed_time: float = 0.0

    @property
    def new_count(self) -> int:
        """Number of entries this extraction inserted into the set."""
        return len(self.new_entries)

    @property
    def duplicates(self) -> int:
        """Number of candidates that were already in the set."""
        return self.candidates - self.new_count

    @property
    def has_new_entries(self) -> bool:
        """Check if the extraction added anything."""
        return self.new_count > 0

    def __str__(self) -> str:
        return (
            f"ExtractionResult(source={self.source!r}, tokens={self.tokens_seen}, "
            f"candidates={self.candidates}, new={self.new_count}, "
            f"time={self.elapsed_time:.2f}s)"
        )
