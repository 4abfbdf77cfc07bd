"""Console presenter for CLI output."""

from lyrics_miner.models import ExtractionResult, VocabularyEntry


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def __init__(self, preview_limit: int | None = None):
        """Initialize the presenter.

        Args:
            preview_limit: Maximum vocabulary rows to print, or None for all
        """
        self.preview_limit = preview_limit

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_extraction_result(self, result: ExtractionResult) -> None:
        """Display the outcome of extracting vocabulary from one source."""
        print(f"\nExtracted from {result.source}:")
        print(f"  Tokens analyzed: {result.tokens_seen}")
        print(f"  Vocabulary candidates: {result.candidates}")
        print(f"  New entries: {result.new_count}")
        print(f"  Already known: {result.duplicates}")
        print(f"  Time elapsed: {result.elapsed_time:.2f}s")

    def show_vocabulary(self, entries: list[VocabularyEntry], show_readings: bool = False) -> None:
        """Display vocabulary entries in the order given."""
        print(f"\nVocabulary ({len(entries)} words):")
        print("=" * 60)

        shown = entries if self.preview_limit is None else entries[: self.preview_limit]
        for i, entry in enumerate(shown, 1):
            if show_readings:
                print(f"{i:3d}. {entry.written_form:15s} {entry.reading}")
            else:
                print(f"{i:3d}. {entry.written_form}")

        if len(entries) > len(shown):
            print(f"... and {len(entries) - len(shown)} more words")


class ConsoleProgressCallback:
    """Console implementation of progress callback."""

    def __init__(self):
        """Initialize the progress callback."""
        self.total = 0
        self.current = 0
        self.description = ""

    def on_start(self, total: int, description: str) -> None:
        """Called when an operation starts."""
        self.total = total
        self.current = 0
        self.description = description
        print(f"\n{description}...")

    def on_progress(self, current: int, item_description: str) -> None:
        """Called when an item is processed."""
        self.current = current
        print(f"  [{current}/{self.total}] {item_description}")

    def on_complete(self) -> None:
        """Called when an operation completes."""
        print(f"  [OK] Complete: {self.current}/{self.total}")

    def on_error(self, item_description: str, error_message: str) -> None:
        """Called when an item fails."""
        print(f"  [ERROR] {item_description}: {error_message}")
