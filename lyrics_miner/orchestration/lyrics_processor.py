"""Orchestrator for a lyric mining session."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from lyrics_miner.config import LyricsMinerConfig
from lyrics_miner.exceptions import LyricsMinerException
from lyrics_miner.interfaces import PresenterProtocol, ProgressCallback, Tokenizer
from lyrics_miner.models import ExtractionResult, VocabularyEntry, VocabularySet
from lyrics_miner.services import LyricsLoaderService, TokenFilterService

logger = logging.getLogger(__name__)

PASTED_TEXT_SOURCE = "pasted text"


class LyricsProcessor:
    """Orchestrate vocabulary extraction for one mining session.

    The processor owns the session's :class:`VocabularySet`. Every paste or
    file load is merged into it, deletions go through :meth:`remove`, and
    :meth:`undo_last` takes back the entries the latest extraction added.
    """

    def __init__(
        self,
        config: LyricsMinerConfig,
        tokenizer: Tokenizer,
        token_filter: TokenFilterService,
        presenter: PresenterProtocol,
        lyrics_loader: LyricsLoaderService | None = None,
        vocabulary: VocabularySet | None = None,
    ):
        """Initialize the lyrics processor.

        Args:
            config: Configuration
            tokenizer: Morphological tokenizer
            token_filter: Token filtering service
            presenter: Output presenter
            lyrics_loader: Lyrics file loader (defaults to one built from config)
            vocabulary: Existing set to continue, or None to start empty
        """
        self.config = config
        self.tokenizer = tokenizer
        self.token_filter = token_filter
        self.presenter = presenter
        self.lyrics_loader = lyrics_loader or LyricsLoaderService(config)
        self.vocabulary = vocabulary if vocabulary is not None else VocabularySet()
        self._history: list[list[VocabularyEntry]] = []

    def process_text(self, text: str, source: str = PASTED_TEXT_SOURCE) -> ExtractionResult:
        """Extract vocabulary from raw lyric text into the session set.

        Args:
            text: Raw Japanese text
            source: Label for where the text came from

        Returns:
            ExtractionResult for this text

        Raises:
            TokenizerError: If tokenization fails
            TokenContractError: If the tokenizer produced a malformed token
        """
        start_time = time.time()

        tokens = self.tokenizer.tokenize(text)
        candidates = self.token_filter.filter_tokens(tokens)
        added = self.token_filter.merge(candidates, self.vocabulary)
        self._history.append(added)

        result = ExtractionResult(
            source=source,
            tokens_seen=len(tokens),
            candidates=len(candidates),
            new_entries=added,
            elapsed_time=time.time() - start_time,
        )
        logger.info(f"{result}")
        return result

    def process_file(self, lyrics_file: Path) -> ExtractionResult:
        """Load a lyrics file and extract its vocabulary into the session set.

        Raises:
            LyricsLoadError: If the file cannot be read
        """
        text = self.lyrics_loader.load(Path(lyrics_file))
        return self.process_text(text, source=str(lyrics_file))

    def process_files(
        self,
        lyrics_files: list[Path],
        progress_callback: ProgressCallback | None = None,
    ) -> list[ExtractionResult]:
        """Process several lyrics files, continuing past files that fail.

        Args:
            lyrics_files: Files to process in order
            progress_callback: Optional progress reporting

        Returns:
            Results for the files that were processed successfully
        """
        results = []
        if progress_callback:
            progress_callback.on_start(len(lyrics_files), "Extracting vocabulary")

        for i, lyrics_file in enumerate(lyrics_files, 1):
            name = Path(lyrics_file).name
            try:
                results.append(self.process_file(lyrics_file))
            except LyricsMinerException as e:
                logger.warning(f"Skipping {lyrics_file}: {e}")
                self.presenter.show_warning(f"Skipping {name}: {e}")
                if progress_callback:
                    progress_callback.on_error(name, str(e))
                continue
            if progress_callback:
                progress_callback.on_progress(i, name)

        if progress_callback:
            progress_callback.on_complete()
        return results

    def remove(self, entry: VocabularyEntry) -> bool:
        """Delete an entry from the session set.

        Returns:
            True if the entry was present
        """
        removed = self.vocabulary.remove(entry)
        if removed:
            for added in self._history:
                if entry in added:
                    added.remove(entry)
            logger.debug(f"Removed word: {entry}")
        return removed

    def undo_last(self) -> list[VocabularyEntry]:
        """Remove the entries added by the most recent extraction.

        Returns:
            Entries that were removed; empty if there is nothing to undo
        """
        if not self._history:
            return []
        added = self._history.pop()
        removed = [entry for entry in added if self.vocabulary.remove(entry)]
        logger.info(f"Undid last extraction ({len(removed)} entries)")
        return removed

    @property
    def can_undo(self) -> bool:
        """Check if there is an extraction to undo."""
        return bool(self._history)

    def entries(self) -> list[VocabularyEntry]:
        """Return the session vocabulary in the configured collation order."""
        return self.vocabulary.sorted_entries(legacy=self.config.legacy_collation)

    def sorted_written_forms(self) -> list[str]:
        """Return written forms in the configured collation order."""
        return self.vocabulary.sorted_written_forms(legacy=self.config.legacy_collation)
