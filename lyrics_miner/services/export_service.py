"""Export service for vocabulary data in various formats."""

import csv
import logging
from pathlib import Path

from lyrics_miner.config import LyricsMinerConfig
from lyrics_miner.exceptions import ExportError
from lyrics_miner.models import VocabularyEntry

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("csv", "tsv", "list")


class ExportService:
    """Export vocabulary to CSV, TSV, and plain word list formats.

    Entries are written in the order given; callers pass them already sorted.
    """

    def __init__(self, config: LyricsMinerConfig):
        self.config = config

    def export(self, entries: list[VocabularyEntry], output_path: Path, fmt: str = "csv") -> int:
        """Export entries in the named format.

        Args:
            entries: Entries to export
            output_path: Destination file
            fmt: One of "csv", "tsv" or "list"

        Returns:
            Number of entries written

        Raises:
            ExportError: If the format is unknown or the file cannot be written
        """
        if fmt == "csv":
            return self.export_csv(entries, output_path)
        if fmt == "tsv":
            return self.export_tsv(entries, output_path)
        if fmt == "list":
            return self.export_word_list(entries, output_path)
        raise ExportError(f"Unknown export format: {fmt!r} (expected one of {EXPORT_FORMATS})")

    def export_csv(self, entries: list[VocabularyEntry], output_path: Path) -> int:
        """Export entries to CSV with written form and reading columns.

        Returns:
            Number of rows written (excluding header)
        """
        return self._write_delimited(entries, output_path, ",")

    def export_tsv(self, entries: list[VocabularyEntry], output_path: Path) -> int:
        """Export entries to TSV, suitable for Anki's text import.

        Returns:
            Number of rows written (excluding header)
        """
        return self._write_delimited(entries, output_path, "\t")

    def export_word_list(self, entries: list[VocabularyEntry], output_path: Path) -> int:
        """Export written forms, one per line.

        Returns:
            Number of lines written
        """
        lines = [entry.written_form for entry in entries]
        try:
            Path(output_path).write_text(
                "\n".join(lines) + "\n" if lines else "", encoding="utf-8"
            )
        except OSError as e:
            raise ExportError(f"Failed to write {output_path}: {e}") from e
        logger.info(f"Exported {len(lines)} words to {output_path}")
        return len(lines)

    def _write_delimited(
        self,
        entries: list[VocabularyEntry],
        output_path: Path,
        delimiter: str,
    ) -> int:
        """Write entries to a delimited file (CSV or TSV).

        Args:
            entries: Entries to export
            output_path: Path for the output file
            delimiter: Field delimiter ("," for CSV, "\\t" for TSV)

        Returns:
            Number of data rows written (excluding header)
        """
        try:
            with open(output_path, "w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f, delimiter=delimiter)
                writer.writerow(["Written Form", "Reading"])
                for entry in entries:
                    writer.writerow([entry.written_form, entry.reading])
        except OSError as e:
            raise ExportError(f"Failed to write {output_path}: {e}") from e

        logger.info(f"Exported {len(entries)} entries to {output_path}")
        return len(entries)
