"""Presenter protocol for output abstraction."""

from typing import Protocol

from lyrics_miner.models import ExtractionResult, VocabularyEntry


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (CLI, GUI, etc).

    This protocol abstracts all output operations, allowing the same
    mining logic to work with different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_extraction_result(self, result: ExtractionResult) -> None:
        """Display the outcome of extracting vocabulary from one source.

        Args:
            result: The extraction result to display
        """
        ...

    def show_vocabulary(self, entries: list[VocabularyEntry], show_readings: bool = False) -> None:
        """Display vocabulary entries in the order given.

        Args:
            entries: Entries, already sorted
            show_readings: Show a reading column next to each written form
        """
        ...
