"""Service for turning tokens into vocabulary entries."""

import logging
from collections.abc import Iterable

from lyrics_miner.config import LyricsMinerConfig, create_default_config
from lyrics_miner.exceptions import TokenContractError
from lyrics_miner.models import TokenLike, VocabularyEntry, VocabularySet
from lyrics_miner.utils import is_digits_only, is_kana_only

logger = logging.getLogger(__name__)


class TokenFilterService:
    """Filter tokenizer output down to vocabulary entries (stateless service).

    A token survives when its written base form is not kana-only, not
    digits-only, and not one of the denylisted glyphs. Every test is a
    full match against the whole form.
    """

    def __init__(self, config: LyricsMinerConfig):
        """Initialize the token filter.

        Args:
            config: Configuration holding the glyph denylist
        """
        self.config = config
        self._denylist = frozenset(config.denylisted_forms)

    def rejection_reason(self, written_form: str) -> str | None:
        """Explain why a written form is not vocabulary.

        Args:
            written_form: Token's written base form

        Returns:
            Name of the rule that rejects the form, or None if it survives
        """
        if is_kana_only(written_form):
            return "kana-only"
        if is_digits_only(written_form):
            return "digits-only"
        if written_form in self._denylist:
            return "denylisted"
        return None

    def is_vocabulary(self, written_form: str) -> bool:
        """Check if a written form passes every filter."""
        return self.rejection_reason(written_form) is None

    def to_entry(self, token: TokenLike) -> VocabularyEntry:
        """Map a token to a vocabulary entry.

        Args:
            token: Token exposing ``written_base_form`` and ``kana_base_form``

        Returns:
            Entry keyed by the token's base forms

        Raises:
            TokenContractError: If either base form is missing or not a string
        """
        written_form = self._require_form(token, "written_base_form")
        reading = self._require_form(token, "kana_base_form")
        return VocabularyEntry(written_form=written_form, reading=reading)

    def filter_tokens(self, tokens: Iterable[TokenLike]) -> set[VocabularyEntry]:
        """Filter tokens and collect the surviving entries.

        Args:
            tokens: Tokenizer output

        Returns:
            Distinct entries for every surviving token

        Raises:
            TokenContractError: If a token is malformed
        """
        candidates: set[VocabularyEntry] = set()
        for token in tokens:
            entry = self.to_entry(token)
            reason = self.rejection_reason(entry.written_form)
            if reason is not None:
                logger.debug(f"Skipped token {entry.written_form!r}: {reason}")
                continue
            candidates.add(entry)
        return candidates

    def merge(
        self,
        candidates: Iterable[VocabularyEntry],
        existing: VocabularySet,
    ) -> list[VocabularyEntry]:
        """Add candidates to a vocabulary set.

        Args:
            candidates: Entries to add
            existing: Set that accumulates the session's vocabulary

        Returns:
            Entries that were not already present and got inserted
        """
        added = [entry for entry in candidates if existing.add(entry)]
        for entry in added:
            logger.debug(f"Added word: {entry}")
        return added

    def extract_vocabulary(
        self,
        tokens: Iterable[TokenLike],
        existing: VocabularySet,
    ) -> set[VocabularyEntry]:
        """Filter tokens into vocabulary entries and merge them into a set.

        Args:
            tokens: Tokenizer output
            existing: Set that accumulates the session's vocabulary

        Returns:
            All distinct surviving entries, including ones already in ``existing``

        Raises:
            TokenContractError: If a token is malformed
        """
        candidates = self.filter_tokens(tokens)
        added = self.merge(candidates, existing)
        logger.info(f"Extracted {len(candidates)} candidates, {len(added)} new")
        return candidates

    @staticmethod
    def _require_form(token: TokenLike, attribute: str) -> str:
        value = getattr(token, attribute, None)
        if not isinstance(value, str):
            raise TokenContractError(
                f"Token {token!r} has no usable {attribute} (got {type(value).__name__})"
            )
        return value


def extract_vocabulary(
    tokens: Iterable[TokenLike],
    existing: VocabularySet,
    config: LyricsMinerConfig | None = None,
) -> set[VocabularyEntry]:
    """Filter tokens into vocabulary entries and merge them into ``existing``.

    Convenience wrapper around :meth:`TokenFilterService.extract_vocabulary`.
    """
    service = TokenFilterService(config or create_default_config())
    return service.extract_vocabulary(tokens, existing)
