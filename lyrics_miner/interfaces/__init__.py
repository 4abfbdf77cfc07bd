"""Interface protocols for Lyrics Miner."""

from .presenter import PresenterProtocol
from .progress import ProgressCallback
from .tokenizer import Tokenizer

__all__ = ["PresenterProtocol", "ProgressCallback", "Tokenizer"]
