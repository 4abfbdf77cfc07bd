"""
Lyrics Miner - Japanese Vocabulary Extraction from Song Lyrics

A tool for turning Japanese song lyrics into a deduplicated,
collation-ordered list of vocabulary entries ready for study cards.
"""

__version__ = "1.0.0"
__author__ = "Lyrics Miner Contributors"
