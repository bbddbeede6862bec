"""Tokenization and text loading utilities."""

import logging
import re
from pathlib import Path
from typing import List, Union


logger = logging.getLogger(__name__)


class WordTokenizer:
    """Splits text into words made of ASCII letters and apostrophes.

    Case is preserved. Every other character (whitespace, digits,
    punctuation) separates tokens and is dropped.
    """

    pattern = re.compile(r"[A-Za-z']+")

    def tokenize(self, text: str) -> List[str]:
        """Convert text to a list of word tokens."""
        return self.pattern.findall(text)


def read_text(path: Union[str, Path]) -> str:
    """Read a training text file."""
    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()
    logger.debug(f"Read {len(text)} characters from {path}")
    return text
