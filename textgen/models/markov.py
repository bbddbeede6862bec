"""Order-1 word-level Markov text generator."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

import torch

from textgen.data.tokenizer import WordTokenizer


logger = logging.getLogger(__name__)


def make_generator(seed: int) -> torch.Generator:
    """Create a CPU random source seeded with ``seed``."""
    return torch.Generator().manual_seed(seed)


@dataclass
class WordEntry:
    """A word and the words observed right after it during training."""
    word: str
    next_words: List[str] = field(default_factory=list)

    def add_next_word(self, word: str) -> None:
        self.next_words.append(word)

    def random_next_word(self, generator: torch.Generator) -> str:
        """Pick a successor uniformly, so repeated successors weigh more."""
        idx = torch.randint(len(self.next_words), (1,), generator=generator).item()
        return self.next_words[idx]

    def __str__(self) -> str:
        return f"{self.word}: " + "".join(f"{w}->" for w in self.next_words) + "\n"


class MarkovTextGenerator:
    """Generates text by a random walk over word-adjacency statistics.

    Training links every word to the word that follows it and, at the end
    of each pass, links the last word back to the first one (the starter).
    That closing link means every word reachable during generation has at
    least one successor, so generation never stalls.
    """

    def __init__(
        self,
        rng: Union[int, torch.Generator],
        tokenizer: Optional[WordTokenizer] = None,
    ):
        """
        Args:
            rng: Seed or random source used for every generation run
            tokenizer: Tokenizer for training text (default: WordTokenizer)
        """
        if isinstance(rng, int):
            rng = make_generator(rng)
        elif not isinstance(rng, torch.Generator):
            raise TypeError(f"rng must be an int seed or torch.Generator, not {type(rng).__name__}")
        self.generator = rng
        self.tokenizer = tokenizer or WordTokenizer()
        self.entries: Dict[str, WordEntry] = {}
        self.starter = ""

    @property
    def is_trained(self) -> bool:
        return self.starter != ""

    def train(self, text: str) -> None:
        """Add the word links found in ``text`` to the model.

        Calling this again on a trained model accumulates links and moves
        the starter to the first word of the new text. Use ``retrain`` to
        start over.
        """
        starter = self._link(self.tokenizer.tokenize(text), self.entries)
        if starter:
            self.starter = starter

    def retrain(self, text: str) -> None:
        """Discard the model and train from scratch on ``text``."""
        entries: Dict[str, WordEntry] = {}
        starter = self._link(self.tokenizer.tokenize(text), entries)
        logger.debug(f"Replacing model of {len(self.entries)} words with {len(entries)} words")
        self.entries, self.starter = entries, starter

    def generate_text(self, num_words: int) -> str:
        """Generate ``num_words`` space separated words.

        Returns an empty string when the model is untrained or
        ``num_words`` is not positive.
        """
        if not self.is_trained or num_words <= 0:
            return ""

        words = [self.starter]
        current = self.starter
        for _ in range(num_words - 1):
            current = self.entries[current].random_next_word(self.generator)
            words.append(current)
        return " ".join(words)

    def dump(self) -> Dict[str, List[str]]:
        """Return a copy of the word -> successors mapping, in insertion order."""
        return {word: list(entry.next_words) for word, entry in self.entries.items()}

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return "".join(str(entry) for entry in self.entries.values())

    @staticmethod
    def _link(tokens: List[str], entries: Dict[str, WordEntry]) -> str:
        """Record adjacency of ``tokens`` into ``entries`` and return the starter."""
        if not tokens:
            logger.debug("No words in training text, model left unchanged")
            return ""

        def entry_for(word: str) -> WordEntry:
            if word not in entries:
                entries[word] = WordEntry(word)
            return entries[word]

        starter = tokens[0]
        for prev, word in zip(tokens, tokens[1:]):
            entry_for(prev).add_next_word(word)
        entry_for(tokens[-1]).add_next_word(starter)

        logger.debug(f"Trained on {len(tokens)} words, {len(entries)} distinct")
        return starter
