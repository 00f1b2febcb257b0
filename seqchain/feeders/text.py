"""
Line-oriented feeders: every non-blank line of input is one path.

NameFeeder treats each character as a token, which suits name lists.
WordFeeder treats each whitespace-separated word as a token, which suits
sentences or short texts.
"""
import logging
from pathlib import Path

from tqdm import tqdm

from .sequential import SequentialFeeder

logger = logging.getLogger(__name__)


def _iter_lines(source):
    # A str or Path is a file name; anything else is an iterable of lines
    if isinstance(source, (str, Path)):
        with open(source, 'r', encoding='utf-8') as f:
            yield from f
    else:
        yield from source


class LineFeeder(SequentialFeeder):
    """Base class for feeders that read one path per line."""

    def tokenize(self, line):
        raise NotImplementedError

    def feed(self, source, progress=False):
        """
        Reads paths from `source` into the chain.

        Args:
            source: A file path, an open text file, or any iterable of lines.
            progress (bool): Show a tqdm progress bar.

        Returns:
            int: Number of paths fed.
        """
        lines = _iter_lines(source)
        if progress:
            lines = tqdm(lines, desc="Feeding", unit="line")

        fed = 0
        for line in lines:
            tokens = self.tokenize(line)
            if not tokens:
                continue
            self.feed_sequence(tokens)
            fed += 1
        logger.debug(f"Fed {fed} paths into chain ({len(self.chain)} predictors)")
        return fed


class NameFeeder(LineFeeder):
    """Reads a newline-separated list of names, one character per token."""

    def tokenize(self, line):
        return list(line.strip().upper())


class WordFeeder(LineFeeder):
    """Reads lines of text, one word per token."""

    def tokenize(self, line):
        return line.split()
