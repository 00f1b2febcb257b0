from .sequential import SequentialFeeder
from .text import LineFeeder, NameFeeder, WordFeeder

FEEDERS = {
    'names': NameFeeder,
    'words': WordFeeder,
}

__all__ = ["SequentialFeeder", "LineFeeder", "NameFeeder", "WordFeeder", "FEEDERS"]
