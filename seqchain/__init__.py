"""
seqchain - variable-order Markov chains over token sequences, for generating
names and short texts.
"""

__version__ = "0.1.0"

from .markov_chain import MarkovChain, Predictor, Distribution, Outcome, save_chain, load_chain
from .feeders import SequentialFeeder, NameFeeder, WordFeeder

__all__ = [
    "MarkovChain",
    "Predictor",
    "Distribution",
    "Outcome",
    "save_chain",
    "load_chain",
    "SequentialFeeder",
    "NameFeeder",
    "WordFeeder",
]
