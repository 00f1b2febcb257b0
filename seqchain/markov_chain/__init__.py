from .predictor import Predictor
from .distribution import Distribution
from .markov_chain import MarkovChain, Outcome
from .persistence import save_chain, load_chain

__all__ = ["Predictor", "Distribution", "MarkovChain", "Outcome", "save_chain", "load_chain"]
