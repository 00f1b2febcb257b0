import logging
import random
import threading
from typing import NamedTuple, Optional, Hashable

from .distribution import Distribution
from .predictor import Predictor

logger = logging.getLogger(__name__)


def _as_predictor(value):
    return value if isinstance(value, Predictor) else Predictor(value)


class Outcome(NamedTuple):
    """
    A token drawn from a chain. `token` is None when the draw selected the
    end of a path.
    """
    token: Optional[Hashable]

    @property
    def is_end(self):
        return self.token is None


class MarkovChain:
    """
    Maps fixed-length predictors to the weighted set of tokens observed after
    them, and generates new sequences from those weights.
    """

    def __init__(self, predictor_length, rng=None, seed=None):
        """
        Args:
            predictor_length (int): Number of tokens in every predictor.
            rng (random.Random, optional): Source of uniform draws. Anything
                with a `random()` method works.
            seed (optional): Seed for a private `random.Random` when no rng is given.
        """
        if predictor_length < 0:
            raise ValueError(f"Predictor length must be non-negative, got {predictor_length}")
        self._predictor_length = predictor_length
        self._distributions = {}
        self.rng = rng if rng is not None else random.Random(seed)
        self._lock = threading.RLock()

    @property
    def predictor_length(self):
        return self._predictor_length

    def record(self, predictor, next_token):
        """
        Adds one (predictor, next token) observation. Pass None as
        `next_token` to mark that a path may end after `predictor`.
        """
        predictor = _as_predictor(predictor)
        if len(predictor) != self._predictor_length:
            raise ValueError(
                f"Predictor length {len(predictor)} does not match chain length {self._predictor_length}"
            )
        with self._lock:
            dist = self._distributions.get(predictor)
            if dist is None:
                dist = Distribution()
                self._distributions[predictor] = dist
                logger.debug(f"New predictor {predictor!r}")
            dist.record(next_token)

    def sample_next(self, predictor, draw=None):
        """
        Draws a token to follow `predictor`.

        Returns:
            None if the predictor was never recorded, otherwise an Outcome.
            An Outcome whose token is None means the path ends here.
        """
        predictor = _as_predictor(predictor)
        with self._lock:
            dist = self._distributions.get(predictor)
            if dist is None:
                return None
            if draw is None:
                draw = self.rng.random()
            return Outcome(dist.sample(draw))

    def generate_sequence(self, max_length, rng=None):
        """
        Generates up to `max_length` tokens, starting from a window of None
        sentinels. Stops early on an end outcome or an unseen window.
        """
        if max_length < 0:
            raise ValueError(f"max_length must be non-negative, got {max_length}")
        rng = rng if rng is not None else self.rng

        seq = []
        window = Predictor.start(self._predictor_length)
        while len(seq) < max_length:
            outcome = self.sample_next(window, draw=rng.random())
            if outcome is None or outcome.is_end:
                break
            seq.append(outcome.token)
            window = window.shifted(outcome.token)
        return seq

    def generate_string(self, max_length, glue="", rng=None):
        """Generates a sequence and joins its tokens with `glue`."""
        return glue.join(str(token) for token in self.generate_sequence(max_length, rng=rng))

    def weights(self, predictor):
        """Ordered (outcome, share) pairs for `predictor`, or None if unseen."""
        predictor = _as_predictor(predictor)
        with self._lock:
            dist = self._distributions.get(predictor)
            return None if dist is None else dist.weights()

    def total(self, predictor):
        """Number of observations recorded for `predictor`."""
        predictor = _as_predictor(predictor)
        with self._lock:
            dist = self._distributions.get(predictor)
            return 0 if dist is None else dist.total

    def items(self):
        """Snapshot of (Predictor, Distribution) pairs in recording order."""
        with self._lock:
            return list(self._distributions.items())

    def _restore(self, predictor, dist):
        # Used by the persistence layer; bypasses recording.
        if len(predictor) != self._predictor_length:
            raise ValueError(
                f"Predictor length {len(predictor)} does not match chain length {self._predictor_length}"
            )
        with self._lock:
            self._distributions[predictor] = dist

    def __len__(self):
        return len(self._distributions)

    def __contains__(self, predictor):
        return _as_predictor(predictor) in self._distributions

    def __getstate__(self):
        state = self.__dict__.copy()
        del state['_lock']
        return state

    def __setstate__(self, state):
        self.__dict__.update(state)
        self._lock = threading.RLock()
