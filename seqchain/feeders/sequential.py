from ..markov_chain import Predictor


class SequentialFeeder:
    """
    Feeds paths into a MarkovChain one token at a time.

    The feeder keeps the last `predictor_length` tokens as its window. At the
    start of every path the window is all None, so the tokens recorded there
    are the ones generation may begin with.
    """

    def __init__(self, chain):
        self.chain = chain
        self.paths = 0
        self._prime()

    @property
    def window(self):
        return self._window

    def register_token(self, token):
        """Records `token` as following the current window, then slides the window."""
        self.chain.record(self._window, token)
        self._window = self._window.shifted(token)
        return self

    def end_path(self):
        """
        Records that a path may end after the current window and starts a
        new path.
        """
        self.chain.record(self._window, None)
        self.paths += 1
        self._prime()
        return self

    def feed_sequence(self, tokens):
        """Registers every token in `tokens` as one complete path."""
        for token in tokens:
            self.register_token(token)
        return self.end_path()

    def _prime(self):
        self._window = Predictor.start(self.chain.predictor_length)
