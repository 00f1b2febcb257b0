"""
Tests for MarkovChain
"""
import pickle
import random
import threading

import pytest

from seqchain import MarkovChain, Outcome, Predictor


class FixedDraws:
    """Replays a fixed list of uniform draws."""

    def __init__(self, draws):
        self.draws = list(draws)

    def random(self):
        return self.draws.pop(0)


def P(*tokens):
    return Predictor(tokens)


class TestRecord:
    def test_length_mismatch(self):
        chain = MarkovChain(2)
        with pytest.raises(ValueError):
            chain.record(P("A"), "B")
        assert len(chain) == 0

    def test_negative_length(self):
        with pytest.raises(ValueError):
            MarkovChain(-1)

    def test_record_creates_predictor(self):
        chain = MarkovChain(1)
        chain.record(P("A"), "B")
        assert P("A") in chain
        assert chain.total(P("A")) == 1
        assert chain.total(P("Z")) == 0
        assert chain.predictor_length == 1

    def test_accepts_plain_sequences(self):
        chain = MarkovChain(1)
        chain.record(["A"], "B")
        chain.record(("A",), "C")
        assert P("A") in chain
        assert chain.sample_next(("A",), draw=0.1) == Outcome("B")

        for key in (("A",), ["A"]):
            assert key in chain
            assert chain.total(key) == 2
            assert chain.weights(key) == [("B", 0.5), ("C", 0.5)]
        assert ["Z"] not in chain
        assert chain.total(["Z"]) == 0
        assert chain.weights(("Z",)) is None

    def test_weights(self):
        chain = MarkovChain(1)
        chain.record(P("A"), "B")
        chain.record(P("A"), "C")
        assert chain.weights(P("A")) == [("B", 0.5), ("C", 0.5)]
        assert chain.weights(P("Z")) is None

    def test_items_in_recording_order(self):
        chain = MarkovChain(1)
        chain.record(P(None), "A")
        chain.record(P("A"), None)
        assert [predictor for predictor, _ in chain.items()] == [P(None), P("A")]


class TestSampleNext:
    def test_unseen_predictor(self):
        chain = MarkovChain(1)
        assert chain.sample_next(P("A")) is None

    @pytest.mark.parametrize("draw", [0.0, 0.25, 0.5, 0.999999])
    def test_single_observation(self, draw):
        chain = MarkovChain(1)
        chain.record(P("A"), "x")
        assert chain.sample_next(P("A"), draw=draw) == Outcome("x")

    def test_end_outcome_is_distinct_from_unseen(self):
        chain = MarkovChain(1)
        chain.record(P("A"), None)
        outcome = chain.sample_next(P("A"), draw=0.5)
        assert outcome is not None
        assert outcome.is_end
        assert outcome.token is None

    def test_even_split(self):
        chain = MarkovChain(1)
        chain.record(P("A"), "B")
        chain.record(P("A"), "C")
        assert chain.sample_next(P("A"), draw=0.3).token == "B"
        assert chain.sample_next(P("A"), draw=0.7).token == "C"

    def test_uses_chain_rng(self):
        chain = MarkovChain(1, rng=FixedDraws([0.1, 0.9]))
        chain.record(P("A"), "B")
        chain.record(P("A"), "C")
        assert chain.sample_next(P("A")).token == "B"
        assert chain.sample_next(P("A")).token == "C"


class TestGenerateSequence:
    def _chain(self):
        chain = MarkovChain(1)
        chain.record(P(None), "A")
        chain.record(P("A"), "B")
        chain.record(P("A"), None)
        chain.record(P("B"), None)
        return chain

    def test_zero_length(self):
        assert self._chain().generate_sequence(0) == []
        assert MarkovChain(1).generate_sequence(0) == []

    def test_negative_length(self):
        with pytest.raises(ValueError):
            self._chain().generate_sequence(-1)

    def test_empty_chain(self):
        assert MarkovChain(2).generate_sequence(10) == []

    def test_end_outcome_stops_without_token(self):
        # ["A"] -> [("B", 0.5), (None, 1.0)]; 0.9 selects the end
        seq = self._chain().generate_sequence(10, rng=FixedDraws([0.0, 0.9]))
        assert seq == ["A"]

    def test_follows_draws(self):
        seq = self._chain().generate_sequence(10, rng=FixedDraws([0.0, 0.2, 0.5]))
        assert seq == ["A", "B"]

    def test_max_length(self):
        chain = MarkovChain(1)
        chain.record(P(None), "A")
        chain.record(P("A"), "A")
        assert chain.generate_sequence(5) == ["A"] * 5

    def test_unseen_window_stops(self):
        chain = MarkovChain(1)
        chain.record(P(None), "A")
        assert chain.generate_sequence(5) == ["A"]

    def test_longer_windows(self):
        chain = MarkovChain(2)
        chain.record(P(None, None), "x")
        chain.record(P(None, "x"), "y")
        chain.record(P("x", "y"), "z")
        chain.record(P("y", "z"), None)
        assert chain.generate_sequence(10) == ["x", "y", "z"]

    def test_deterministic_with_seed(self):
        def build(seed):
            chain = MarkovChain(1, seed=seed)
            for name in ["ANNA", "ANNE", "BOB", "BELLA"]:
                window = Predictor.start(1)
                for token in name:
                    chain.record(window, token)
                    window = window.shifted(token)
                chain.record(window, None)
            return chain

        first, second = build(7), build(7)
        assert ([first.generate_sequence(8) for _ in range(20)]
                == [second.generate_sequence(8) for _ in range(20)])

    def test_generate_string(self):
        chain = MarkovChain(1)
        chain.record(P(None), "the")
        chain.record(P("the"), "cat")
        chain.record(P("cat"), None)
        assert chain.generate_string(10, glue=" ") == "the cat"
        assert chain.generate_string(10) == "thecat"
        assert chain.generate_string(1, glue=" ") == "the"


class TestChainState:
    def test_pickle_round_trip(self):
        chain = MarkovChain(1, seed=3)
        chain.record(P(None), "A")
        chain.record(P("A"), None)
        restored = pickle.loads(pickle.dumps(chain))
        assert restored.predictor_length == 1
        assert restored.weights(P(None)) == [("A", 1.0)]
        restored.record(P("A"), "B")
        assert restored.total(P("A")) == 2

    def test_concurrent_record_and_sample(self):
        chain = MarkovChain(1, rng=random.Random(0))
        chain.record(P("A"), "start")
        errors = []

        def writer():
            for i in range(2000):
                chain.record(P("A"), i % 17)

        def reader():
            try:
                for _ in range(2000):
                    assert chain.sample_next(P("A")) is not None
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=writer)] + [threading.Thread(target=reader) for _ in range(3)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not errors
        assert chain.total(P("A")) == 2001
        assert sum(share for _, share in chain.weights(P("A"))) == pytest.approx(1.0)
