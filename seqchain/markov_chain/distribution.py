"""
Cumulative weight table for the tokens that follow one predictor.

Outcomes are kept in first-seen order. Each outcome owns the band
(previous cumulative weight, own cumulative weight] of [0, 1], and the band
width is that outcome's relative frequency. Sampling is a ceiling lookup on
the cumulative weights.
"""
from bisect import bisect_left


class Distribution:
    """
    Weighted set of outcomes following a single predictor.

    An outcome is either a token or None (the path may end here).
    """

    def __init__(self):
        self.total = 0
        self._weights = []   # cumulative, strictly increasing, last == 1.0
        self._outcomes = []

    @classmethod
    def from_entries(cls, entries, total):
        """
        Rebuilds a distribution from saved (cumulative_weight, outcome) pairs.

        Args:
            entries: Ordered pairs, exactly as returned by `entries()`.
            total: Number of observations the entries were built from.

        Raises:
            ValueError: If the entries don't describe a valid distribution.
        """
        entries = [(float(weight), outcome) for weight, outcome in entries]
        if not entries:
            raise ValueError("Distribution needs at least one entry")
        if isinstance(total, bool) or not isinstance(total, int):
            raise ValueError(f"Distribution total must be an integer, got {total!r}")
        if total < 1:
            raise ValueError(f"Distribution total must be at least 1, got {total}")
        previous = 0.0
        for weight, _ in entries:
            if weight <= previous:
                raise ValueError("Cumulative weights must be strictly increasing and positive")
            previous = weight
        if entries[-1][0] != 1.0:
            raise ValueError(f"Last cumulative weight must be 1.0, got {entries[-1][0]!r}")
        outcomes = [outcome for _, outcome in entries]
        if len(set(outcomes)) != len(outcomes):
            raise ValueError("Distribution entries contain a repeated outcome")

        dist = cls()
        dist.total = total
        dist._weights = [weight for weight, _ in entries]
        dist._outcomes = outcomes
        return dist

    def record(self, outcome):
        """
        Adds one observation of `outcome` and rescales every band for the
        new total.

        Each existing band's count is recovered from its width times the old
        total, bumped if it is the recorded outcome, divided by the new total
        and re-accumulated. A previously unseen outcome is appended with the
        remaining share. The last band always ends at exactly 1.0.
        """
        old_total = self.total
        new_total = old_total + 1

        weights = []
        old_accum = 0.0
        new_accum = 0.0
        seen = False
        for weight, value in zip(self._weights, self._outcomes):
            is_outcome = value == outcome
            count = (weight - old_accum) * old_total + (1 if is_outcome else 0)
            old_accum = weight
            new_accum += count / new_total
            weights.append(new_accum)
            seen |= is_outcome

        outcomes = list(self._outcomes)
        if seen:
            weights[-1] = 1.0
        else:
            weights.append(1.0)
            outcomes.append(outcome)

        # Swap in the rebuilt table in one step
        self._weights = weights
        self._outcomes = outcomes
        self.total = new_total

    def sample(self, draw):
        """Returns the outcome whose band contains `draw`, a float in [0, 1)."""
        if not 0.0 <= draw < 1.0:
            raise ValueError(f"Draw must be in [0, 1), got {draw!r}")
        return self._outcomes[bisect_left(self._weights, draw)]

    def entries(self):
        """Ordered (cumulative_weight, outcome) pairs."""
        return list(zip(self._weights, self._outcomes))

    def weights(self):
        """Ordered (outcome, share) pairs, where shares sum to 1."""
        spans = []
        previous = 0.0
        for weight, outcome in zip(self._weights, self._outcomes):
            spans.append((outcome, weight - previous))
            previous = weight
        return spans

    def __len__(self):
        return len(self._outcomes)

    def __contains__(self, outcome):
        return outcome in self._outcomes

    def __eq__(self, other):
        if not isinstance(other, Distribution):
            return NotImplemented
        return (self.total == other.total
                and self._weights == other._weights
                and self._outcomes == other._outcomes)

    def __repr__(self):
        return f"Distribution(total={self.total}, entries={self.entries()!r})"
