class Predictor:
    """
    An immutable, fixed-length window of tokens used as a lookup key in a
    MarkovChain.

    Elements may be None, which marks a position before the start of a path.
    The length is not checked here; the chain rejects predictors whose length
    does not match its own.
    """
    __slots__ = ('_elements', '_hash')

    def __init__(self, elements):
        if elements is None:
            raise ValueError("Predictor elements must not be None")
        # Copy so later changes to the caller's list don't leak in
        self._elements = tuple(elements)
        self._hash = hash(self._elements)

    @classmethod
    def start(cls, length):
        """Returns the window that begins every path: `length` None sentinels."""
        if length < 0:
            raise ValueError(f"Predictor length must be non-negative, got {length}")
        return cls((None,) * length)

    def shifted(self, token):
        """
        Returns the next window: drops the oldest element and appends `token`.
        A zero-length predictor stays empty.
        """
        if not self._elements:
            return self
        return Predictor(self._elements[1:] + (token,))

    def size(self):
        return len(self._elements)

    def get(self, index):
        if not 0 <= index < len(self._elements):
            raise IndexError(f"Predictor index {index} out of range for size {len(self._elements)}")
        return self._elements[index]

    def first(self):
        return self.get(0)

    def last(self):
        return self.get(len(self._elements) - 1)

    def __len__(self):
        return len(self._elements)

    def __getitem__(self, index):
        return self._elements[index]

    def __iter__(self):
        return iter(self._elements)

    def __eq__(self, other):
        if not isinstance(other, Predictor):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self):
        return self._hash

    def __getstate__(self):
        return {"elements": self._elements}

    def __setstate__(self, state):
        self._elements = tuple(state["elements"])
        self._hash = hash(self._elements)

    def __repr__(self):
        return f"Predictor({list(self._elements)!r})"
