"""Walker/Vose alias method for O(1) weighted draws.

Construction is O(n): probabilities are scaled by n and split into "small"
(< 1) and "large" (>= 1) columns, and each small column is topped up by
a large one, recording the donor as its alias. A draw picks a column
uniformly and keeps it with probability ``prob[i]``, else takes the alias.
"""

from collections.abc import Hashable, Sequence
from typing import Generic, TypeVar

import numpy as np

T = TypeVar("T", bound=Hashable)


class AliasSampler(Generic[T]):
    """Immutable weighted sampler over a fixed set of items.

    Args:
        items: Items to draw from.
        weights: Non-negative finite weights, one per item, not all zero.

    Raises:
        ValueError: On empty input, length mismatch, negative or non-finite
            weights, or zero total weight.
    """

    def __init__(self, items: Sequence[T], weights: Sequence[float]) -> None:
        w = np.asarray(weights, dtype=np.float64)
        if len(items) == 0:
            raise ValueError("AliasSampler needs at least one item")
        if w.shape != (len(items),):
            raise ValueError(
                f"Got {len(items)} items but weights of shape {w.shape}"
            )
        if not np.all(np.isfinite(w)) or (w < 0).any():
            raise ValueError("Weights must be finite and non-negative")
        total = w.sum()
        if total <= 0:
            raise ValueError("Weights must not all be zero")

        self._items: list[T] = list(items)
        n = len(self._items)
        self._probabilities = w / total

        scaled = self._probabilities * n
        prob = np.ones(n, dtype=np.float64)
        alias = np.arange(n, dtype=np.int64)

        small = [i for i in range(n) if scaled[i] < 1.0]
        large = [i for i in range(n) if scaled[i] >= 1.0]
        while small and large:
            s = small.pop()
            big = large.pop()
            prob[s] = scaled[s]
            alias[s] = big
            scaled[big] = (scaled[big] + scaled[s]) - 1.0
            if scaled[big] < 1.0:
                small.append(big)
            else:
                large.append(big)
        # leftovers are 1 up to rounding error
        for i in small + large:
            prob[i] = 1.0

        self._prob = prob
        self._alias = alias

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> list[T]:
        return list(self._items)

    @property
    def probabilities(self) -> np.ndarray:
        """Normalized target distribution, aligned with ``items``."""
        return self._probabilities.copy()

    def sample_index(self, rng: np.random.Generator) -> int:
        i = int(rng.integers(len(self._items)))
        if rng.random() < self._prob[i]:
            return i
        return int(self._alias[i])

    def sample(self, rng: np.random.Generator) -> T:
        return self._items[self.sample_index(rng)]
