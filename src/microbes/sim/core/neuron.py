from __future__ import annotations

from typing import Sequence, Tuple

from ...rng import SimulationRng

Weights = Tuple[Tuple[float, ...], ...]


class NeuralUnit:
    """One dense linear stage of a brain: ``output[j] = sum_i input[i] * weights[i][j]``.

    No bias and no activation. Weights are frozen at construction; ``mutate``
    always returns a new unit.
    """

    __slots__ = ("_weights",)

    def __init__(self, weights: Sequence[Sequence[float]]):
        rows = tuple(tuple(float(w) for w in row) for row in weights)
        if not rows:
            raise ValueError("NeuralUnit needs at least one row of weights")
        size = len(rows)
        for row in rows:
            if len(row) != size:
                raise ValueError(f"NeuralUnit weights must be square, got a row of {len(row)} in a {size}-row matrix")
        self._weights: Weights = rows

    @property
    def weights(self) -> Weights:
        return self._weights

    @property
    def size(self) -> int:
        return len(self._weights)

    def evaluate(self, inputs: Sequence[float]) -> Tuple[float, ...]:
        if len(inputs) != len(self._weights):
            raise ValueError(f"NeuralUnit expects {len(self._weights)} inputs, got {len(inputs)}")
        output = [0.0] * len(self._weights)
        for value, row in zip(inputs, self._weights):
            for j, weight in enumerate(row):
                output[j] += value * weight
        return tuple(output)

    def mutate(self, rng: SimulationRng, rate: float, magnitude: float) -> "NeuralUnit":
        # A weight survives untouched when the draw falls at or below ``rate``.
        weights = []
        for row in self._weights:
            next_row = []
            for weight in row:
                if rng.next_float() > rate:
                    next_row.append(rng.next_range(-magnitude, magnitude) + weight)
                else:
                    next_row.append(weight)
            weights.append(next_row)
        return NeuralUnit(weights)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NeuralUnit):
            return NotImplemented
        return self._weights == other._weights

    def __hash__(self) -> int:
        return hash(self._weights)

    def __repr__(self) -> str:
        return f"NeuralUnit(size={self.size})"
