from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Sequence

from ..core.microbe import Microbe

if TYPE_CHECKING:
    from ..core.randomizer import Randomizer


@dataclass(slots=True)
class CollisionResult:
    living: List[Microbe] = field(default_factory=list)
    births: int = 0
    eaten: int = 0


def sort_by_size(moves: Sequence[Microbe]) -> List[Microbe]:
    # sorted() is stable, so equal sizes keep their pre-sort order.
    return sorted(moves, key=lambda microbe: microbe.size, reverse=True)


def resolve_collisions(moves: Sequence[Microbe], randomizer: "Randomizer") -> CollisionResult:
    """Sweep microbes largest first; each one eats every later microbe it touches.

    ``moves`` must already be ordered by descending size. Every eat spawns one
    offspring at a random point; offspring are placed ahead of their parent.
    """
    max_size = randomizer.config.microbe.max_size
    pending: List[Optional[Microbe]] = list(moves)
    result = CollisionResult()
    for i, predator in enumerate(pending):
        if predator is None:
            continue
        for j in range(i + 1, len(pending)):
            prey = pending[j]
            if prey is None or not predator.collides(prey):
                continue
            predator = predator.eat(prey, max_size)
            pending[j] = None
            result.living.append(predator.reproduce(randomizer.random_point(), randomizer))
            result.births += 1
            result.eaten += 1
        result.living.append(predator)
    return result
