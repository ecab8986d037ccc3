from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, Tuple, TypeVar

V = TypeVar("V", bound=Hashable)


@dataclass(frozen=True)
class Edge(Generic[V]):
    """
    Directed connection from source to target.
    """

    source: V
    target: V

    def as_tuple(self) -> Tuple[V, V]:
        return (self.source, self.target)
