from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")

A = 16807
M = 0x7FFFFFFF  # 2^31-1

def pm_next(state: int) -> int:
    return (state * A) % M

def state_from_seed(seed: int) -> int:
    """
    Map any int seed onto the valid Park–Miller state range 1..M-1.
    Zero and negative seeds are accepted; distinct seeds below M-1 stay distinct.
    """
    return (seed % (M - 1)) + 1

@dataclass
class PMRandom:
    state: int

    @classmethod
    def from_seed(cls, seed: int) -> "PMRandom":
        return cls(state_from_seed(seed))

    def next31(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def below(self, n: int) -> int:
        """Return an int in [0, n)."""
        if n <= 0:
            raise ValueError(f"below() needs a positive bound, got {n}")
        return self.next31() % n

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.below(len(seq))]
