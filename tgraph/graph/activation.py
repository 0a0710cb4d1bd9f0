# tgraph/graph/activation.py
"""
CANONICAL edge activation descriptors.

SINGLE SOURCE OF TRUTH for "when can this edge be taken".
Store, resolver and every algorithm go through these two methods:

- is_active_at(t): the edge exists in the snapshot at exactly t
- earliest_departure(t): the first time >= t the edge can be taken,
  or None if it never can again

Two descriptors implement the capability:

- DiscreteActivation: explicit set of integer timestamps, no weight
- IntervalActivation: closed range [start, end] with a non-negative weight
"""

from bisect import bisect_left
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple, Union


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a timestamp or weight
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class DiscreteActivation:
    """
    Edge active at an explicit set of timestamps.

    Timestamps are deduplicated and kept ascending so the
    earliest-not-before lookup is a binary search. Input that is not
    all integers is kept as given and fails is_valid().
    """
    times: Tuple[int, ...]

    @classmethod
    def from_times(cls, times: Iterable[int]) -> "DiscreteActivation":
        raw = tuple(times)
        if not all(_is_int(t) for t in raw):
            return cls(times=raw)
        return cls(times=tuple(sorted(set(raw))))

    @property
    def weight(self) -> int:
        return 0

    @property
    def last_time(self) -> int:
        return self.times[-1]

    def is_valid(self) -> bool:
        return len(self.times) > 0 and all(_is_int(t) for t in self.times)

    def is_active_at(self, t: int) -> bool:
        i = bisect_left(self.times, t)
        return i < len(self.times) and self.times[i] == t

    def earliest_departure(self, t: int) -> Optional[int]:
        i = bisect_left(self.times, t)
        if i == len(self.times):
            return None
        return self.times[i]


@dataclass(frozen=True)
class IntervalActivation:
    """
    Edge active over the closed range [start, end].

    Weight is constant for the whole range.
    """
    start: int
    end: int
    weight: int = 0

    def is_valid(self) -> bool:
        if not all(_is_int(v) for v in (self.start, self.end, self.weight)):
            return False
        return self.start <= self.end and self.weight >= 0

    def is_active_at(self, t: int) -> bool:
        return self.start <= t <= self.end

    def earliest_departure(self, t: int) -> Optional[int]:
        if t > self.end:
            return None
        return max(t, self.start)


Activation = Union[DiscreteActivation, IntervalActivation]
