from __future__ import annotations
from datetime import datetime, timedelta
from typing import Callable, Iterable, Iterator, Optional, Tuple

TimeFn = Callable[[datetime], float]


def scan(start: datetime, end: datetime, step: timedelta) -> Iterator[datetime]:
    """Sample instants start, start+step, ... up to and including end."""
    n = int((end - start) / step)
    for i in range(n + 1):
        yield start + i * step


def bisect_crossing(f: TimeFn, a: datetime, b: datetime, *, iters: int) -> datetime:
    """Bisection for a sign change of f inside [a, b].

    Keeps the half whose left end has the same sign as the midpoint
    (zero counts as either sign) and returns the right end after iters
    halvings: ten minutes / 2**14 is well under a second.
    """
    left, right = a, b
    yl = f(left)
    for _ in range(iters):
        mid = left + (right - left) / 2
        ym = f(mid)
        if (yl <= 0 and ym <= 0) or (yl >= 0 and ym >= 0):
            left, yl = mid, ym
        else:
            right = mid
    return right


def argmin_scan(f: TimeFn, samples: Iterable[datetime]) -> Optional[Tuple[datetime, float]]:
    """First sample with the smallest f; None for an empty sample set."""
    best_t: Optional[datetime] = None
    best = float("inf")
    for t in samples:
        v = f(t)
        if v < best:
            best, best_t = v, t
    if best_t is None:
        return None
    return best_t, best
