"""Initial node placement for the Remez exchange."""

from __future__ import annotations

from typing import List

import numpy as np

from pyminimax.field import RealFieldElement
from pyminimax.interval import ClosedInterval


def chebyshev_nodes(size: int, interval: ClosedInterval) -> List[RealFieldElement]:
    """Create *size* ascending nodes on *interval*, clustered towards the ends.

    The nodes are the Chebyshev extrema ``mid + half_gap * cos(pi * k / (size - 1))``
    taken in ascending order, with the two outer nodes set exactly to the
    interval boundaries.

    Parameters
    ----------
    size : int
        Number of nodes, at least 2.
    interval : ClosedInterval
        Interval to place the nodes in.

    Returns
    -------
    list of RealFieldElement
        ``size`` nodes, ``nodes[0] == interval.lower`` and
        ``nodes[-1] == interval.upper``.
    """
    if size < 2:
        raise ValueError(f"size must be >= 2, got {size}")

    lower = interval.lower
    upper = interval.upper
    half_gap = upper.minus(lower).times(0.5)
    mid = lower.plus(half_gap)

    # i = 1 .. size-2 uses k = size-1-i, so cosines run from -1 towards 1
    k = np.arange(size - 2, 0, -1)
    cosines = np.cos(np.pi * k / (size - 1))

    out = interval.field().create_array(size)
    for i in range(1, size - 1):
        out[i] = half_gap.times(float(cosines[i - 1])).plus(mid)
    out[0] = lower
    out[size - 1] = upper
    return out
